# -*- coding: utf-8 -*-

"""
Reproducible random number generation for placement test attempts.
This module provides the splitmix64 generator that drives attempt shuffling,
the FNV-1a-64 hash that turns an attempt identifier into a seed, and seed
derivation for simulated learners.

Copyright (c) 2026 Yuta Wakui
Licensed under the MIT License.
"""

# File: src/placement_test/components/rng.py
# Author: Yuta Wakui
# Date: 2026-01-29
# Description: Deterministic generator and seed derivation

import hashlib
from typing import Hashable

MASK_64 = 0xFFFFFFFFFFFFFFFF

GOLDEN_GAMMA = 0x9E3779B97F4A7C15
MIX_1 = 0xBF58476D1CE4E5B9
MIX_2 = 0x94D049BB133111EB

FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3


def fnv1a_64(text: str) -> int:
    """
    FNV-1a 64-bit hash of the UTF-8 encoding of text.

    Unlike the builtin hash(), the result does not depend on PYTHONHASHSEED
    and is stable across processes and platforms.
    """
    h = FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * FNV_PRIME) & MASK_64
    return h


def to_signed_64(value: int) -> int:
    value &= MASK_64
    return value - (1 << 64) if value & (1 << 63) else value


def make_attempt_seed(attempt_id: Hashable) -> int:
    """
    derive a signed 64-bit generator seed from an attempt identifier
    Parameters:
    ----------
    attempt_id: Hashable
        opaque attempt token (str, UUID, ...); converted with str()

    Returns:
    -------
    int
        signed 64-bit seed
    """
    return to_signed_64(fnv1a_64(str(attempt_id)))


def make_learner_seed(sim_seed: int, learner_id: Hashable) -> int:
    """
    generate a reproducible random seed for a simulated learner based on sim_seed and learner_id.
    Parameters:
    ----------
    sim_seed: int
        simulation random seed
    learner_id: Hashable
        learner identifier

    Returns:
    -------
    int
        generated random seed
    """
    seed_str = f"learner|{sim_seed}_{learner_id}".encode("utf-8")
    seed_hash = hashlib.sha256(seed_str).hexdigest()
    return int(seed_hash[:8], 16)  # convert to 32-bit integer


class SplitMix64:
    """
    splitmix64 pseudo-random generator.

    State is a 64-bit integer. A zero seed is replaced by GOLDEN_GAMMA so the
    stream never starts from the all-zero state. Not cryptographically secure.
    """

    def __init__(self, seed: int) -> None:
        seed &= MASK_64
        self._state = seed if seed != 0 else GOLDEN_GAMMA

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> int:
        """Return the next unsigned 64-bit draw."""
        self._state = (self._state + GOLDEN_GAMMA) & MASK_64
        z = self._state
        z = ((z ^ (z >> 30)) * MIX_1) & MASK_64
        z = ((z ^ (z >> 27)) * MIX_2) & MASK_64
        return z ^ (z >> 31)

    def below(self, bound: int) -> int:
        """Draw a value in [0, bound) by modulo reduction."""
        if bound <= 0:
            raise ValueError(f"bound must be positive: {bound}")
        return self.next() % bound
