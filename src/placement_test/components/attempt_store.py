# -*- coding: utf-8 -*-

"""
Attempt store for caching assembled placement test attempts.
This module defines the AttemptStore class, which provides a simple in-memory cache
for storing and retrieving assembled attempts based on unique cache keys.

Copyright (c) 2026 Yuta Wakui
Licensed under the MIT License.
"""

# File: src/placement_test/components/attempt_store.py
# Author: Yuta Wakui
# Date: 2026-01-29
# Description: Attempt store for caching assembled attempts

from dataclasses import dataclass, field
from typing import Dict, Hashable, Optional, Tuple
import logging

from placement_test.components.assembler import Attempt, assemble
from placement_test.components.catalog import ProficiencyLevel
from placement_test.components.pools import PoolCatalog

logger = logging.getLogger(__name__)

# (level_id, attempt_id, requested_count)
CacheKey = Tuple[str, str, int]


def make_cache_key(level: ProficiencyLevel, attempt_id: Hashable, requested_count: int) -> CacheKey:
    return (level.id, str(attempt_id), int(requested_count))


@dataclass
class AttemptStore:
    """
    Bounded cache of assembled attempts.

    An attempt depends only on its key and the pool content, so one store
    serves one pool catalog. When max_entries is reached the oldest attempt
    is dropped; None disables the bound.
    """
    attempts: Dict[CacheKey, Attempt] = field(default_factory=dict)
    catalog: Optional[PoolCatalog] = None
    max_entries: Optional[int] = 256

    def get(self, key: CacheKey) -> Attempt | None:
        """Cached attempt for key, or None if it was never stored or has been evicted."""
        attempt = self.attempts.get(key)

        if logger.isEnabledFor(logging.DEBUG):
            tag = "MISS" if attempt is None else "HIT"
            logger.debug("[AttemptStore][%s] level=%s attempt=%s requested=%d", tag, *key)

        return attempt

    def set(self, key: CacheKey, attempt: Attempt) -> None:
        """
        Keep an assembled attempt under key.

        Parameters
        ----------
        key : CacheKey
            (level_id, attempt_id, requested_count) the attempt was assembled for.
        attempt : Attempt
            Attempt to keep; replaces any attempt already stored under key.
        """
        self.attempts.pop(key, None)
        self.attempts[key] = attempt

        # dicts keep insertion order, so the first key is the oldest
        while self.max_entries is not None and len(self.attempts) > self.max_entries:
            evicted = next(iter(self.attempts))
            del self.attempts[evicted]
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("[AttemptStore][EVICT] level=%s attempt=%s requested=%d", *evicted)

    def get_or_assemble(self, level: ProficiencyLevel, attempt_id: Hashable, requested_count: int) -> Attempt:
        key = make_cache_key(level, attempt_id, requested_count)
        attempt = self.get(key)
        if attempt is None:
            attempt = assemble(level, attempt_id, requested_count, catalog=self.catalog)
            self.set(key, attempt)
        return attempt
