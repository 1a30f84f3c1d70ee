# -*- coding: utf-8 -*-

"""
Level resolution policy.
This module maps a final placement test score to a recommended level using the
pass threshold and the fallback graph of the level catalog.

Copyright (c) 2026 Yuta Wakui
Licensed under the MIT License.
"""

# File: src/placement_test/components/resolver.py
# Author: Yuta Wakui
# Date: 2026-01-29
# Description: Threshold-and-fallback level resolution

from typing import Optional

from placement_test.components.catalog import ProficiencyLevel


def is_passed(level: ProficiencyLevel, score: float) -> bool:
    """The threshold is inclusive."""
    return score >= level.pass_threshold


def resolve(level: ProficiencyLevel, score: float) -> ProficiencyLevel:
    """
    recommend a level from the score of a test taken at level
    Parameters:
    ----------
    level: ProficiencyLevel
        tested level
    score: float
        fraction of questions answered correctly
    Returns:
    -------
    ProficiencyLevel
        level itself when passed or when it has no fallback, else its fallback
    """
    if is_passed(level, score):
        return level
    fallback = level.fallback_level
    return fallback if fallback is not None else level


def downgrade_target(tested_level: ProficiencyLevel) -> Optional[ProficiencyLevel]:
    """
    One-step manual downgrade offered to the learner.

    Always relative to the originally tested level and independent of the
    score, so it may differ from resolve().
    """
    return tested_level.fallback_level
