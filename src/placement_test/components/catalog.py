# -*- coding: utf-8 -*-

"""
Proficiency level catalog.
This module defines the fixed catalog of proficiency levels, the groups they
belong to and the fallback graph used to suggest an easier level after a
failed placement test.

Copyright (c) 2026 Yuta Wakui
Licensed under the MIT License.
"""

# File: src/placement_test/components/catalog.py
# Author: Yuta Wakui
# Date: 2026-01-29
# Description: Proficiency levels, groups and fallback graph

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

PASS_THRESHOLD = 0.6


class ProficiencyGroup(str, Enum):
    """
    Level groups. All levels in one group share the same question pool.
    """
    DOMESTIC_PRIMARY = "domestic_primary"
    DOMESTIC_MIDDLE = "domestic_middle"
    DOMESTIC_HIGH = "domestic_high"
    DOMESTIC_COLLEGE = "domestic_college"
    DOMESTIC_EXAM = "domestic_exam"
    DOMESTIC_DAILY = "domestic_daily"
    OVERSEAS_CAMBRIDGE = "overseas_cambridge"
    OVERSEAS_CEFR = "overseas_cefr"
    OVERSEAS_EXAM = "overseas_exam"


@dataclass(frozen=True)
class ProficiencyLevel:
    """
    One graded step of language competency.

    The fallback is stored as a level id (key into LEVELS), not as an object,
    so the graph can be checked and serialized without pointer chasing.
    """
    id: str
    group: ProficiencyGroup
    label: str
    vocab_estimate: int
    fallback_id: Optional[str] = None
    grade_number: Optional[int] = None
    pass_threshold: float = PASS_THRESHOLD

    @property
    def fallback_level(self) -> Optional["ProficiencyLevel"]:
        if self.fallback_id is None:
            return None
        return get_level(self.fallback_id)

    @property
    def is_floor(self) -> bool:
        return self.fallback_id is None


G = ProficiencyGroup

# (id, group, label, vocab_estimate, fallback_id, grade_number), in display order
_LEVEL_ROWS: List[Tuple[str, ProficiencyGroup, str, int, Optional[str], Optional[int]]] = [
    # domestic track
    ("primary1", G.DOMESTIC_PRIMARY, "Primary 1", 100, None, 1),
    ("primary2", G.DOMESTIC_PRIMARY, "Primary 2", 200, "primary1", 2),
    ("primary3", G.DOMESTIC_PRIMARY, "Primary 3", 350, "primary2", 3),
    ("primary4", G.DOMESTIC_PRIMARY, "Primary 4", 500, "primary3", 4),
    ("primary5", G.DOMESTIC_PRIMARY, "Primary 5", 650, "primary4", 5),
    ("primary6", G.DOMESTIC_PRIMARY, "Primary 6", 800, "primary5", 6),
    ("junior1", G.DOMESTIC_MIDDLE, "Junior 1", 1200, "primary6", 7),
    ("junior2", G.DOMESTIC_MIDDLE, "Junior 2", 1800, "junior1", 8),
    ("junior3", G.DOMESTIC_MIDDLE, "Junior 3", 2500, "junior2", 9),
    ("senior1", G.DOMESTIC_HIGH, "Senior 1", 3000, "junior3", 10),
    ("senior2", G.DOMESTIC_HIGH, "Senior 2", 3500, "senior1", 11),
    ("senior3", G.DOMESTIC_HIGH, "Senior 3", 4000, "senior2", 12),
    ("cet4", G.DOMESTIC_COLLEGE, "CET-4", 4500, "senior3", None),
    ("cet6", G.DOMESTIC_COLLEGE, "CET-6", 6000, "cet4", None),
    ("graduate", G.DOMESTIC_EXAM, "Graduate Entrance", 7000, "cet6", None),
    ("daily", G.DOMESTIC_DAILY, "Daily English", 3000, None, None),
    # overseas track
    ("ket", G.OVERSEAS_CAMBRIDGE, "KET", 1500, None, None),
    ("pet", G.OVERSEAS_CAMBRIDGE, "PET", 2500, "ket", None),
    ("fce", G.OVERSEAS_CAMBRIDGE, "FCE", 4000, "pet", None),
    ("cae", G.OVERSEAS_CAMBRIDGE, "CAE", 6000, "fce", None),
    ("cpe", G.OVERSEAS_CAMBRIDGE, "CPE", 8000, "cae", None),
    ("cefr_a1", G.OVERSEAS_CEFR, "CEFR A1", 800, None, None),
    ("cefr_a2", G.OVERSEAS_CEFR, "CEFR A2", 1500, "cefr_a1", None),
    ("cefr_b1", G.OVERSEAS_CEFR, "CEFR B1", 2500, "cefr_a2", None),
    ("cefr_b2", G.OVERSEAS_CEFR, "CEFR B2", 4000, "cefr_b1", None),
    ("cefr_c1", G.OVERSEAS_CEFR, "CEFR C1", 6000, "cefr_b2", None),
    ("cefr_c2", G.OVERSEAS_CEFR, "CEFR C2", 8000, "cefr_c1", None),
    ("ielts", G.OVERSEAS_EXAM, "IELTS", 7000, "cefr_b2", None),
    ("toefl", G.OVERSEAS_EXAM, "TOEFL", 8000, "cefr_b2", None),
]

LEVELS: Dict[str, ProficiencyLevel] = {
    row[0]: ProficiencyLevel(
        id=row[0],
        group=row[1],
        label=row[2],
        vocab_estimate=row[3],
        fallback_id=row[4],
        grade_number=row[5],
    )
    for row in _LEVEL_ROWS
}


def get_level(level_id: str) -> ProficiencyLevel:
    """
    look up a level by id
    Raises:
    -------
    KeyError
        If level_id is not in the catalog
    """
    try:
        return LEVELS[level_id]
    except KeyError:
        raise KeyError(f"Unknown proficiency level: {level_id}") from None


def levels_in_group(group: ProficiencyGroup) -> List[ProficiencyLevel]:
    return [lv for lv in LEVELS.values() if lv.group == group]


def fallback_chain(level: ProficiencyLevel) -> List[ProficiencyLevel]:
    """
    Follow fallback links from level (exclusive) down to the floor level.

    Parameters:
    ----------
    level: ProficiencyLevel
        starting level
    Returns:
    -------
    List[ProficiencyLevel]
        progressively easier levels; empty for a floor level
    Raises:
    -------
    ValueError
        If the chain is longer than the catalog, i.e. it contains a cycle
    """
    chain: List[ProficiencyLevel] = []
    current = level.fallback_level
    while current is not None:
        chain.append(current)
        if len(chain) > len(LEVELS):
            raise ValueError(f"Fallback cycle detected from level: {level.id}")
        current = current.fallback_level
    return chain


def validate_catalog(levels: Dict[str, ProficiencyLevel]) -> None:
    """
    check that every fallback id exists and that the fallback graph is acyclic
    Parameters:
    ----------
    levels: Dict[str, ProficiencyLevel]
        catalog to check, keyed by level id
    Raises:
    -------
    ValueError
        If a fallback id is unknown or a cycle exists
    """
    for level_id, level in levels.items():
        if level.id != level_id:
            raise ValueError(f"Catalog key '{level_id}' does not match level id '{level.id}'")
        if level.fallback_id is not None and level.fallback_id not in levels:
            raise ValueError(f"Level '{level_id}' falls back to unknown level '{level.fallback_id}'")

    for level_id in levels:
        seen = {level_id}
        current = levels[level_id].fallback_id
        while current is not None:
            if current in seen:
                raise ValueError(f"Fallback cycle detected from level: {level_id}")
            seen.add(current)
            current = levels[current].fallback_id


validate_catalog(LEVELS)
