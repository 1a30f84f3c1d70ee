# -*- coding: utf-8 -*-

"""
Question pool provider.
This module defines question templates and the pool catalog that maps each
proficiency group to its canned questions, with a generic fallback set used
when a group has no questions of its own.

Copyright (c) 2026 Yuta Wakui
Licensed under the MIT License.
"""

# File: src/placement_test/components/pools.py
# Author: Yuta Wakui
# Date: 2026-01-29
# Description: Question templates and pool catalog

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple
import logging

import yaml

from placement_test.components.catalog import ProficiencyGroup
from placement_test.components.pool_data import GENERIC_POOL_ROWS, GROUP_POOL_ROWS

logger = logging.getLogger(__name__)

GENERIC_TAG = "generic"


@dataclass(frozen=True)
class QuestionTemplate:
    """
    A multiple-choice question.

    level_tag is the owning group for canned templates; assembled attempts
    re-tag each question with the id of the tested level.
    """
    stem: str
    options: Tuple[str, ...]
    correct_index: int
    level_tag: str = GENERIC_TAG

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]


@dataclass(frozen=True)
class PoolCatalog:
    """
    Read-only pool catalog. Safe for concurrent reads.
    """
    pools: Dict[ProficiencyGroup, Tuple[QuestionTemplate, ...]] = field(default_factory=dict)
    generic: Tuple[QuestionTemplate, ...] = ()

    def pool(self, group: ProficiencyGroup) -> Tuple[QuestionTemplate, ...]:
        """
        Return the canned pool for group, or the generic set if it is empty.

        Parameters
        ----------
        group : ProficiencyGroup
            Group of the tested level.

        Returns
        -------
        Tuple[QuestionTemplate, ...]
            Group pool, generic pool, or an empty tuple if both are empty.
        """
        templates = self.pools.get(group, ())
        if templates:
            return templates

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("[PoolCatalog][FALLBACK] group=%s generic_size=%d", group.value, len(self.generic))
        return self.generic


def _make_template(stem: str, options: Sequence[str], correct_index: int, tag: str) -> QuestionTemplate:
    options = tuple(str(o) for o in options)
    if not options:
        raise ValueError(f"Template has no options: {stem!r}")
    if not (0 <= correct_index < len(options)):
        raise ValueError(f"correct_index {correct_index} out of range for template: {stem!r}")
    return QuestionTemplate(stem=str(stem), options=options, correct_index=int(correct_index), level_tag=tag)


def build_default_catalog() -> PoolCatalog:
    pools = {
        ProficiencyGroup(group): tuple(_make_template(stem, options, idx, group) for stem, options, idx in rows)
        for group, rows in GROUP_POOL_ROWS.items()
    }
    generic = tuple(_make_template(stem, options, idx, GENERIC_TAG) for stem, options, idx in GENERIC_POOL_ROWS)
    return PoolCatalog(pools=pools, generic=generic)


DEFAULT_POOL_CATALOG = build_default_catalog()


def _parse_templates(rows: Any, tag: str) -> Tuple[QuestionTemplate, ...]:
    if rows is None:
        return ()
    if not isinstance(rows, list):
        raise ValueError(f"Pool '{tag}' must be a list of templates.")

    templates: List[QuestionTemplate] = []
    for row in rows:
        if not isinstance(row, dict):
            raise ValueError(f"Template in pool '{tag}' must be a mapping.")
        missing = [k for k in ("stem", "options", "correct_index") if k not in row]
        if missing:
            raise ValueError(f"Template in pool '{tag}' is missing keys: {missing}")
        templates.append(_make_template(row["stem"], row["options"] or [], int(row["correct_index"]), tag))
    return tuple(templates)


def load_pool_catalog(pool_path: str) -> PoolCatalog:
    """
    load a pool catalog from a YAML file
    Parameters:
    ----------
    pool_path: str
        path to a YAML document of the form
        {pools: {<group>: [{stem, options, correct_index}, ...]}, generic: [...]}

    Returns:
    -------
    PoolCatalog
        catalog; groups absent from the file get an empty pool
    Raises:
    -------
    ValueError
        If a group name is unknown or a template is malformed
    """
    with open(pool_path, "r", encoding="utf-8") as f:
        doc = yaml.safe_load(f) or {}

    raw_pools = doc.get("pools", {}) or {}
    if not isinstance(raw_pools, dict):
        raise ValueError("pools must be a mapping of group name to templates.")

    pools: Dict[ProficiencyGroup, Tuple[QuestionTemplate, ...]] = {}
    for name, rows in raw_pools.items():
        try:
            group = ProficiencyGroup(name)
        except ValueError:
            raise ValueError(f"Unknown proficiency group in pool file: {name}") from None
        pools[group] = _parse_templates(rows, group.value)

    generic = _parse_templates(doc.get("generic"), GENERIC_TAG)

    logger.info("Loaded pool catalog from %s: %d groups, %d generic templates", pool_path, len(pools), len(generic))
    return PoolCatalog(pools=pools, generic=generic)
