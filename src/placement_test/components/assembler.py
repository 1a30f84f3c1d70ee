# -*- coding: utf-8 -*-

"""
Attempt assembly.
This module turns a question pool into a per-attempt question sequence:
the pool order and every option list are shuffled by one generator stream
seeded from the attempt identifier, and correct answer indices are remapped
to follow their options.

Copyright (c) 2026 Yuta Wakui
Licensed under the MIT License.
"""

# File: src/placement_test/components/assembler.py
# Author: Yuta Wakui
# Date: 2026-01-29
# Description: Deterministic attempt assembly

from dataclasses import dataclass, replace
from typing import Hashable, List, MutableSequence, Optional, Tuple, TypeVar
import logging

from placement_test.components.catalog import ProficiencyLevel
from placement_test.components.pools import DEFAULT_POOL_CATALOG, PoolCatalog, QuestionTemplate
from placement_test.components.rng import SplitMix64, make_attempt_seed

logger = logging.getLogger(__name__)

T = TypeVar("T")

# lower bound applied to the requested count before clamping to the pool size
MIN_QUESTIONS = 6


class PoolUnavailableError(ValueError):
    """Raised when neither the group pool nor the generic pool has questions."""


@dataclass(frozen=True)
class Attempt:
    """
    Ordered, shuffled questions for one (level, attempt_id, requested_count).
    """
    level_id: str
    attempt_id: str
    requested_count: int
    seed: int
    questions: Tuple[QuestionTemplate, ...]

    def __len__(self) -> int:
        return len(self.questions)


def shuffle_in_place(items: MutableSequence[T], rng: SplitMix64) -> None:
    """
    Fisher-Yates shuffle driven by rng, one draw per swap position.
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.below(i + 1)
        items[i], items[j] = items[j], items[i]


def shuffle_options(template: QuestionTemplate, rng: SplitMix64) -> QuestionTemplate:
    """
    shuffle the option list of a template and remap its correct index
    Parameters:
    ----------
    template: QuestionTemplate
        template to shuffle
    rng: SplitMix64
        generator shared with the rest of the attempt
    Returns:
    -------
    QuestionTemplate
        copy with permuted options; the correct index follows the correct option
    """
    order = list(range(len(template.options)))
    shuffle_in_place(order, rng)

    options = tuple(template.options[i] for i in order)
    try:
        correct_index = order.index(template.correct_index)
    except ValueError:
        # malformed template data; keep the original index
        logger.warning("[Assembler] correct index %d not found after shuffle: %r",
                       template.correct_index, template.stem)
        correct_index = template.correct_index

    return replace(template, options=options, correct_index=correct_index)


def question_count(requested_count: int, pool_size: int) -> int:
    """Number of questions served: at least MIN_QUESTIONS, never more than the pool."""
    desired = max(MIN_QUESTIONS, min(requested_count, pool_size))
    return min(desired, pool_size)


def assemble(
        level: ProficiencyLevel,
        attempt_id: Hashable,
        requested_count: int = 10,
        catalog: Optional[PoolCatalog] = None,
    ) -> Attempt:
    """
    assemble the questions of one placement test attempt
    Parameters:
    -----------
        level: ProficiencyLevel
            tested level; its group selects the pool
        attempt_id: Hashable
            opaque attempt token, converted with str() and hashed into the seed
        requested_count: int
            number of questions asked for by the caller
        catalog: PoolCatalog | None
            pool content (default: built-in catalog)
    Returns:
    -------
        Attempt
            identical for identical inputs and pool content
    Raises:
    -------
        PoolUnavailableError
            If the group pool and the generic pool are both empty
    """
    catalog = catalog if catalog is not None else DEFAULT_POOL_CATALOG

    pool: List[QuestionTemplate] = list(catalog.pool(level.group))
    if not pool:
        pool = list(catalog.generic)
    if not pool:
        raise PoolUnavailableError(f"No questions available for level '{level.id}' (group {level.group.value}).")

    seed = make_attempt_seed(attempt_id)
    rng = SplitMix64(seed)

    shuffle_in_place(pool, rng)
    count = question_count(requested_count, len(pool))

    questions = tuple(
        replace(shuffle_options(template, rng), level_tag=level.id)
        for template in pool[:count]
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("[Assembler] level=%s attempt=%s requested=%d pool=%d served=%d seed=%d",
                     level.id, attempt_id, requested_count, len(pool), count, seed)

    return Attempt(
        level_id=level.id,
        attempt_id=str(attempt_id),
        requested_count=requested_count,
        seed=seed,
        questions=questions,
    )
