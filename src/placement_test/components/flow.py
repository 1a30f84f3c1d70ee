# -*- coding: utf-8 -*-

"""
Caller-level placement flow.
This module ties attempt assembly, the test session and level resolution
together: starting an attempt, retesting with a fresh shuffle, the manual
downgrade path and the final result handed to an external store.

Copyright (c) 2026 Yuta Wakui
Licensed under the MIT License.
"""

# File: src/placement_test/components/flow.py
# Author: Yuta Wakui
# Date: 2026-01-29
# Description: Placement flow orchestration

from dataclasses import dataclass
from typing import Callable, Optional
import logging
import uuid

from placement_test.components.assembler import Attempt
from placement_test.components.attempt_store import AttemptStore
from placement_test.components.catalog import ProficiencyLevel
from placement_test.components.resolver import downgrade_target, is_passed, resolve
from placement_test.components.session import TestSession

logger = logging.getLogger(__name__)


def new_attempt_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class PlacementResult:
    """
    Outcome of a completed attempt.

    A skipped test has no attempt and no score; the selected level is kept.
    """
    level: ProficiencyLevel
    attempt_id: Optional[str]
    score: Optional[float]
    passed: bool
    recommended_level: ProficiencyLevel
    downgrade_option: Optional[ProficiencyLevel]
    skipped: bool = False


class PlacementFlow:
    """
    Drives one learner through placement testing.

    Each start, retest or downgrade mints a new attempt identifier, so the
    learner sees a freshly shuffled attempt. TestSession.reset() is the way to
    replay the same attempt.
    """

    def __init__(
            self,
            level: ProficiencyLevel,
            requested_count: int = 10,
            store: Optional[AttemptStore] = None,
            id_factory: Callable[[], str] = new_attempt_id,
        ) -> None:
        self.requested_count = requested_count
        self.store = store if store is not None else AttemptStore()
        self.id_factory = id_factory
        self.attempts_started = 0

        self.level: ProficiencyLevel = level
        self.attempt: Attempt
        self.session: TestSession
        self.start(level)

    def start(self, level: ProficiencyLevel) -> TestSession:
        """Open a fresh attempt at level."""
        attempt_id = self.id_factory()
        self.level = level
        self.attempt = self.store.get_or_assemble(level, attempt_id, self.requested_count)
        self.session = TestSession(self.attempt.questions)
        self.attempts_started += 1

        logger.info("Started attempt %s at level %s (%d questions)", attempt_id, level.id, len(self.attempt))
        return self.session

    def retest(self) -> TestSession:
        return self.start(self.level)

    def downgrade_and_retest(self) -> Optional[ProficiencyLevel]:
        """
        switch to the fallback of the tested level and start a fresh attempt
        Returns:
        -------
        ProficiencyLevel | None
            new level, or None when the tested level is a floor (nothing changes)
        """
        target = downgrade_target(self.level)
        if target is None:
            logger.info("Level %s has no fallback; downgrade ignored", self.level.id)
            return None

        logger.info("Downgrading from %s to %s", self.level.id, target.id)
        self.start(target)
        return target

    def result(self) -> Optional[PlacementResult]:
        """Result of the current attempt, or None while it is still running."""
        if not self.session.is_completed:
            return None

        score = self.session.score
        return PlacementResult(
            level=self.level,
            attempt_id=self.attempt.attempt_id,
            score=score,
            passed=is_passed(self.level, score),
            recommended_level=resolve(self.level, score),
            downgrade_option=downgrade_target(self.level),
        )

    def skip(self) -> PlacementResult:
        """Keep the tested level without answering; the open attempt is abandoned."""
        logger.info("Placement test skipped at level %s", self.level.id)
        return PlacementResult(
            level=self.level,
            attempt_id=None,
            score=None,
            passed=False,
            recommended_level=self.level,
            downgrade_option=None,
            skipped=True,
        )
