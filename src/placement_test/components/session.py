# -*- coding: utf-8 -*-

"""
Placement test session state machine.

Copyright (c) 2026 Yuta Wakui
Licensed under the MIT License.
"""

# File: src/placement_test/components/session.py
# Author: Yuta Wakui
# Date: 2026-01-29
# Description: Test session over one assembled attempt

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from placement_test.components.pools import QuestionTemplate


class SessionState(str, Enum):
    """
    Session states
    """
    IN_PROGRESS = "in_progress"
    AWAITING_ADVANCE = "awaiting_advance"
    COMPLETED = "completed"


@dataclass
class TestSession:
    """
    Progress through a fixed question sequence.

    Owned by a single caller; not safe for concurrent mutation. Invalid
    transitions are ignored and return the unchanged state.
    """
    __test__ = False  # not a pytest test class

    questions: Sequence[QuestionTemplate]
    current_index: int = field(default=0, init=False)
    correct_count: int = field(default=0, init=False)
    selected_index: Optional[int] = field(default=None, init=False)
    state: SessionState = field(init=False)

    def __post_init__(self) -> None:
        self.questions = tuple(self.questions)
        self.state = self._start_state()

    def _start_state(self) -> SessionState:
        # an empty attempt has nothing to answer
        return SessionState.IN_PROGRESS if self.questions else SessionState.COMPLETED

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def is_completed(self) -> bool:
        return self.state == SessionState.COMPLETED

    @property
    def current_question(self) -> Optional[QuestionTemplate]:
        if self.current_index < len(self.questions):
            return self.questions[self.current_index]
        return None

    @property
    def progress(self) -> float:
        if not self.questions:
            return 0.0
        return self.current_index / len(self.questions)

    @property
    def score(self) -> float:
        if not self.questions:
            return 0.0
        return self.correct_count / len(self.questions)

    def select_option(self, index: int) -> SessionState:
        """
        Lock in an answer for the current question.

        Only the first selection per question counts; later calls are ignored
        until advance().
        """
        if self.state != SessionState.IN_PROGRESS:
            return self.state

        self.selected_index = index
        if index == self.questions[self.current_index].correct_index:
            self.correct_count += 1
        self.state = SessionState.AWAITING_ADVANCE
        return self.state

    def advance(self) -> SessionState:
        if self.state != SessionState.AWAITING_ADVANCE:
            return self.state

        self.selected_index = None
        self.current_index += 1
        if self.current_index >= len(self.questions):
            self.state = SessionState.COMPLETED
        else:
            self.state = SessionState.IN_PROGRESS
        return self.state

    def reset(self) -> SessionState:
        """Restart the same question sequence from the beginning."""
        self.current_index = 0
        self.correct_count = 0
        self.selected_index = None
        self.state = self._start_state()
        return self.state
