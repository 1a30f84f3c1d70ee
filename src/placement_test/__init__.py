"""
placement_test

Deterministic adaptive placement test engine
"""

from .components.catalog import LEVELS, ProficiencyGroup, ProficiencyLevel, get_level
from .components.assembler import Attempt, PoolUnavailableError, assemble
from .components.session import SessionState, TestSession
from .components.resolver import resolve, downgrade_target
from .components.flow import PlacementFlow, PlacementResult
from .simulation.placement import run_placement_simulation

__all__ = [
    "LEVELS",
    "ProficiencyGroup",
    "ProficiencyLevel",
    "get_level",
    "Attempt",
    "PoolUnavailableError",
    "assemble",
    "SessionState",
    "TestSession",
    "resolve",
    "downgrade_target",
    "PlacementFlow",
    "PlacementResult",
    "run_placement_simulation"
]
