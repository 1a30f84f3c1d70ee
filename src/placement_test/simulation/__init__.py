"""
Simulation utilities for placement testing.

-load_app_config: YAML settings to frozen dataclasses
-generate_learners: synthetic learner table
-run_placement_simulation: simulated learners taking the placement test
"""

from .common import load_app_config
from .placement import generate_learners, run_placement_simulation

__all__ = [
    "load_app_config",
    "generate_learners",
    "run_placement_simulation"
]
