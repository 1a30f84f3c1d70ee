# -*- coding: utf-8 -*-

"""
common utilities for placement test simulations.
This module provides configuration dataclasses and loaders, column validation,
and summarization of simulation metrics.

Copyright (c) 2026 Yuta Wakui
Licensed under the MIT License.
"""

# File: src/placement_test/simulation/common.py
# Author: Yuta Wakui
# Date: 2026-01-29
# Description: Common utilities for placement test simulations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence
import logging

import pandas as pd
from sklearn.metrics import accuracy_score, f1_score

LOG_REQUIRED_COLS = [
        "true_level", "final_level", "score", "passed",
        "num_attempts", "num_questions",
        ]

LEARNER_REQUIRED_COLS = ["learner_id", "true_level", "selected_level"]

# ----------------------------
# Config dataclasses
# ----------------------------

@dataclass(frozen=True)
class PlacementConfig:
    """Settings for attempt assembly."""
    requested_count: int = 10

@dataclass(frozen=True)
class SimulationConfig:
    """Settings for simulated learners."""
    random_seed: int = 42
    num_learners: int = 200
    p_correct_known: float = 0.85
    p_correct_unknown: float = 0.30
    max_downgrades: int = 2

@dataclass(frozen=True)
class DataConfig:
    """Input locations."""
    input_path: Optional[str] = None
    pool_path: Optional[str] = None

@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"

@dataclass(frozen=True)
class ResultsConfig:
    output_dir: str = "outputs/results"

@dataclass(frozen=True)
class AppConfig:
    """ Overall application configuration."""
    placement: PlacementConfig = field(default_factory=PlacementConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    data: DataConfig = field(default_factory=DataConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    results: ResultsConfig = field(default_factory=ResultsConfig)

# ----------------------------
# Config validation
# ----------------------------

def validate_placement_config(p: PlacementConfig) -> None:
    if p.requested_count <= 0:
        raise ValueError(f"placement.requested_count must be >= 1: {p.requested_count}")

def validate_simulation_config(s: SimulationConfig) -> None:
    if not (0.0 <= s.p_correct_known <= 1.0 and 0.0 <= s.p_correct_unknown <= 1.0):
        raise ValueError(
            f"probabilities must be in [0, 1]: known={s.p_correct_known}, unknown={s.p_correct_unknown}"
        )
    if s.num_learners <= 0:
        raise ValueError(f"simulation.num_learners must be >= 1: {s.num_learners}")
    if s.max_downgrades < 0:
        raise ValueError(f"simulation.max_downgrades must be >= 0: {s.max_downgrades}")

def validate_logging_config(lg: LoggingConfig) -> None:
    if logging.getLevelName(lg.level) == f"Level {lg.level}":
        raise ValueError(f"logging.level is not a valid level name: {lg.level}")

# ----------------------------
# Loaders
# ----------------------------

def load_placement_config(cfg: Dict[str, Any]) -> PlacementConfig:
    p = cfg.get("placement", {}) or {}
    out = PlacementConfig(
        requested_count=int(p.get("requested_count", 10)),
    )
    validate_placement_config(out)
    return out

def load_simulation_config(cfg: Dict[str, Any]) -> SimulationConfig:
    s = cfg.get("simulation", {}) or {}
    out = SimulationConfig(
        random_seed=int(s.get("random_seed", 42)),
        num_learners=int(s.get("num_learners", 200)),
        p_correct_known=float(s.get("p_correct_known", 0.85)),
        p_correct_unknown=float(s.get("p_correct_unknown", 0.30)),
        max_downgrades=int(s.get("max_downgrades", 2)),
    )
    validate_simulation_config(out)
    return out

def load_data_config(cfg: Dict[str, Any]) -> DataConfig:
    d = cfg.get("data", {}) or {}
    input_path = d.get("input_path")
    pool_path = d.get("pool_path")
    return DataConfig(
        input_path=str(input_path) if input_path else None,
        pool_path=str(pool_path) if pool_path else None,
    )

def load_logging_config(cfg: Dict[str, Any]) -> LoggingConfig:
    lg = cfg.get("logging", {}) or {}
    out = LoggingConfig(level=str(lg.get("level", "INFO")).upper())
    validate_logging_config(out)
    return out

def load_results_config(cfg: Dict[str, Any]) -> ResultsConfig:
    r = cfg.get("results", {}) or {}
    return ResultsConfig(output_dir=str(r.get("output_dir", "outputs/results")))

def load_app_config(cfg: Dict[str, Any]) -> AppConfig:
    return AppConfig(
        placement=load_placement_config(cfg),
        simulation=load_simulation_config(cfg),
        data=load_data_config(cfg),
        logging=load_logging_config(cfg),
        results=load_results_config(cfg),
    )

# ----------------------------
# Validation helpers
# ----------------------------

def validate_columns(df: pd.DataFrame, required: Sequence[str], df_name: str) -> None:
    """
    Validate that required columns are present in the DataFrame.
    Parameters:
    -----------
        df: pd.DataFrame
            DataFrame to validate
        required: Sequence[str]
            List of required column names
        df_name: str
            Name of the DataFrame (for error messages)
    Returns:
    -------
        None
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns in {df_name}: {missing}")

# ----------------------------
# Metrics summarization
# ----------------------------

def summarize_metrics(logs_df: pd.DataFrame) -> Dict[str, Any]:
    """
    Summarize simulation metrics from logs DataFrame.
    Parameters:
    -----------
        logs_df: pd.DataFrame
            Logs DataFrame with one row per simulated learner
    Returns:
    -------
        metrics: Dict[str, Any]
            Dictionary of summarized metrics (percentages for accuracy, f1 and rates)
    """

    # empty guard
    if logs_df is None or logs_df.empty:
        return {
            "num_learners": 0,
            "placement_accuracy": None,
            "f1_macro": None,
            "pass_rate": None,
            "downgrade_rate": None,
            "avg_score": None,
            "avg_attempts": None,
            "avg_questions": None,
        }

    validate_columns(logs_df, LOG_REQUIRED_COLS, "logs_df")

    y_true = logs_df["true_level"].astype(str)
    y_pred = logs_df["final_level"].astype(str)

    placement_accuracy = float(accuracy_score(y_true, y_pred) * 100.0)
    f1_macro = float(f1_score(y_true, y_pred, average="macro", zero_division=0) * 100.0)

    pass_rate = float(logs_df["passed"].astype(bool).mean() * 100.0)
    downgrade_rate = float((logs_df["num_attempts"] > 1).mean() * 100.0)

    return {
        "num_learners": int(len(logs_df)),
        "placement_accuracy": placement_accuracy,
        "f1_macro": f1_macro,
        "pass_rate": pass_rate,
        "downgrade_rate": downgrade_rate,
        "avg_score": float(logs_df["score"].mean()),
        "avg_attempts": float(logs_df["num_attempts"].mean()),
        "avg_questions": float(logs_df["num_questions"].mean()),
    }
