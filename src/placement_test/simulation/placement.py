import itertools
import logging
import time
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from placement_test.components.attempt_store import AttemptStore
from placement_test.components.catalog import LEVELS, ProficiencyLevel, fallback_chain, get_level
from placement_test.components.flow import PlacementFlow
from placement_test.components.pools import PoolCatalog
from placement_test.components.rng import make_learner_seed
from placement_test.components.session import TestSession

from placement_test.simulation.common import (
    LEARNER_REQUIRED_COLS,
    load_placement_config,
    load_simulation_config,
    summarize_metrics,
    validate_columns,
)

logger = logging.getLogger(__name__)


def knows_level(true_level: ProficiencyLevel, tested_level: ProficiencyLevel) -> bool:
    """A learner masters their own level and every level on its fallback chain."""
    if tested_level.id == true_level.id:
        return True
    return any(lv.id == tested_level.id for lv in fallback_chain(true_level))


def _answer_session(session: TestSession, p_correct: float, rng: np.random.Generator) -> None:
    # answer every question; a wrong answer picks uniformly among the distractors
    while not session.is_completed:
        q = session.current_question
        if rng.random() < p_correct:
            choice = q.correct_index
        else:
            wrong = [i for i in range(len(q.options)) if i != q.correct_index]
            choice = int(rng.choice(wrong)) if wrong else q.correct_index
        session.select_option(choice)
        session.advance()


def generate_learners(num_learners: int, random_seed: int = 42) -> pd.DataFrame:
    """
    generate synthetic learners whose selected level is near their true level
    Parameters:
    -----------
        num_learners: int
            number of learners
        random_seed: int
            seed for numpy's generator
    Returns:
        pd.DataFrame
            columns: learner_id, true_level, selected_level
    """
    rng = np.random.default_rng(random_seed)
    level_ids = list(LEVELS)

    rows: List[Dict[str, Any]] = []
    for learner_id in range(num_learners):
        true_level = get_level(level_ids[int(rng.integers(len(level_ids)))])
        # same level, one step easier, or one step harder
        candidates = [true_level.id]
        if true_level.fallback_id is not None:
            candidates.append(true_level.fallback_id)
        candidates += [lv.id for lv in LEVELS.values() if lv.fallback_id == true_level.id]
        selected = candidates[int(rng.integers(len(candidates)))]
        rows.append({"learner_id": learner_id, "true_level": true_level.id, "selected_level": selected})

    return pd.DataFrame(rows, columns=LEARNER_REQUIRED_COLS)


def run_placement_simulation(
        learners_df: pd.DataFrame = None,
        cfg: Dict[str, Any] = None,
        catalog: Optional[PoolCatalog] = None,
    ) -> Tuple[Dict[str, Any], pd.DataFrame]:
    """
    run the placement test for each simulated learner
    Parameters:
    -----------
        learners_df: pd.DataFrame
            learners with learner_id, true_level and selected_level columns
        cfg: Dict[str, Any]
            simulation configuration
        catalog: PoolCatalog | None
            pool content (default: built-in catalog)
    Returns:
        results: Dict[str, any]
            results summary
        logs_df: pd.DataFrame
            detailed logs for each learner
    """
    if cfg is None:
        raise ValueError("cfg must be provided.")
    if learners_df is None:
        raise ValueError("learners_df must be provided.")

    validate_columns(learners_df, LEARNER_REQUIRED_COLS, "learners_df")

    placement_cfg = load_placement_config(cfg)
    sim_cfg = load_simulation_config(cfg)

    logs: List[Dict[str, Any]] = []

    for _, learner in learners_df.iterrows():
        learner_id = learner["learner_id"]
        true_level = get_level(str(learner["true_level"]))
        selected_level = get_level(str(learner["selected_level"]))

        seed = make_learner_seed(sim_cfg.random_seed, learner_id)
        rng = np.random.default_rng(seed)

        store = AttemptStore(catalog=catalog)
        counter = itertools.count()
        flow = PlacementFlow(
            selected_level,
            requested_count=placement_cfg.requested_count,
            store=store,
            id_factory=lambda: f"sim-{sim_cfg.random_seed}-{learner_id}-{next(counter)}",
        )

        start_time = time.time()
        num_questions = 0
        downgrades = 0

        while True:
            p_correct = sim_cfg.p_correct_known if knows_level(true_level, flow.level) else sim_cfg.p_correct_unknown
            _answer_session(flow.session, p_correct, rng)
            num_questions += flow.session.total_questions

            result = flow.result()
            if result.passed or result.downgrade_option is None or downgrades >= sim_cfg.max_downgrades:
                break
            flow.downgrade_and_retest()
            downgrades += 1

        logs.append({
            "learner_id": learner_id,
            "true_level": true_level.id,
            "selected_level": selected_level.id,
            "tested_level": result.level.id,
            "final_level": result.recommended_level.id,
            "score": float(result.score),
            "passed": bool(result.passed),
            "correct": int(result.recommended_level.id == true_level.id),
            "num_attempts": flow.attempts_started,
            "cached_attempts": len(store.attempts),
            "num_downgrades": downgrades,
            "num_questions": num_questions,
            "response_time": float(time.time() - start_time),
            "learner_seed": seed,
        })

    logs_df = pd.DataFrame(logs)
    metrics = summarize_metrics(logs_df)

    sim_results: Dict[str, Any] = {
        "requested_count": placement_cfg.requested_count,
        "p_correct_known": sim_cfg.p_correct_known,
        "p_correct_unknown": sim_cfg.p_correct_unknown,
        "max_downgrades": sim_cfg.max_downgrades,
        "random_seed": sim_cfg.random_seed,
        **metrics,
    }

    total_attempts = int(logs_df["num_attempts"].sum()) if not logs_df.empty else 0
    logger.info("[Simulation] learners=%d attempts=%d", len(logs_df), total_attempts)
    return sim_results, logs_df
