import os
import argparse
import logging
import pandas as pd

from datetime import datetime
from typing import Any, Dict, Tuple

from placement_test.components.pools import load_pool_catalog
from placement_test.config import load_config
from placement_test.simulation.common import load_app_config
from placement_test.simulation.placement import generate_learners, run_placement_simulation

logger = logging.getLogger(__name__)

def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Simulate learners taking the placement test")
    p.add_argument("--config", type=str, default="configs/config.yaml", help="Path to the config file")
    return p.parse_args()

def run_simulation(config_path: str) -> Tuple[Dict[str, Any], pd.DataFrame]:
    """
    Run the placement simulation described by a config file and save the results.
    Parameters:
    -----------
        config_path: str
            path of the config file
    Returns:
    -------
        results: Dict[str, Any]
            summary metrics
        logs_df: pd.DataFrame
            per-learner logs
    """
    cfg = load_config(config_path)
    app_cfg = load_app_config(cfg)

    logging.basicConfig(
        level=app_cfg.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # learners
    input_path = app_cfg.data.input_path
    if input_path:
        if not os.path.exists(input_path):
            raise ValueError(f"Input path does not exist: {input_path}")
        learners_df = pd.read_csv(input_path)
        logger.info("Loaded %d learners from %s", len(learners_df), input_path)
    else:
        learners_df = generate_learners(app_cfg.simulation.num_learners, app_cfg.simulation.random_seed)
        logger.info("Generated %d synthetic learners", len(learners_df))

    # pool content
    catalog = load_pool_catalog(app_cfg.data.pool_path) if app_cfg.data.pool_path else None

    results, logs_df = run_placement_simulation(learners_df=learners_df, cfg=cfg, catalog=catalog)

    # save
    output_dir = app_cfg.results.output_dir
    os.makedirs(output_dir, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    logs_path = os.path.join(output_dir, f"placement_logs_{stamp}.csv")
    summary_path = os.path.join(output_dir, f"placement_summary_{stamp}.csv")
    logs_df.to_csv(logs_path, index=False)
    pd.DataFrame([results]).to_csv(summary_path, index=False)

    logger.info("Saved logs to %s and summary to %s", logs_path, summary_path)
    return results, logs_df

if __name__ == "__main__":
    args = parse_args()
    results, _ = run_simulation(args.config)
    for k, v in results.items():
        print(f"{k}: {v}")
