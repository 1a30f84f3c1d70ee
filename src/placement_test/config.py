import os
import yaml
from typing import Any, Dict

DEFAULT_CONFIG_PATH = "configs/config.yaml"

def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load the placement test settings from a YAML file

    Parameters:
    ----------
    config_path: str
        path of the settings file (default: "configs/config.yaml")

    Returns:
    -------
    cfg: Dict[str, Any]
        settings as a dictionary; an empty file yields an empty dictionary
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, 'r', encoding='utf-8') as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")
    return cfg
