"""
Configuration Utilities

Loads and saves filter presets from config/settings.yaml (or a .json file).
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

import yaml

from one_euro.shared.types import FilterParams

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_CONFIG = {
    "filters": {
        "default": {
            "beta": 0.0,
            "min_cutoff": 1.0
        },
        "position": {
            "beta": 0.5,
            "min_cutoff": 1.5
        },
        "rotation": {
            "beta": 0.3,
            "min_cutoff": 1.0
        },
        "ray": {
            "beta": 0.7,
            "min_cutoff": 2.0
        }
    }
}


def default_config_path() -> str:
    """config/settings.yaml relative to the project root."""
    project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(project_root, "config", "settings.yaml")


def _is_json(path: str) -> bool:
    return path.endswith(".json")


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to config file. If None, looks in config/settings.yaml

    Returns:
        Configuration dictionary
    """
    if config_path is None:
        config_path = default_config_path()

    if not os.path.exists(config_path):
        logger.info("No config file found. Using defaults.")
        return copy.deepcopy(DEFAULT_CONFIG)

    logger.info(f"Loading config from {config_path}")
    try:
        with open(config_path, 'r') as f:
            if _is_json(config_path):
                config = json.load(f)
            else:
                config = yaml.safe_load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config: {e}. Using defaults.")
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(config, dict):
        logger.warning(f"Config in {config_path} is not a mapping. Using defaults.")
        return copy.deepcopy(DEFAULT_CONFIG)
    return config


def save_config(config: Dict[str, Any], config_path: Optional[str] = None):
    """
    Save configuration to file.

    Args:
        config: Configuration dictionary
        config_path: Path to save to
    """
    if config_path is None:
        config_path = default_config_path()

    os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)

    with open(config_path, 'w') as f:
        if _is_json(config_path):
            json.dump(config, f, indent=2)
        else:
            yaml.safe_dump(config, f, default_flow_style=False)

    logger.info(f"Config saved to {config_path}")


def get_filter_params(config: Dict[str, Any], name: str = "default") -> FilterParams:
    """
    Look up a named filter preset.

    Unknown names fall back to the "default" preset, then to FilterParams().
    """
    presets = config.get("filters") or {}

    if name not in presets and name != "default":
        logger.warning(f"No filter preset named '{name}'. Using 'default'.")
        name = "default"

    preset = presets.get(name)
    if preset is None:
        return FilterParams()
    return FilterParams.from_dict(preset)
