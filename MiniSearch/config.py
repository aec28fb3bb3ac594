import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

DEFAULT_CONFIG: Dict[str, Any] = {
    "document_store": {
        "buckets": 2521
    },
    "term_frequency": {
        "buckets": 179
    },
    "stop_words": {
        "use": True,
        "extra_path": None
    },
    "search": {
        "top_k": 3
    },
    "logging": {
        "level": "WARNING"
    }
}


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge override into a copy of base.

    Args:
        base: Configuration providing the defaults
        override: Values that take precedence

    Returns:
        New merged configuration dictionary
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file and merge it over the defaults.

    Args:
        config_path: Path to the config file (defaults to the packaged config.json)

    Returns:
        Configuration dictionary

    Raises:
        ConfigError: If the file exists but is not a JSON object
    """
    path = config_path or DEFAULT_CONFIG_PATH

    if not os.path.exists(path):
        if config_path:
            logger.warning("Config file %s not found, using default settings", path)
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not load config {path}: {e}") from e

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")

    logger.debug("Loaded config from %s", path)
    return merge_config(DEFAULT_CONFIG, loaded)
