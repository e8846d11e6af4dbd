"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from src.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "archives": {
        "directory": "javadocs",
        "pattern": "*.zip",
    },
    "urls": {
        "frames": False,
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = deep_merge(DEFAULT_CONFIG, {})
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"{path} must contain a mapping at the root"
                raise ValueError(msg)
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file not found, using defaults: %s", path)
    return config
