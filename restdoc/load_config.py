"""Logic for loading and merging restdoc settings."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from restdoc.deep_merge import deep_merge
from restdoc.errors import InvalidConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "inherit_tags": ["inheritdoc"],
    "max_parent_depth": 64,
    "tag_handlers": {},
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load settings from a YAML file and merge them with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Settings file {p} must contain a mapping"
                raise InvalidConfigError(msg)
            config = deep_merge(config, user_config)
        else:
            logger.warning("Settings file not found: %s", p)

    depth = config.get("max_parent_depth")
    if not isinstance(depth, int) or depth < 0:
        msg = f"max_parent_depth must be a non-negative integer, got {depth!r}"
        raise InvalidConfigError(msg)
    return config
