"""Logic for loading and merging icon lookup configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from src.deep_merge import deep_merge

AXIS_KEYS = ("theme_roots", "extra_theme_roots", "resolutions", "subdirs", "extensions")

DEFAULT_CONFIG: dict[str, Any] = {
    "icons": {
        "theme_roots": [
            "{home}/.local/share/icons/WhiteSur/",
            "{home}/.local/share/icons/WhiteSur-dark/",
        ],
        "extra_theme_roots": [],
        "resolutions": [
            "512x512/",
            "128x128/",
            "64x64/",
            "96x96/",
            "72x72/",
            "48x48/",
            "36x36/",
        ],
        "subdirs": ["apps/", ""],
        "extensions": [".png", ".svg", ".xpm"],
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    A path that does not exist yields the defaults. Malformed YAML raises
    ``yaml.YAMLError``; a document of the wrong shape raises ``ValueError``.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                raise ValueError(f"{path}: top level must be a mapping")
            config = deep_merge(config, user_config)
    validate_config(config)
    return config


def validate_config(config: dict[str, Any]) -> None:
    """Check that every icon axis is a list of strings."""
    icons = config.get("icons")
    if not isinstance(icons, dict):
        raise ValueError("'icons' must be a mapping")
    for key in AXIS_KEYS:
        axis = icons.get(key, [])
        if not isinstance(axis, list) or not all(isinstance(s, str) for s in axis):
            raise ValueError(f"'icons.{key}' must be a list of strings")
