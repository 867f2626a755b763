"""Configuration loading helpers backed by YAML files."""
from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_SETTINGS: Dict[str, Any] = {
    "http": {
        "timeout_sec": 60,
    },
    "logging": {
        "level": "INFO",
        "json_output": True,
        "stream": False,
    },
}


class ConfigError(ValueError):
    """Raised when a settings file does not hold a mapping of sections."""


def load_settings(path: str | os.PathLike[str] | None = None) -> Dict[str, Any]:
    """Load YAML configuration layered over the defaults.

    Sections are merged one at a time; an empty section keeps its defaults.
    """
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    if path is None:
        return settings

    cfg_path = Path(path)
    if not cfg_path.exists():
        return settings
    with cfg_path.open("r", encoding="utf-8") as fh:
        loaded = yaml.safe_load(fh)

    if loaded is None:
        return settings
    if not isinstance(loaded, dict):
        raise ConfigError(f"{cfg_path}: expected a mapping of sections, got {type(loaded).__name__}")

    for section, values in loaded.items():
        if values is None:
            continue
        if isinstance(values, dict) and isinstance(settings.get(section), dict):
            settings[section].update(values)
        else:
            settings[section] = values
    return settings
