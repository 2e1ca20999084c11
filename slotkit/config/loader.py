"""YAML loaders for the config subsystem.

The game configuration lives in a single YAML file whose top-level keys
mirror :class:`AppConfig`: ``winning_combinations``, ``anticipator``,
``rounds``, ``paylines`` and ``telemetry``. Every section is optional and
falls back to the model defaults.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from slotkit.core.errors import ConfigurationError

from .models import AnticipatorConfig, AppConfig, WinningCombinationConfig

_DEFAULT_CONFIG_DIR = Path("config")
DEFAULT_CONFIG_PATH = _DEFAULT_CONFIG_DIR / "game.yml"
CONFIG_PATH_ENV = "SLOTKIT_CONFIG_PATH"


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"YAML root must be a mapping in {path}")
    return data


def resolve_config_path(default: Path | str = DEFAULT_CONFIG_PATH) -> Path:
    """Return the config path from ``SLOTKIT_CONFIG_PATH`` or ``default``."""

    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)
    return Path(default)


def load_app_config(path: Path | str = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load and validate the whole game configuration from ``path``."""

    path = Path(path)
    data = _read_yaml(path)
    try:
        return AppConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid game config in {path}: {exc}") from exc


def load_winning_combination_config(path: Path | str = DEFAULT_CONFIG_PATH) -> WinningCombinationConfig:
    """Load only the ``winning_combinations`` section of ``path``."""

    return load_app_config(path).winning_combinations


def load_anticipator_config(path: Path | str = DEFAULT_CONFIG_PATH) -> AnticipatorConfig:
    """Load only the ``anticipator`` section of ``path``."""

    return load_app_config(path).anticipator
