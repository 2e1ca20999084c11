"""Configuration loading and validation package."""

from .loader import (
    load_anticipator_config,
    load_app_config,
    load_winning_combination_config,
    resolve_config_path,
)
from .models import (
    AnticipatorConfig,
    AppConfig,
    RoundSymbolsConfig,
    SlotCoordinate,
    TelemetryConfig,
    WinningCombinationConfig,
)

__all__ = [
    "AnticipatorConfig",
    "AppConfig",
    "RoundSymbolsConfig",
    "SlotCoordinate",
    "TelemetryConfig",
    "WinningCombinationConfig",
    "load_anticipator_config",
    "load_app_config",
    "load_winning_combination_config",
    "resolve_config_path",
]
