"""Typed configuration models for the slot-game utilities.

The config subsystem relies on pydantic to validate YAML files and to
provide strongly-typed, frozen objects to the evaluators. Each component
receives its own section so several game variants can coexist in one
process.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator, model_validator

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class WinningCombinationConfig(BaseModel):
    """Symbol universe and minimum run length for payline evaluation.

    The wild, paying and non-paying categories must be disjoint. Non-paying
    symbols are valid in a payline but never form a winning combination.
    """

    min_sequence_length: PositiveInt = 3
    wild_symbol: int = 0
    paying_symbols: List[int] = Field(default_factory=lambda: list(range(1, 10)))
    non_paying_symbols: List[int] = Field(default_factory=lambda: list(range(10, 16)))

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_disjoint_categories(self) -> "WinningCombinationConfig":
        if not self.paying_symbols:
            raise ValueError("paying_symbols must not be empty")
        paying = set(self.paying_symbols)
        non_paying = set(self.non_paying_symbols)
        if self.wild_symbol in paying or self.wild_symbol in non_paying:
            raise ValueError(f"wild_symbol {self.wild_symbol} also listed as a regular symbol")
        overlap = paying & non_paying
        if overlap:
            raise ValueError(f"symbols both paying and non-paying: {sorted(overlap)}")
        return self

    @property
    def all_symbols(self) -> frozenset[int]:
        return frozenset([self.wild_symbol, *self.paying_symbols, *self.non_paying_symbols])


class AnticipatorConfig(BaseModel):
    """Reel-stop cadence settings.

    Anticipation fires for a column when the cumulative special-symbol count
    of the previous column lies in ``[min_to_anticipate, max_to_anticipate)``.
    """

    column_size: PositiveInt = 5
    min_to_anticipate: PositiveInt = 2
    max_to_anticipate: PositiveInt = 3
    anticipate_cadence: float = Field(2.0, ge=0)
    default_cadence: float = Field(0.25, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_window(self) -> "AnticipatorConfig":
        if self.min_to_anticipate >= self.max_to_anticipate:
            raise ValueError("min_to_anticipate must be lower than max_to_anticipate")
        return self


class SlotCoordinate(BaseModel):
    """Position of a special symbol in a round's reel layout."""

    column: int = Field(..., ge=0)
    row: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class RoundSymbolsConfig(BaseModel):
    """Special-symbol layout of a single game round."""

    special_symbols: List[SlotCoordinate] = Field(default_factory=list)


def _default_rounds() -> Dict[str, RoundSymbolsConfig]:
    return {
        "round_one": RoundSymbolsConfig(
            special_symbols=[
                SlotCoordinate(column=0, row=2),
                SlotCoordinate(column=1, row=3),
                SlotCoordinate(column=3, row=4),
            ]
        ),
        "round_two": RoundSymbolsConfig(
            special_symbols=[
                SlotCoordinate(column=0, row=2),
                SlotCoordinate(column=0, row=3),
            ]
        ),
        "round_three": RoundSymbolsConfig(
            special_symbols=[
                SlotCoordinate(column=4, row=2),
                SlotCoordinate(column=4, row=3),
            ]
        ),
    }


class TelemetryConfig(BaseModel):
    """Logging switches for the entry point."""

    log_level: str = Field("INFO")
    log_dir: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level


class AppConfig(BaseModel):
    """Runtime config composed of evaluator settings, rounds and paylines."""

    winning_combinations: WinningCombinationConfig = Field(default_factory=WinningCombinationConfig)
    anticipator: AnticipatorConfig = Field(default_factory=AnticipatorConfig)
    rounds: Dict[str, RoundSymbolsConfig] = Field(default_factory=_default_rounds)
    paylines: List[List[int]] = Field(default_factory=list)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    def round_symbols(self) -> Dict[str, List[SlotCoordinate]]:
        """Return ``{round_name: special_symbols}`` in configured order."""

        return {name: list(cfg.special_symbols) for name, cfg in self.rounds.items()}
