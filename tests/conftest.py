from __future__ import annotations

from pathlib import Path
from textwrap import dedent
from typing import Callable

import pytest

from slotkit.cadence import CadenceCalculator
from slotkit.combinations import WinningCombinations
from slotkit.config.models import AnticipatorConfig, SlotCoordinate, WinningCombinationConfig


@pytest.fixture(scope="session")
def default_combination_config() -> WinningCombinationConfig:
    return WinningCombinationConfig(
        min_sequence_length=3,
        wild_symbol=0,
        paying_symbols=[1, 2, 3, 4, 5, 6, 7, 8, 9],
        non_paying_symbols=[10, 11, 12, 13, 14, 15],
    )


@pytest.fixture(scope="session")
def default_anticipator_config() -> AnticipatorConfig:
    return AnticipatorConfig(
        column_size=5,
        min_to_anticipate=2,
        max_to_anticipate=3,
        anticipate_cadence=2,
        default_cadence=0.25,
    )


@pytest.fixture
def evaluator(default_combination_config: WinningCombinationConfig) -> WinningCombinations:
    return WinningCombinations(default_combination_config)


@pytest.fixture
def calculator(default_anticipator_config: AnticipatorConfig) -> CadenceCalculator:
    return CadenceCalculator(default_anticipator_config)


@pytest.fixture
def coordinates_factory() -> Callable[..., list[SlotCoordinate]]:
    def _factory(*columns: int, row: int = 0) -> list[SlotCoordinate]:
        return [SlotCoordinate(column=column, row=row) for column in columns]

    return _factory


@pytest.fixture
def write_yaml() -> Callable[[Path, str], Path]:
    def _write(path: Path, content: str) -> Path:
        path.write_text(dedent(content), encoding="utf-8")
        return path

    return _write
