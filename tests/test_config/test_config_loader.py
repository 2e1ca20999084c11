from __future__ import annotations

from pathlib import Path

import pytest

from slotkit.config.loader import (
    CONFIG_PATH_ENV,
    load_anticipator_config,
    load_app_config,
    load_winning_combination_config,
    resolve_config_path,
)
from slotkit.core.errors import ConfigurationError

REPO_CONFIG = Path(__file__).resolve().parents[2] / "config" / "game.yml"


def test_load_app_config_should_parse_valid_yaml(tmp_path: Path, write_yaml) -> None:
    path = write_yaml(
        tmp_path / "game.yml",
        """
        winning_combinations:
          min_sequence_length: 4
          wild_symbol: 20
          paying_symbols: [1, 2, 3]
          non_paying_symbols: [7]
        anticipator:
          column_size: 6
          anticipate_cadence: 1.5
        rounds:
          bonus:
            special_symbols:
              - {column: 2, row: 1}
        paylines:
          - [1, 1, 20, 1]
        telemetry:
          log_level: DEBUG
        """,
    )
    config = load_app_config(path)
    assert config.winning_combinations.min_sequence_length == 4
    assert config.winning_combinations.wild_symbol == 20
    assert config.anticipator.column_size == 6
    assert config.anticipator.default_cadence == 0.25
    assert list(config.rounds) == ["bonus"]
    assert config.rounds["bonus"].special_symbols[0].column == 2
    assert config.paylines == [[1, 1, 20, 1]]
    assert config.telemetry.log_level == "DEBUG"


def test_load_app_config_should_accept_blank_file(tmp_path: Path, write_yaml) -> None:
    path = write_yaml(tmp_path / "game.yml", "")
    config = load_app_config(path)
    assert list(config.rounds) == ["round_one", "round_two", "round_three"]


def test_load_app_config_should_require_existing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_app_config(tmp_path / "missing.yml")


def test_load_app_config_should_require_mapping_root(tmp_path: Path, write_yaml) -> None:
    path = write_yaml(tmp_path / "game.yml", "- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_app_config(path)


def test_load_app_config_should_wrap_validation_errors(tmp_path: Path, write_yaml) -> None:
    path = write_yaml(
        tmp_path / "game.yml",
        """
        anticipator:
          min_to_anticipate: 4
          max_to_anticipate: 2
        """,
    )
    with pytest.raises(ConfigurationError):
        load_app_config(path)


def test_section_loaders_should_return_typed_sections(tmp_path: Path, write_yaml) -> None:
    path = write_yaml(
        tmp_path / "game.yml",
        """
        winning_combinations:
          paying_symbols: [1, 2]
          non_paying_symbols: [3]
        anticipator:
          default_cadence: 0.5
        """,
    )
    assert load_winning_combination_config(path).paying_symbols == [1, 2]
    assert load_anticipator_config(path).default_cadence == 0.5


def test_resolve_config_path_should_prefer_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "custom.yml"))
    assert resolve_config_path() == tmp_path / "custom.yml"
    monkeypatch.delenv(CONFIG_PATH_ENV)
    assert resolve_config_path(tmp_path / "game.yml") == tmp_path / "game.yml"


def test_repository_config_matches_defaults() -> None:
    config = load_app_config(REPO_CONFIG)
    assert config.winning_combinations.paying_symbols == list(range(1, 10))
    assert config.anticipator.max_to_anticipate == 3
    assert [len(r.special_symbols) for r in config.rounds.values()] == [3, 2, 2]


def test_load_app_config_should_reject_unknown_log_level(tmp_path: Path, write_yaml) -> None:
    path = write_yaml(
        tmp_path / "game.yml",
        """
        telemetry:
          log_level: VERBOSE
        """,
    )
    with pytest.raises(ConfigurationError):
        load_app_config(path)
