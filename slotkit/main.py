from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from slotkit.cadence import CadenceCalculator
from slotkit.combinations import WinningCombinations
from slotkit.config.loader import load_app_config, resolve_config_path
from slotkit.config.models import AppConfig
from slotkit.core.errors import InvalidSymbolError
from slotkit.core.types import SlotCadence
from slotkit.telemetry import configure_logging


@dataclass(slots=True)
class RunSummary:
    """Results of one run over the configured rounds and paylines."""

    cadences: Dict[str, SlotCadence] = field(default_factory=dict)
    paylines: List[Dict[str, Any]] = field(default_factory=list)


def run(config: AppConfig, logger: logging.Logger) -> RunSummary:
    """Compute cadences for every round and evaluate every payline."""

    calculator = CadenceCalculator(config.anticipator)
    evaluator = WinningCombinations(config.winning_combinations)

    cadences = calculator.compute_cadences(config.round_symbols())
    logger.info("CADENCES", extra={"cadences": cadences})

    summary = RunSummary(cadences=cadences)
    for line in config.paylines:
        try:
            wins = evaluator.evaluate(line)
        except InvalidSymbolError as exc:
            logger.warning("Skipping invalid payline: %s", exc, extra={"payline": line})
            continue
        pairs = [combo.as_pair() for combo in wins]
        summary.paylines.append({"payline": line, "wins": pairs})
        logger.info("WINNING COMBINATIONS", extra={"payline": line, "wins": pairs})
    return summary


def main(config_path: Optional[Path] = None) -> RunSummary:
    path = config_path or resolve_config_path()
    if path.exists():
        config = load_app_config(path)
    else:
        print(f"[bootstrap] {path} not found, using built-in defaults")
        config = AppConfig()

    log_dir = Path(config.telemetry.log_dir) if config.telemetry.log_dir else None
    logger = configure_logging(level=config.telemetry.log_level, log_dir=log_dir)
    logger.info("Loaded game config", extra={"rounds": list(config.rounds), "paylines_count": len(config.paylines)})
    return run(config, logger)


if __name__ == "__main__":
    main()
