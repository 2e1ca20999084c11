"""Winning-combination detection for a single payline.

A payline wins for a paying symbol when it holds a contiguous run of at
least ``min_sequence_length`` positions showing that symbol, where the wild
symbol counts as whichever symbol is being evaluated. Only the leftmost
qualifying run of each symbol is reported.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from slotkit.config.models import WinningCombinationConfig
from slotkit.core.errors import InvalidSymbolError
from slotkit.core.types import Payline, Position, Symbol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WinningCombination:
    """A paying symbol and the payline positions forming its run."""

    symbol: Symbol
    positions: Tuple[Position, ...]

    def as_pair(self) -> List[Union[Symbol, List[Position]]]:
        return [self.symbol, list(self.positions)]


def replace_wilds(line: Payline, wild_symbol: int, symbol: int) -> List[int]:
    """Return a copy of ``line`` with every wild replaced by ``symbol``."""

    return [symbol if current == wild_symbol else current for current in line]


def build_symbol_sequences(line: Payline, symbol: int) -> List[List[int]]:
    """Group the positions of ``symbol`` in ``line`` into contiguous runs."""

    sequences: List[List[int]] = []
    for index, current in enumerate(line):
        if current != symbol:
            continue
        if index == 0 or line[index - 1] != symbol:
            sequences.append([index])
        else:
            sequences[-1].append(index)
    return sequences


def find_payline_positions(sequences: Iterable[List[int]], min_length: int) -> Optional[List[int]]:
    """Return the first run with at least ``min_length`` positions, if any."""

    return next((sequence for sequence in sequences if len(sequence) >= min_length), None)


class WinningCombinations:
    """Evaluate paylines against a configured symbol universe."""

    def __init__(self, config: WinningCombinationConfig | None = None) -> None:
        self._config = config or WinningCombinationConfig()
        self._valid_symbols = self._config.all_symbols
        self._paying_symbols = frozenset(self._config.paying_symbols)

    @property
    def config(self) -> WinningCombinationConfig:
        return self._config

    def is_eligible(self, symbol: int) -> bool:
        """Paying symbols can win on their own; wild and non-paying cannot."""

        return symbol != self._config.wild_symbol and symbol in self._paying_symbols

    def evaluate(self, payline: Payline) -> List[WinningCombination]:
        """Return the winning combinations of ``payline`` in discovery order.

        Raises :class:`InvalidSymbolError` when the payline holds a symbol
        outside the configured universe; no partial result is produced.
        """

        unique_symbols = list(dict.fromkeys(payline))
        self._validate(unique_symbols)

        wild = self._config.wild_symbol
        if unique_symbols == [wild]:
            positions = tuple(Position(index) for index in range(len(payline)))
            logger.debug("All-wild payline", extra={"payline": list(payline)})
            return [WinningCombination(symbol=Symbol(wild), positions=positions)]

        combinations: List[WinningCombination] = []
        for symbol in unique_symbols:
            if not self.is_eligible(symbol):
                continue
            positions = self._positions_for(payline, symbol)
            if positions is not None:
                combinations.append(
                    WinningCombination(symbol=Symbol(symbol), positions=tuple(Position(p) for p in positions))
                )
        logger.debug(
            "Payline evaluated",
            extra={"payline": list(payline), "wins": [combo.as_pair() for combo in combinations]},
        )
        return combinations

    def evaluate_many(self, paylines: Iterable[Payline]) -> List[List[WinningCombination]]:
        """Evaluate each payline independently, preserving input order."""

        return [self.evaluate(payline) for payline in paylines]

    def _positions_for(self, payline: Payline, symbol: int) -> Optional[List[int]]:
        substituted = replace_wilds(payline, self._config.wild_symbol, symbol)
        sequences = build_symbol_sequences(substituted, symbol)
        return find_payline_positions(sequences, self._config.min_sequence_length)

    def _validate(self, symbols: Sequence[int]) -> None:
        invalid = [symbol for symbol in symbols if symbol not in self._valid_symbols]
        if invalid:
            raise InvalidSymbolError(f"Payline contains invalid symbols: {invalid}")


__all__ = [
    "WinningCombination",
    "WinningCombinations",
    "build_symbol_sequences",
    "find_payline_positions",
    "replace_wilds",
]
