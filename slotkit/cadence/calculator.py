"""Reel-stop cadence calculation from special-symbol positions.

Each column's cadence is the previous column's cadence plus either the
anticipation step or the default step. Anticipation is chosen when the
special symbols accumulated up to the previous column fall inside the
configured window, which slows the next reel down to build suspense.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence

from slotkit.config.models import AnticipatorConfig, SlotCoordinate
from slotkit.core.errors import InvalidCoordinateError
from slotkit.core.types import SlotCadence

logger = logging.getLogger(__name__)


class CadenceCalculator:
    """Stateless cadence generator bound to one :class:`AnticipatorConfig`."""

    def __init__(self, config: AnticipatorConfig | None = None) -> None:
        self._config = config or AnticipatorConfig()

    @property
    def config(self) -> AnticipatorConfig:
        return self._config

    def cumulative_counts(self, symbols: Sequence[SlotCoordinate]) -> List[int]:
        """Return the running number of special symbols up to each column."""

        self._validate(symbols)
        per_column = [0] * self._config.column_size
        for coordinate in symbols:
            per_column[coordinate.column] += 1
        counts: List[int] = []
        total = 0
        for count in per_column:
            total += count
            counts.append(total)
        return counts

    def slot_cadence(self, symbols: Sequence[SlotCoordinate]) -> SlotCadence:
        """Return the per-column stop cadence for one round."""

        counts = self.cumulative_counts(symbols)
        cadence: SlotCadence = []
        for index in range(self._config.column_size):
            if index == 0:
                cadence.append(0.0)
                continue
            step = self._config.anticipate_cadence if self._is_anticipating(counts[index - 1]) else self._config.default_cadence
            cadence.append(cadence[-1] + step)
        return cadence

    def compute_cadences(self, rounds: Mapping[str, Sequence[SlotCoordinate]]) -> Dict[str, SlotCadence]:
        """Return ``{round_name: cadence}`` as a new mapping on every call."""

        for symbols in rounds.values():
            self._validate(symbols)
        cadences = {name: self.slot_cadence(symbols) for name, symbols in rounds.items()}
        logger.debug("Cadences computed", extra={"rounds": list(cadences)})
        return cadences

    def _is_anticipating(self, previous_count: int) -> bool:
        return self._config.min_to_anticipate <= previous_count < self._config.max_to_anticipate

    def _validate(self, symbols: Sequence[SlotCoordinate]) -> None:
        for coordinate in symbols:
            if not 0 <= coordinate.column < self._config.column_size:
                raise InvalidCoordinateError(
                    f"Column {coordinate.column} outside 0..{self._config.column_size - 1}"
                )


__all__ = ["CadenceCalculator"]
