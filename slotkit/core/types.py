"""Shared type aliases for readability and contract enforcement."""
from __future__ import annotations

from typing import List, NewType, Sequence, TypeAlias

Symbol = NewType("Symbol", int)
Position = NewType("Position", int)

Payline: TypeAlias = Sequence[int]
SlotCadence: TypeAlias = List[float]
