"""Payline evaluation package."""

from .winning_combinations import WinningCombination, WinningCombinations

__all__ = ["WinningCombination", "WinningCombinations"]
