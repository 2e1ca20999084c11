"""Reel-stop cadence package."""

from .calculator import CadenceCalculator

__all__ = ["CadenceCalculator"]
