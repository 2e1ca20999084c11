"""Slot-game utilities: winning-combination detection and reel-stop cadences."""

__version__ = "0.1.0"

__all__ = ["__version__"]
