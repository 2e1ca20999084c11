"""Error hierarchy shared by the slotkit subsystems.

Callers can catch :class:`CoreError` to handle every library failure, or the
specific subclass when they need to tell bad configuration apart from bad
game input. Submodules should raise the most specific error available.
"""
from __future__ import annotations


class CoreError(Exception):
    """Base class for all custom exceptions in the library."""


class ConfigurationError(CoreError):
    """Raised when configuration files are missing or invalid."""


class InvalidSymbolError(CoreError):
    """Raised when a payline contains a symbol outside the configured universe."""


class InvalidCoordinateError(CoreError):
    """Raised when a special-symbol coordinate falls outside the reel layout."""
