"""Core primitives shared across slotkit subsystems.

Error classes and type aliases live here so that the config, combinations
and cadence packages can import them without circular dependencies.
"""

from . import errors, types

__all__ = ["errors", "types"]
