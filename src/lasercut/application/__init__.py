"""Application layer for box plan configuration."""

from lasercut.application.config import (
    Configuration,
    LaserCutError,
    MissingOption,
    UnknownPageSize,
    ZeroValueNotAllowed,
)

__all__ = [
    "Configuration",
    "LaserCutError",
    "MissingOption",
    "UnknownPageSize",
    "ZeroValueNotAllowed",
]
