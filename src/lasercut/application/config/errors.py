"""Exceptions raised while building or validating a box configuration."""

from __future__ import annotations

from typing import Iterable


class LaserCutError(Exception):
    """Base exception for configuration errors.

    Attributes:
        message: Human-readable error message
        fields: Names of the options the error is about
    """

    def __init__(self, message: str, fields: Iterable[str] = ()) -> None:
        self.message = message
        self.fields = list(fields)
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message


class MissingOption(LaserCutError):
    """One or more required options are absent."""


class ZeroValueNotAllowed(MissingOption):
    """One or more length options are exactly zero."""


class UnknownPageSize(LaserCutError):
    """The configured page size is not in the page catalog."""
