"""Required-option and non-zero checks for a built configuration.

Both checks aggregate every offending field into one message. The
non-zero check is only meaningful once all required fields are present.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from lasercut.application.config.errors import MissingOption, ZeroValueNotAllowed
from lasercut.domain.value_objects import NON_ZERO, REQUIRED

if TYPE_CHECKING:
    from lasercut.application.config.schema import Configuration


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        fields: Names of the offending options
        message: Human-readable description of the error
        error_type: Exception class raised for this error
    """

    fields: list[str]
    message: str
    error_type: type[MissingOption] = MissingOption

    def to_exception(self) -> MissingOption:
        return self.error_type(self.message, self.fields)


@dataclass
class ValidationResult:
    """Container for validation errors.

    Attributes:
        errors: List of blocking validation errors, in check order
    """

    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 when valid, 1 otherwise."""
        return 0 if self.is_valid else 1

    def add_error(
        self,
        fields: Iterable[str],
        message: str,
        error_type: type[MissingOption] = MissingOption,
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(
            ValidationError(fields=list(fields), message=message, error_type=error_type)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        return self

    def raise_first(self) -> None:
        """Raise the first error as its exception type, if any."""
        if self.errors:
            raise self.errors[0].to_exception()


def _format_message(fields: list[str], problem: str) -> str:
    verb = "are" if len(fields) > 1 else "is"
    return f"{', '.join(fields)} {verb} required, but {problem}."


def _value(config: "Configuration | Mapping[str, Any]", key: str) -> Any:
    if isinstance(config, Mapping):
        return config.get(key)
    return getattr(config, key, None)


def check_required(config: "Configuration | Mapping[str, Any]") -> ValidationResult:
    """Collect every required option that is unset."""
    result = ValidationResult()
    missing = [key for key in REQUIRED if _value(config, key) is None]
    if missing:
        result.add_error(missing, _format_message(missing, "missing"))
    return result


def check_non_zero(config: "Configuration | Mapping[str, Any]") -> ValidationResult:
    """Collect every length option that is exactly zero."""
    result = ValidationResult()
    zeros = [key for key in NON_ZERO if _value(config, key) == 0]
    if zeros:
        result.add_error(zeros, _format_message(zeros, "is zero"), ZeroValueNotAllowed)
    return result


def validate_configuration(
    config: "Configuration | Mapping[str, Any]",
) -> ValidationResult:
    """Run the required check, then the non-zero check if it passed."""
    result = check_required(config)
    if not result.is_valid:
        return result
    return result.merge(check_non_zero(config))


def ensure_valid(config: "Configuration | Mapping[str, Any]") -> None:
    """Raise MissingOption or ZeroValueNotAllowed if the configuration is invalid.

    Raises:
        MissingOption: One or more required options are unset.
        ZeroValueNotAllowed: One or more lengths are exactly zero.
    """
    validate_configuration(config).raise_first()
