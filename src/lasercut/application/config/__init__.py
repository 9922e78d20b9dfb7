"""Configuration building and validation for box plans.

Public API:
    - Configuration: Normalized box configuration record
    - build_options: Normalization pipeline over raw options
    - merge_defaults / apply_unit_defaults: Default merging steps
    - parse_size / parse_size_string: Size shorthand expansion
    - coerce_floats / parse_float: Length coercion
    - validate_configuration / ensure_valid: Required and non-zero checks
    - ValidationResult / ValidationError: Aggregated validation results
    - LaserCutError / MissingOption / ZeroValueNotAllowed / UnknownPageSize

Example:
    >>> from lasercut.application.config import Configuration, MissingOption
    >>>
    >>> config = Configuration.build({"size": "4x3x2/0.125/0.25", "units": "in"})
    >>> try:
    ...     config.ensure_valid()
    ... except MissingOption as e:
    ...     print(e)
    file is required, but missing.
"""

from lasercut.application.config.coercion import coerce_floats, parse_float
from lasercut.application.config.errors import (
    LaserCutError,
    MissingOption,
    UnknownPageSize,
    ZeroValueNotAllowed,
)
from lasercut.application.config.merger import (
    apply_unit_defaults,
    merge_defaults,
    strip_unset,
)
from lasercut.application.config.schema import Configuration, build_options
from lasercut.application.config.size_parser import (
    SIZE_PATTERN,
    SizeSpec,
    parse_size,
    parse_size_string,
)
from lasercut.application.config.validator import (
    ValidationError,
    ValidationResult,
    check_non_zero,
    check_required,
    ensure_valid,
    validate_configuration,
)

__all__ = [
    "SIZE_PATTERN",
    "Configuration",
    "LaserCutError",
    "MissingOption",
    "SizeSpec",
    "UnknownPageSize",
    "ValidationError",
    "ValidationResult",
    "ZeroValueNotAllowed",
    "apply_unit_defaults",
    "build_options",
    "check_non_zero",
    "check_required",
    "coerce_floats",
    "ensure_valid",
    "merge_defaults",
    "parse_float",
    "parse_size",
    "parse_size_string",
    "strip_unset",
    "validate_configuration",
]
