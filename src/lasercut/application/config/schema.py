"""The normalized box configuration record.

A ``Configuration`` is built once from raw key/value options (command line
flags, an API payload or programmatic defaults). Building merges defaults,
expands the ``size`` shorthand and coerces lengths to float; it never
validates. Call ``ensure_valid()`` when the record must be complete.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from lasercut.application.config.coercion import coerce_floats
from lasercut.application.config.errors import UnknownPageSize
from lasercut.application.config.merger import apply_unit_defaults, merge_defaults
from lasercut.application.config.size_parser import parse_size
from lasercut.application.config.validator import (
    ValidationResult,
    ensure_valid,
    validate_configuration,
)
from lasercut.domain.page_geometry import lookup_page_size, page_sizes
from lasercut.domain.units import convert, migrate_value
from lasercut.domain.value_objects import DEFAULTS, FLOATS, PageLayout, Units

logger = logging.getLogger(__name__)


def build_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Run the normalization pipeline over raw options.

    Steps, in order: drop unset values and unknown units, merge general
    defaults, expand ``size``, coerce lengths, fill unit-specific defaults.
    """
    merged = merge_defaults(options)
    merged = parse_size(merged)
    merged = coerce_floats(merged)
    return apply_unit_defaults(merged)


class Configuration(BaseModel):
    """Box dimensions, material, joint and page settings for one plan.

    Lengths are expressed in ``units``. Options that are not recognized
    (including a ``size`` that could not be expanded) are kept in
    ``extras`` and otherwise ignored.

    Example:
        >>> config = Configuration.build({"size": "100x50x30/3/5", "file": "box.pdf"})
        >>> config.width, config.notch, config.margin
        (100.0, 5.0, 5.0)
        >>> config.ensure_valid()
    """

    model_config = ConfigDict(extra="allow")

    units: Units = Units(DEFAULTS["units"])
    page_size: str = DEFAULTS["page_size"]
    page_layout: str = DEFAULTS["page_layout"]
    metadata: bool | str = Field(default=DEFAULTS["metadata"], union_mode="left_to_right")

    width: float | None = None
    height: float | None = None
    depth: float | None = None
    thickness: float | None = None
    notch: float | None = None
    margin: float | None = None
    padding: float | None = None
    stroke: float | None = None

    file: str | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_options(cls, data: Any) -> Any:
        """Run ``build_options`` over mapping input before field validation."""
        if isinstance(data, Mapping):
            return build_options(data)
        return data

    @field_validator("page_size", "page_layout", "file", mode="before")
    @classmethod
    def text_options(cls, value: Any) -> Any:
        """Store paths, numbers and booleans given for text options as text."""
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @classmethod
    def build(cls, options: Mapping[str, Any] | None = None) -> "Configuration":
        """Build a configuration from raw options. Never validates."""
        return cls.model_validate(dict(options or {}))

    from_options = build

    @property
    def extras(self) -> dict[str, Any]:
        """Options that are not part of the record."""
        return dict(self.model_extra or {})

    def to_options(self) -> dict[str, Any]:
        """Plain dictionary of every set option, extras included."""
        return self.model_dump(mode="json", exclude_none=True)

    # Validation

    def validation_result(self) -> ValidationResult:
        """Collect validation errors without raising."""
        return validate_configuration(self)

    def ensure_valid(self) -> None:
        """Raise if a required option is missing or a length is zero.

        Raises:
            MissingOption: width, height, depth, thickness, notch or file unset
            ZeroValueNotAllowed: width, height, depth, thickness or stroke is 0
        """
        ensure_valid(self)

    # Units

    def value_from_units(self, value: Any, from_units: Units | str | None = None) -> float:
        """Convert ``value`` into this record's units.

        With no ``from_units`` the value is taken to be in PDF points.
        """
        return convert(value, self.units, from_units)

    def page_size_values(self) -> list[tuple[str, float, float]]:
        """Every catalog page as (name, width, height) in this record's units."""
        catalog = page_sizes()
        return [
            (
                name,
                self.value_from_units(catalog[name][0]),
                self.value_from_units(catalog[name][1]),
            )
            for name in sorted(catalog)
        ]

    def all_page_sizes(self) -> str:
        """Formatted listing of ``page_size_values``, one page per line."""
        return "".join(
            "\t%10s:\t%6.1f x %6.1f\n" % entry for entry in self.page_size_values()
        )

    def page_dimensions(self) -> tuple[float, float]:
        """(width, height) of the configured page in this record's units.

        Landscape layout swaps the catalog's width and height.

        Raises:
            UnknownPageSize: ``page_size`` is not in the page catalog
        """
        size = lookup_page_size(self.page_size)
        if size is None:
            raise UnknownPageSize(
                f"Unknown page size {self.page_size!r}", ["page_size"]
            )
        width, height = size
        if self.page_layout == PageLayout.LANDSCAPE.value:
            width, height = height, width
        return self.value_from_units(width), self.value_from_units(height)

    def change_units(self, new_units: Units | str) -> None:
        """Rescale every length in place and switch to ``new_units``.

        Does nothing when ``new_units`` is the current unit system or is not
        a recognized one.
        """
        target = Units.parse(new_units)
        if target is None or target is self.units:
            return

        for key in FLOATS:
            value = getattr(self, key)
            if value is not None:
                setattr(self, key, migrate_value(value, self.units))

        logger.info(f"Converted configuration from {self.units.value} to {target.value}")
        self.units = target
