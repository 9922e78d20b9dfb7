"""Default merging for raw box options.

Precedence, highest first: caller options, general defaults, then the
defaults specific to the resolved unit system.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from lasercut.domain.value_objects import DEFAULTS, UNIT_SPECIFIC_DEFAULTS, Units

logger = logging.getLogger(__name__)


def strip_unset(options: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``options`` without None-valued keys."""
    return {key: value for key, value in options.items() if value is not None}


def merge_defaults(options: Mapping[str, Any]) -> dict[str, Any]:
    """Merge general defaults under ``options``.

    Unset (None) options are dropped first, and an unrecognized ``units``
    value is discarded so the default unit system applies.

    Args:
        options: Raw key/value options from the caller

    Returns:
        A new dictionary with every general default present

    Example:
        >>> merge_defaults({"units": "furlongs", "width": "10"})["units"]
        'mm'
    """
    merged = strip_unset(options)

    units = merged.get("units")
    if units is not None:
        parsed = Units.parse(units)
        if parsed is None:
            logger.warning(f"Ignoring unrecognized units {units!r}")
            del merged["units"]
        else:
            merged["units"] = parsed.value

    return {**DEFAULTS, **merged}


def apply_unit_defaults(options: Mapping[str, Any]) -> dict[str, Any]:
    """Fill in margin, padding and stroke for the resolved unit system.

    Only keys missing from ``options`` receive a unit-specific value.
    """
    units = Units(options.get("units", DEFAULTS["units"])).value
    return {**UNIT_SPECIFIC_DEFAULTS[units], **options}
