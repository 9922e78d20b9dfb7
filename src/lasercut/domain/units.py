"""Unit conversion arithmetic.

Page geometry is natively expressed in PDF points (1/72 inch). Lengths in a
box plan are expressed in either millimeters or inches.
"""

from __future__ import annotations

from typing import Any

from lasercut.domain.value_objects import Units

POINTS_PER_INCH = 72.0
MM_PER_INCH = 25.4

# Fixed-precision reciprocal of MM_PER_INCH used when migrating a record
MM_TO_IN_MIGRATION = 0.039370079
MIGRATION_PRECISION = 5


def conversion_multiplier(
    target: Units | str, from_units: Units | str | None = None
) -> float:
    """Multiplier that converts a value in ``from_units`` into ``target``.

    A ``from_units`` of None means the value is in points.
    """
    target = Units(target)
    if from_units is None:
        if target is Units.IN:
            return 1.0 / POINTS_PER_INCH
        return MM_PER_INCH * 1.0 / POINTS_PER_INCH
    source = getattr(from_units, "value", from_units)
    if source == target.value:
        return 1.0
    if target is Units.IN and source == Units.MM.value:
        return 1.0 / MM_PER_INCH
    return MM_PER_INCH


def convert(
    value: Any, target: Units | str, from_units: Units | str | None = None
) -> float:
    """Convert a scalar into ``target`` units, see ``conversion_multiplier``."""
    return float(value) * conversion_multiplier(target, from_units)


def migration_multiplier(current: Units | str) -> float:
    """Multiplier applied to every length when leaving ``current`` units."""
    if Units(current) is Units.IN:
        return MM_PER_INCH
    return MM_TO_IN_MIGRATION


def migrate_value(value: float, current: Units | str) -> float:
    """Rescale a stored length out of ``current`` units, rounded to 5 places."""
    return round(value * migration_multiplier(current), MIGRATION_PRECISION)
