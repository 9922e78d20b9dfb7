"""Domain layer: units, default tables and page geometry."""

from lasercut.domain.page_geometry import lookup_page_size, page_sizes
from lasercut.domain.units import (
    MM_PER_INCH,
    MM_TO_IN_MIGRATION,
    POINTS_PER_INCH,
    conversion_multiplier,
    convert,
    migrate_value,
    migration_multiplier,
)
from lasercut.domain.value_objects import (
    DEFAULTS,
    FLOATS,
    NON_ZERO,
    REQUIRED,
    UNIT_SPECIFIC_DEFAULTS,
    PageLayout,
    Units,
)

__all__ = [
    "DEFAULTS",
    "FLOATS",
    "MM_PER_INCH",
    "MM_TO_IN_MIGRATION",
    "NON_ZERO",
    "POINTS_PER_INCH",
    "REQUIRED",
    "UNIT_SPECIFIC_DEFAULTS",
    "PageLayout",
    "Units",
    "conversion_multiplier",
    "convert",
    "lookup_page_size",
    "migrate_value",
    "migration_multiplier",
    "page_sizes",
]
