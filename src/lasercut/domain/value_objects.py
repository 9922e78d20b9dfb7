"""Value objects and default tables for box plan configuration."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class Units(str, Enum):
    """Measurement systems a box plan can be expressed in."""

    MM = "mm"
    IN = "in"

    @classmethod
    def parse(cls, value: Any) -> "Units | None":
        """Return the matching unit, or None when the value is not recognized."""
        try:
            return cls(value)
        except ValueError:
            return None


class PageLayout(str, Enum):
    """Orientation of the output page."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {
        "units": Units.MM.value,
        "page_size": "LETTER",
        "page_layout": PageLayout.PORTRAIT.value,
        "metadata": True,
    }
)

UNIT_SPECIFIC_DEFAULTS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        Units.MM.value: MappingProxyType(
            {"margin": 5, "padding": 5, "stroke": 0.0254}
        ),
        Units.IN.value: MappingProxyType(
            {"margin": 0.125, "padding": 0.1, "stroke": 0.001}
        ),
    }
)

# Fields holding lengths; coerced to float and rescaled on unit changes
FLOATS: tuple[str, ...] = (
    "width",
    "height",
    "depth",
    "thickness",
    "notch",
    "margin",
    "padding",
    "stroke",
)
NON_ZERO: tuple[str, ...] = ("width", "height", "depth", "thickness", "stroke")
REQUIRED: tuple[str, ...] = ("width", "height", "depth", "thickness", "notch", "file")
