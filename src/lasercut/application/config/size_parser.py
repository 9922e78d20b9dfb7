"""Parser for the compact ``WxHxD/thickness/notch`` size shorthand."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping

logger = logging.getLogger(__name__)

SIZE_PATTERN = re.compile(r"[\d.]+x[\d.]+x[\d.]+/[\d.]+/[\d.]+")


@dataclass(frozen=True)
class SizeSpec:
    """Fields expanded from a size string, still as text."""

    width: str
    height: str
    depth: str
    thickness: str
    notch: str

    def as_options(self) -> dict[str, str]:
        """Return the five fields as an options dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "thickness": self.thickness,
            "notch": self.notch,
        }


def parse_size_string(value: Any) -> SizeSpec | None:
    """Parse ``"100x50x30/3/5"`` into its five parts.

    Text around the shorthand is ignored. Returns None when ``value`` is not
    a string containing the shorthand.
    """
    if not isinstance(value, str):
        return None
    match = SIZE_PATTERN.search(value)
    if match is None:
        return None
    dimensions, thickness, notch = match.group().split("/")
    width, height, depth = dimensions.split("x")
    return SizeSpec(
        width=width, height=height, depth=depth, thickness=thickness, notch=notch
    )


def parse_size(options: Mapping[str, Any]) -> dict[str, Any]:
    """Expand a ``size`` option into width, height, depth, thickness and notch.

    Expanded fields overwrite any value already present and ``size`` is
    removed. A ``size`` that does not match the shorthand is left in place.
    """
    result = dict(options)
    size = result.get("size")
    if size is None:
        return result

    spec = parse_size_string(size)
    if spec is None:
        logger.warning(f"Ignoring size {size!r}, expected WxHxD/thickness/notch")
        return result

    logger.debug(f"Expanded size {size!r} into {spec}")
    del result["size"]
    result.update(spec.as_options())
    return result
