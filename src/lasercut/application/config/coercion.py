"""Coercion of length options to floating point."""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from lasercut.domain.value_objects import FLOATS

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_float(text: str) -> float:
    """Parse the leading number of ``text``, or 0.0 when there is none.

    Examples:
        >>> parse_float("12.5")
        12.5
        >>> parse_float("3mm")
        3.0
        >>> parse_float("abc")
        0.0
    """
    match = _LEADING_NUMBER.match(text)
    if match is None:
        logger.warning(f"Non-numeric length {text!r} read as 0.0")
        return 0.0
    value = float(match.group())
    if text[match.end():].strip():
        logger.warning(f"Non-numeric length {text!r} read as {value}")
    return value


def coerce_floats(options: Mapping[str, Any]) -> dict[str, Any]:
    """Convert string values of length fields to float.

    Values that are not strings, and fields that are absent, are untouched.
    """
    result = dict(options)
    for key in FLOATS:
        value = result.get(key)
        if isinstance(value, str):
            result[key] = parse_float(value)
    return result
