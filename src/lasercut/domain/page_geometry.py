"""Read-only catalog of named page sizes.

Sizes come from PyMuPDF's paper size table and are expressed in PDF points.
Names are exposed upper-cased (``LETTER``, ``A4``) and looked up
case-insensitively.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

import pymupdf


@lru_cache(maxsize=1)
def page_sizes() -> Mapping[str, tuple[float, float]]:
    """Return the page catalog as name -> (width_pt, height_pt)."""
    return MappingProxyType(
        {
            name.upper(): (float(width), float(height))
            for name, (width, height) in pymupdf.paper_sizes().items()
        }
    )


def lookup_page_size(name: str) -> tuple[float, float] | None:
    """Return (width_pt, height_pt) for a page name, or None if unknown."""
    return page_sizes().get(str(name).upper())
