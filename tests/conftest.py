"""Pytest configuration and shared fixtures for lasercut tests."""

from __future__ import annotations

from typing import Any

import pytest

from lasercut.application.config import Configuration


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests exercising the CLI end to end")


# =============================================================================
# Shared fixtures for configuration creation
# =============================================================================


@pytest.fixture
def complete_options() -> dict[str, Any]:
    """Options that pass validation in millimeters."""
    return {
        "width": "100",
        "height": "50",
        "depth": "30",
        "thickness": "3",
        "notch": "5",
        "file": "box.pdf",
    }


@pytest.fixture
def mm_config(complete_options: dict[str, Any]) -> Configuration:
    """A complete millimeter configuration."""
    return Configuration.build(complete_options)
