"""CLI command implementations for the lasercut application.

This package contains subcommands for the lasercut CLI:
- validate: Build and validate a box configuration from options
- page-sizes: List the page catalog in a unit system
"""

from lasercut.cli.commands.page_sizes import page_sizes_command
from lasercut.cli.commands.validate import validate_command

__all__ = ["page_sizes_command", "validate_command"]
