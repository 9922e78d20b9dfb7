"""List the page catalog in a given unit system."""

from typing import Annotated

import typer

from lasercut.application.config import Configuration


def page_sizes_command(
    units: Annotated[
        str, typer.Option("--units", "-u", help="Units: mm or in")
    ] = "mm",
) -> None:
    """Print every known page size."""
    config = Configuration.build({"units": units})
    typer.echo(f"Page sizes ({config.units.value}):")
    typer.echo(config.all_page_sizes(), nl=False)
