"""Validate command for checking box options.

Builds a ``Configuration`` from command line options exactly as a renderer
would, prints the normalized record and reports missing or zero options.
"""

from typing import Annotated

import typer

from lasercut.application.config import Configuration, ValidationResult


def _display_configuration(config: Configuration) -> None:
    """Print the normalized record, one option per line."""
    typer.echo("Configuration:")
    for key, value in config.to_options().items():
        typer.echo(f"  {key}: {value}")
    typer.echo()


def _display_validation_result(result: ValidationResult) -> None:
    """Display validation errors and the overall verdict.

    Args:
        result: The ValidationResult to display
    """
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.message}", err=True)
        typer.echo()
        typer.echo(f"Validation failed: {len(result.errors)} error(s)", err=True)
    else:
        typer.echo("Validation passed. Configuration is valid.")


def validate_command(
    size: Annotated[
        str | None,
        typer.Option("--size", "-s", help="Compound size: WxHxD/thickness/notch"),
    ] = None,
    width: Annotated[
        str | None, typer.Option("--width", "-w", help="Internal box width")
    ] = None,
    height: Annotated[
        str | None, typer.Option("--height", "-h", help="Internal box height")
    ] = None,
    depth: Annotated[
        str | None, typer.Option("--depth", "-d", help="Internal box depth")
    ] = None,
    thickness: Annotated[
        str | None, typer.Option("--thickness", "-t", help="Material thickness")
    ] = None,
    notch: Annotated[
        str | None, typer.Option("--notch", "-n", help="Notch (tab) width")
    ] = None,
    margin: Annotated[
        str | None, typer.Option("--margin", "-m", help="Page margin")
    ] = None,
    padding: Annotated[
        str | None, typer.Option("--padding", "-p", help="Space between pieces")
    ] = None,
    stroke: Annotated[
        str | None, typer.Option("--stroke", help="Cut line width")
    ] = None,
    units: Annotated[
        str | None, typer.Option("--units", "-u", help="Units: mm or in")
    ] = None,
    page_size: Annotated[
        str | None, typer.Option("--page-size", "-P", help="Page size, e.g. LETTER")
    ] = None,
    page_layout: Annotated[
        str | None,
        typer.Option("--page-layout", "-L", help="Page layout: portrait or landscape"),
    ] = None,
    metadata: Annotated[
        bool | None,
        typer.Option("--metadata/--no-metadata", help="Print box metadata on the page"),
    ] = None,
    file: Annotated[
        str | None, typer.Option("--file", "-o", help="Output PDF path")
    ] = None,
    convert_to: Annotated[
        str | None,
        typer.Option("--convert-to", help="Convert lengths to mm or in before validating"),
    ] = None,
) -> None:
    """Build a box configuration from options and validate it.

    Exit codes:
        0 - Configuration is valid
        1 - A required option is missing or a length is zero

    Example:
        lasercut validate -s 100x50x30/3/5 -o box.pdf
    """
    config = Configuration.build(
        {
            "size": size,
            "width": width,
            "height": height,
            "depth": depth,
            "thickness": thickness,
            "notch": notch,
            "margin": margin,
            "padding": padding,
            "stroke": stroke,
            "units": units,
            "page_size": page_size,
            "page_layout": page_layout,
            "metadata": metadata,
            "file": file,
        }
    )
    if convert_to is not None:
        config.change_units(convert_to)

    _display_configuration(config)

    result = config.validation_result()
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)
