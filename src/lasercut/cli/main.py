"""Typer CLI for box plan configuration."""

import logging
from typing import Annotated

import typer

from lasercut import __version__
from lasercut.cli.commands import page_sizes_command, validate_command

app = typer.Typer(
    name="lasercut",
    help="Normalize and validate laser-cut box options.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lasercut {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = None,
) -> None:
    """Normalize and validate laser-cut box options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="validate")(validate_command)
app.command(name="page-sizes")(page_sizes_command)


if __name__ == "__main__":
    app()
