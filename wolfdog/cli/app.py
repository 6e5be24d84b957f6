"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from .. import __version__
from ..errors import WolfdogError
from ..pipeline import generate_site
from ..settings import get_settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="wolfdog",
    help="Static site generator for posts and Jinja2 templates.",
    no_args_is_help=True,
)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"wolfdog {__version__}")
        raise typer.Exit()


@app.callback()
def cli(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            help="Show the version and exit.",
            callback=_print_version,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Wolfdog static site generator."""


@app.command()
def build(
    site_dir: Annotated[
        Path,
        typer.Argument(
            help="Site directory containing the manifest (default: cwd).",
            file_okay=False,
        ),
    ] = Path("."),
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Build the site in SITE_DIR."""
    try:
        settings = get_settings()
    except ValidationError as e:
        typer.echo(f"Invalid WOLFDOG_* environment settings: {e}", err=True)
        raise typer.Exit(code=1) from e

    # Configure logging
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    logger.debug("Starting wolfdog")

    try:
        result = generate_site(site_dir)
    except WolfdogError as e:
        logger.error(f"❌ {e}")
        raise typer.Exit(code=1) from e

    logger.debug(
        f"Completed: {result.posts_rendered} post(s), "
        f"{result.pages_rendered} page(s), {result.static_files} static file(s)"
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
