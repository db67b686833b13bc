"""Main CLI application."""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer
from typing_extensions import Annotated

from ..building.walker import transform_tree
from ..core.settings import BuildSettings
from .parsers import parse_extension

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="mdbuild",
    help="Render a tree of Markdown files into a static HTML site.",
)


@app.command()
def build(
    source: Annotated[
        Path,
        typer.Argument(help="Source directory.", metavar="SOURCE"),
    ],
    dest: Annotated[
        Path,
        typer.Argument(help="Destination directory (created if absent).", metavar="DEST"),
    ],
    extensions: Annotated[
        list[str],
        typer.Option(
            "--extension",
            "-e",
            help="Extension rendered as Markdown (default: txt, md, mkdn, markdown). Repeatable.",
            metavar="EXT",
        ),
    ] = [],
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Print the full traceback on failure."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render Markdown pages and copy all other files from SOURCE to DEST."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    logger.debug("Starting mdbuild")

    try:
        overrides = {}
        if extensions:
            overrides["extensions"] = frozenset(map(parse_extension, extensions))
        settings = BuildSettings(**overrides)

        logger.debug(f"Extensions: {sorted(settings.extensions)}")

        report = transform_tree(source, dest, settings)
    except Exception as e:
        typer.secho(f"Error: {e}", err=True, fg=typer.colors.RED)
        if debug:
            typer.echo(traceback.format_exc(), err=True)
        raise typer.Exit(code=1) from e

    logger.debug(
        f"Completed: {len(report.pages)} page(s), {len(report.copies)} copied"
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
