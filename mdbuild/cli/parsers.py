"""CLI argument parsers and validators."""

from __future__ import annotations

import typer


def parse_extension(value: str) -> str:
    """Parse a file extension, accepting an optional leading dot."""
    extension = value.strip().lstrip(".")
    if not extension:
        raise typer.BadParameter(f"Empty extension: {value!r}")
    if "." in extension or "/" in extension:
        raise typer.BadParameter(f"Must be a single extension like 'md', got: {value!r}")
    return extension
