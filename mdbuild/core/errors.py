"""Exceptions raised by the build."""

from __future__ import annotations

from pathlib import Path


class BuildError(Exception):
    """Raised when a build could not process every source file."""


class SourceNotFoundError(BuildError, FileNotFoundError):
    """Raised when the source directory is missing or not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Source directory not found: {path}")
        self.path = path


class PartialError(BuildError):
    """Raised when a partial cannot be read or converted."""

    def __init__(self, path: Path, error: Exception) -> None:
        super().__init__(f"Cannot include partial {path}: {error}")
        self.path = path
        self.error = error
