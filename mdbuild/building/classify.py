"""File classification utilities."""

from __future__ import annotations

from pathlib import Path

from ..core.models import EntryKind, SourceEntry
from ..core.settings import BuildSettings


def split_name(name: str) -> tuple[str, str]:
    """Split a file name into base name and extension at the last dot.

    The extension has no leading dot and is empty when the name has no dot.
    """
    base, dot, extension = name.rpartition(".")
    if not dot:
        return name, ""
    return base, extension


def get_extension(path: Path) -> str:
    return split_name(path.name)[1]


def classify(path: Path, settings: BuildSettings) -> SourceEntry:
    """Classify a source path as page, partial, raw copy or directory."""
    if path.is_dir():
        return SourceEntry(path=path, kind=EntryKind.DIRECTORY, base_name=path.name)

    base_name, extension = split_name(path.name)
    if not settings.is_transformable(extension):
        kind = EntryKind.COPY
    elif is_partial_name(base_name, settings):
        kind = EntryKind.PARTIAL
    else:
        kind = EntryKind.PAGE

    return SourceEntry(path=path, kind=kind, extension=extension, base_name=base_name)


def is_partial_name(base_name: str, settings: BuildSettings) -> bool:
    # A bare prefix such as "_.md" has no identifier and renders as a page
    prefix = settings.partial_prefix
    return base_name.startswith(prefix) and len(base_name) > len(prefix)


def partial_identifier(base_name: str, settings: BuildSettings) -> str:
    """Return the element id for a partial: its base name without the prefix."""
    return base_name[len(settings.partial_prefix) :]


def scan_directory(
    directory: Path, settings: BuildSettings
) -> tuple[list[SourceEntry], list[Path]]:
    """List a directory's files (classified) and subdirectories, sorted by name."""
    files: list[SourceEntry] = []
    subdirs: list[Path] = []
    for path in sorted(directory.iterdir(), key=lambda p: p.name):
        if path.is_dir():
            subdirs.append(path)
        else:
            files.append(classify(path, settings))
    return files, subdirs
