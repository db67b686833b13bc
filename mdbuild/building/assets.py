"""Stylesheet, script and partial discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field

from ..core.models import AssetReference, EntryKind, SourceEntry
from ..core.settings import BuildSettings
from .classify import classify, get_extension

logger = logging.getLogger(__name__)


class SiteAssets(BaseModel):
    """Stylesheets and scripts discovered across the whole source tree."""

    stylesheets: list[AssetReference] = Field(default_factory=list)
    scripts: list[AssetReference] = Field(default_factory=list)


def is_vendor_path(relative: str, marker: str) -> bool:
    """Return True if any segment of a forward-slash path contains the marker."""
    if not marker:
        return False
    return any(marker in segment for segment in relative.split("/"))


def order_assets(paths: list[str], marker: str) -> list[AssetReference]:
    """Order asset paths alphabetically with vendor paths after all others."""
    refs = [AssetReference(path=p, vendor=is_vendor_path(p, marker)) for p in paths]
    return sorted(refs, key=lambda ref: (ref.vendor, ref.path))


def find_assets(root: Path, extension: str, marker: str) -> list[AssetReference]:
    """Recursively find files with ``extension`` below ``root``.

    Paths are relative to ``root`` and forward-slash separated.
    """
    found: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in filenames:
            path = Path(dirpath) / name
            if get_extension(path) == extension:
                found.append(path.relative_to(root).as_posix())
    return order_assets(found, marker)


def discover_site_assets(root: Path, settings: BuildSettings) -> SiteAssets:
    """Discover every stylesheet and script under the source root."""
    assets = SiteAssets(
        stylesheets=find_assets(
            root, settings.stylesheet_extension, settings.vendor_marker
        ),
        scripts=find_assets(root, settings.script_extension, settings.vendor_marker),
    )
    logger.debug(
        f"Discovered {len(assets.stylesheets)} stylesheet(s) and "
        f"{len(assets.scripts)} script(s) under {root}"
    )
    return assets


def find_partials(directory: Path, settings: BuildSettings) -> list[SourceEntry]:
    """Return the partials directly inside ``directory``, sorted by file name."""
    partials = []
    for path in sorted(directory.iterdir(), key=lambda p: p.name):
        if not path.is_file():
            continue
        entry = classify(path, settings)
        if entry.kind is EntryKind.PARTIAL:
            partials.append(entry)
    return partials
