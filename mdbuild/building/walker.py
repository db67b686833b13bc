"""Recursive source tree transformation."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import BuildError, PartialError, SourceNotFoundError
from ..core.models import BuildReport, EntryKind, FileFailure, SourceEntry
from ..core.settings import BuildSettings
from ..rendering.convert import Converter, markdown_converter
from ..rendering.io import copy_file
from ..rendering.layout import PageLayout, compose_layout
from ..rendering.page import transform_file
from .assets import SiteAssets, discover_site_assets
from .classify import scan_directory

logger = logging.getLogger(__name__)


class TreeWalker:
    """Mirror a source tree into a destination tree, rendering Markdown pages.

    Stylesheets and scripts are discovered once from the root passed to
    :meth:`transform`; partials are discovered per directory.
    """

    def __init__(
        self,
        settings: BuildSettings | None = None,
        convert: Converter | None = None,
    ) -> None:
        self.settings = settings or BuildSettings()
        self.convert = convert or markdown_converter(self.settings.markdown_extensions)

    def transform(self, source_dir: Path, dest_dir: Path) -> BuildReport:
        """Transform ``source_dir`` into ``dest_dir``.

        Per-file failures are recorded in the returned report. Failures to
        list a source directory or create a destination directory propagate.
        """
        source_dir = Path(source_dir)
        dest_dir = Path(dest_dir)
        if not source_dir.is_dir():
            raise SourceNotFoundError(source_dir)

        assets = discover_site_assets(source_dir, self.settings)
        return self._transform_directory(source_dir, dest_dir, assets, depth=0)

    def _transform_directory(
        self, source_dir: Path, dest_dir: Path, assets: SiteAssets, depth: int
    ) -> BuildReport:
        logger.debug(f"Transforming directory {source_dir} → {dest_dir}")
        dest_dir.mkdir(parents=True, exist_ok=True)

        report = BuildReport()
        layout: PageLayout | None
        try:
            layout = compose_layout(
                source_dir, depth, assets, self.settings, self.convert
            )
        except PartialError as e:
            # Pages of this directory are skipped; copies and subdirectories proceed
            logger.error(f"Skipping pages in {source_dir}: {e}")
            report.failures.append(FileFailure(path=e.path, error=str(e.error)))
            layout = None

        files, subdirs = scan_directory(source_dir, self.settings)

        destinations: dict[str, Path] = {}
        for entry in files:
            name = self._destination_name(entry)
            if name is not None:
                if name in destinations:
                    logger.warning(
                        f"{entry.path} overwrites {destinations[name]} "
                        f"at {dest_dir / name}"
                    )
                destinations[name] = entry.path
            self._process_file(entry, dest_dir, layout, report)

        for subdir in subdirs:
            report.merge(
                self._transform_directory(
                    subdir, dest_dir / subdir.name, assets, depth + 1
                )
            )

        return report

    def _destination_name(self, entry: SourceEntry) -> str | None:
        if entry.kind is EntryKind.PAGE:
            return f"{entry.base_name}.{self.settings.output_extension}"
        if entry.kind is EntryKind.COPY:
            return entry.path.name
        return None

    def _process_file(
        self,
        entry: SourceEntry,
        dest_dir: Path,
        layout: PageLayout | None,
        report: BuildReport,
    ) -> None:
        if entry.kind is EntryKind.PARTIAL:
            logger.debug(f"Skipping partial {entry.path}")
            report.skipped.append(entry.path)
            return

        if entry.kind is EntryKind.PAGE and layout is None:
            logger.debug(f"Skipping page {entry.path} without a layout")
            report.skipped.append(entry.path)
            return

        try:
            if entry.kind is EntryKind.PAGE:
                html_path = dest_dir / self._destination_name(entry)
                transform_file(
                    entry.path,
                    html_path,
                    layout.header(entry.base_name),
                    layout.footer,
                    self.convert,
                )
                report.pages.append(html_path)
            else:
                report.copies.append(copy_file(entry.path, dest_dir))
                logger.debug(f"Copied {entry.path}")
        except Exception as e:
            logger.error(f"Failed to process {entry.path}: {e}")
            report.failures.append(FileFailure(path=entry.path, error=str(e)))


def transform_tree(
    source_dir: Path,
    dest_dir: Path,
    settings: BuildSettings | None = None,
    convert: Converter | None = None,
) -> BuildReport:
    """Transform a source tree and fail if any file could not be processed.

    Args:
        source_dir: Root of the Markdown source tree
        dest_dir: Root of the output tree, created if absent
        settings: Build settings, read from the environment by default
        convert: Markdown converter, Python-Markdown by default

    Returns:
        Report of the pages written and files copied

    Raises:
        SourceNotFoundError: ``source_dir`` is missing or not a directory
        BuildError: one or more files failed; the others were still written
    """
    report = TreeWalker(settings, convert).transform(source_dir, dest_dir)

    logger.info(
        f"Built {len(report.pages)} page(s), copied {len(report.copies)} file(s)"
    )

    if report.failures:
        details = "; ".join(f"{f.path}: {f.error}" for f in report.failures)
        raise BuildError(f"{len(report.failures)} file(s) failed: {details}")

    return report
