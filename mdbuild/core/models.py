"""Domain models for source classification and build results."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class EntryKind(str, Enum):
    """How a source entry is handled by the walker."""

    PAGE = "page"
    PARTIAL = "partial"
    COPY = "copy"
    DIRECTORY = "directory"


class SourceEntry(BaseModel):
    """A classified path under the source root."""

    path: Path = Field(..., description="Source path")
    kind: EntryKind = Field(..., description="Handling category")
    extension: str = Field(default="", description="Extension without the dot")
    base_name: str = Field(default="", description="File name without extension")


class AssetReference(BaseModel):
    """A stylesheet or script referenced from generated pages."""

    path: str = Field(..., description="Forward-slash path relative to the source root")
    vendor: bool = Field(default=False, description="Path has a vendor segment")

    def href(self, depth: int = 0) -> str:
        """Return the reference as seen from a directory ``depth`` levels down."""
        return "../" * depth + self.path


class FileFailure(BaseModel):
    """A source file that could not be rendered or copied."""

    path: Path
    error: str


class BuildReport(BaseModel):
    """Outcome of a tree transformation."""

    pages: list[Path] = Field(default_factory=list, description="HTML files written")
    copies: list[Path] = Field(default_factory=list, description="Files copied")
    skipped: list[Path] = Field(default_factory=list, description="Partials skipped")
    failures: list[FileFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def merge(self, other: BuildReport) -> None:
        self.pages.extend(other.pages)
        self.copies.extend(other.copies)
        self.skipped.extend(other.skipped)
        self.failures.extend(other.failures)
