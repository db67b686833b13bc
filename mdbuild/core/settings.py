from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EXTENSIONS = frozenset({"txt", "md", "mkdn", "markdown"})


class BuildSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MDBUILD_", case_sensitive=False, frozen=True
    )

    # File extensions (no leading dot) rendered as Markdown pages
    extensions: frozenset[str] = DEFAULT_EXTENSIONS
    partial_prefix: str = "_"
    vendor_marker: str = "vendor"
    # Python-Markdown extension names passed to the converter
    markdown_extensions: tuple[str, ...] = ()
    stylesheet_extension: str = "css"
    script_extension: str = "js"
    output_extension: str = "html"

    @field_validator("extensions", mode="before")
    @classmethod
    def _strip_dots(cls, value: object) -> object:
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(str(item).lstrip(".") for item in value)
        return value

    @field_validator("partial_prefix")
    @classmethod
    def _require_prefix(cls, value: str) -> str:
        if not value:
            raise ValueError("partial_prefix must not be empty")
        return value

    def is_transformable(self, extension: str) -> bool:
        return extension in self.extensions
