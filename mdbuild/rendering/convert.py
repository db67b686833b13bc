"""Markdown to HTML conversion."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import markdown

Converter = Callable[[str], str]


def convert_markdown(text: str) -> str:
    """Convert Markdown text to an HTML fragment."""
    return markdown.markdown(text)


def markdown_converter(extensions: Iterable[str] = ()) -> Converter:
    """Build a converter that enables the given Python-Markdown extensions."""
    names = list(extensions)
    if not names:
        return convert_markdown

    def convert(text: str) -> str:
        # A new Markdown instance per call keeps conversions independent
        return markdown.markdown(text, extensions=names)

    return convert
