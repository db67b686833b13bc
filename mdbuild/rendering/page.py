"""Page rendering: header + converted Markdown + footer."""

from __future__ import annotations

import logging
from pathlib import Path

from .convert import Converter, convert_markdown
from .io import atomic_write_text, read_markup

logger = logging.getLogger(__name__)


def render_page(
    markup: str,
    header: str = "",
    footer: str = "",
    convert: Converter | None = None,
) -> str:
    """Render Markdown text between a header and a footer."""
    convert = convert or convert_markdown
    return header + convert(markup) + footer


def transform_file(
    markup_path: Path,
    html_path: Path,
    header: str = "",
    footer: str = "",
    convert: Converter | None = None,
) -> Path:
    """Render a Markdown file to an HTML file.

    Args:
        markup_path: Markdown source file
        html_path: Output file, written UTF-8 with a byte-order mark
        header: Markup placed before the converted body
        footer: Markup placed after the converted body
        convert: Markdown converter, Python-Markdown by default

    Returns:
        Output file path
    """
    html = render_page(read_markup(markup_path), header, footer, convert)
    atomic_write_text(html_path, html)
    logger.debug(f"Rendered {markup_path} → {html_path}")
    return html_path
