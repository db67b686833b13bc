"""Header and footer composition for generated pages."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template
from pydantic import BaseModel, ConfigDict, Field

from ..building.assets import SiteAssets, find_partials
from ..building.classify import partial_identifier
from ..core.errors import PartialError
from ..core.settings import BuildSettings
from .convert import Converter, convert_markdown
from .io import read_markup

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
HEADER_TEMPLATE = "header.html.j2"
FOOTER_TEMPLATE = "footer.html.j2"


@lru_cache(maxsize=None)
def load_template(name: str) -> Template:
    """Load one of the packaged page templates.

    Args:
        name: Template file name inside the templates directory

    Returns:
        Compiled Jinja2 template
    """
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        undefined=StrictUndefined,
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    return env.get_template(name)


class Partial(BaseModel):
    """A rendered partial ready to be inlined into a footer."""

    id: str
    html: str


def render_header(title: str, stylesheets: tuple[str, ...] = ()) -> str:
    return load_template(HEADER_TEMPLATE).render(
        title=title, stylesheets=list(stylesheets)
    )


def render_footer(scripts: tuple[str, ...] = (), partials: tuple[Partial, ...] = ()) -> str:
    return load_template(FOOTER_TEMPLATE).render(
        scripts=list(scripts), partials=list(partials)
    )


class PageLayout(BaseModel):
    """Header and footer shared by every page of one directory."""

    model_config = ConfigDict(frozen=True)

    stylesheets: tuple[str, ...] = Field(default=(), description="Stylesheet hrefs")
    footer: str = Field(default="", description="Composed footer markup")

    def header(self, title: str) -> str:
        """Compose the header for a page titled ``title``."""
        return render_header(title, self.stylesheets)


def render_partials(
    directory: Path, settings: BuildSettings, convert: Converter = convert_markdown
) -> tuple[Partial, ...]:
    """Convert every partial directly inside ``directory``.

    Raises:
        PartialError: a partial could not be read or converted
    """
    partials = []
    for entry in find_partials(directory, settings):
        logger.debug(f"Including partial {entry.path}")
        try:
            html = convert(read_markup(entry.path)).rstrip()
        except Exception as e:
            raise PartialError(entry.path, e) from e
        partials.append(
            Partial(id=partial_identifier(entry.base_name, settings), html=html)
        )
    return tuple(partials)


def compose_layout(
    directory: Path,
    depth: int,
    assets: SiteAssets,
    settings: BuildSettings,
    convert: Converter = convert_markdown,
) -> PageLayout:
    """Compose the page layout for one source directory.

    Args:
        directory: Source directory whose pages share the layout
        depth: Nesting level of ``directory`` below the source root
        assets: Stylesheets and scripts discovered from the source root
        settings: Build settings
        convert: Markdown converter used for partials

    Returns:
        Layout with stylesheet hrefs and the rendered footer
    """
    stylesheets = tuple(ref.href(depth) for ref in assets.stylesheets)
    scripts = tuple(ref.href(depth) for ref in assets.scripts)
    partials = render_partials(directory, settings, convert)

    return PageLayout(
        stylesheets=stylesheets, footer=render_footer(scripts, partials)
    )
