"""mdbuild - Markdown directory-tree to HTML site builder.

Walks a source tree, renders Markdown pages with a generated header and
footer, and mirrors every other file into the destination tree.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .building.walker import TreeWalker, transform_tree
from .cli import main
from .core.errors import BuildError, SourceNotFoundError
from .core.settings import BuildSettings
from .rendering.page import render_page, transform_file

__all__ = [
    "BuildError",
    "BuildSettings",
    "SourceNotFoundError",
    "TreeWalker",
    "main",
    "render_page",
    "transform_file",
    "transform_tree",
]
