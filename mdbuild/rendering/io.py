"""File I/O operations for rendering."""

from __future__ import annotations

import contextlib
import os
import shutil
import tempfile
from pathlib import Path

# Pages are written as UTF-8 with a leading byte-order mark
PAGE_ENCODING = "utf-8-sig"


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def read_markup(path: Path) -> str:
    """Read a Markdown source file, dropping a leading byte-order mark.

    Bytes that are not valid UTF-8 decode as U+FFFD so legacy text still renders.
    """
    return path.read_text(encoding="utf-8-sig", errors="replace")


def atomic_write_text(
    path: Path, text: str, mode: int = 0o644, encoding: str = PAGE_ENCODING
) -> None:
    """Write text to a file atomically using a temporary file.

    Newlines are written as ``\\n`` on every platform so repeated builds
    produce identical bytes.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
        encoding: Text encoding, UTF-8 with BOM by default
    """
    ensure_parent(path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            with contextlib.suppress(FileNotFoundError):
                os.remove(tmp_name)


def copy_file(source: Path, dest_dir: Path) -> Path:
    """Copy a file byte-for-byte into ``dest_dir``, overwriting any existing file."""
    destination = dest_dir / source.name
    shutil.copyfile(source, destination)
    return destination
