"""File utility functions."""

from __future__ import annotations

import logging
import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Final

logger: Final = logging.getLogger(__name__)


def application_directory() -> Path:
    """Return the directory containing the running program.

    Frozen executables report ``sys.executable``; scripts report the
    directory of ``sys.argv[0]``. Interactive sessions fall back to the
    current working directory.

    Returns:
        Absolute directory path
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    if sys.argv and sys.argv[0] and sys.argv[0] != "-c":
        return Path(sys.argv[0]).resolve().parent
    return Path.cwd()


def write_text_atomic(path: Path, text: str, encoding: str = "utf-8") -> None:
    """Replace *path* with *text* in a single rename.

    The content goes to a temporary file in the same directory first, so
    readers see either the old file or the complete new one.

    Args:
        path: Destination file
        text: Full file content
        encoding: Text encoding

    Raises:
        OSError: If the temporary file cannot be written or renamed
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as fh:
            fh.write(text)
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d characters to %s", len(text), path)


def remove_file(path: Path) -> bool:
    """Delete *path* if it exists.

    Args:
        path: File to delete

    Returns:
        True if a file was deleted, False if there was nothing to delete
    """
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    logger.debug("Deleted %s", path)
    return True
