"""
Atomic emission of generated source.

Text is written to a temporary file in the destination directory and
published with ``os.replace``. Readers of the destination see either the
previous content or the complete new content, never a truncated file, and
a failure at any point leaves no temporary file behind.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from .core.errors import EmitError

logger = logging.getLogger(__name__)

DEFAULT_MODE = 0o644


@contextmanager
def atomic_write(path: Path, encoding: str = "utf-8") -> Iterator[TextIO]:
    """
    Open a temporary file that replaces ``path`` when the block exits cleanly.

    The destination's permission bits are preserved; new files get 0644.

    Args:
        path: Final destination
        encoding: Text encoding

    Yields:
        Writable text handle
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = stat.S_IMODE(path.stat().st_mode) if path.exists() else DEFAULT_MODE

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


class Emitter:
    """Publishes rendered text to destinations."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read_existing(self, path: Path, enum_name: str | None = None) -> str | None:
        """
        Current content of a destination, or None if it does not exist.

        Raises:
            EmitError: If the destination exists but cannot be read as text
        """
        if not path.exists():
            return None
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise EmitError(f"cannot read existing {path}: {e}", enum_name) from e

    def emit(self, path: Path, text: str, enum_name: str | None = None) -> Path:
        """
        Write ``text`` to ``path`` atomically.

        Returns:
            The destination path

        Raises:
            EmitError: If the file cannot be written
        """
        try:
            with atomic_write(path, self.encoding) as handle:
                handle.write(text)
        except OSError as e:
            raise EmitError(f"cannot write {path}: {e}", enum_name) from e
        logger.info("Wrote %s", path)
        return path
