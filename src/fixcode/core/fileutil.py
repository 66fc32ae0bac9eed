"""File system utilities: atomic writes, owner-only permissions, output naming."""

from __future__ import annotations

import contextlib
import logging
import os
import platform
import tempfile
from pathlib import Path

log = logging.getLogger(__name__)

FILE_MODE = 0o600

FIXED_SUFFIX = ".fixed"

_IS_WINDOWS = platform.system() == "Windows"


def ensure_file_permissions(path: Path) -> None:
    """Set file permissions to owner-only read/write."""
    if not _IS_WINDOWS and path.exists():
        path.chmod(FILE_MODE)


def atomic_write(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write a private file atomically via temp file + rename.

    The file is never left half-written, and ends up owner-only.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    # Same directory as the target so the rename stays on one filesystem
    fd, tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=".tmp_",
        suffix=path.suffix,
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise

    ensure_file_permissions(path)


def fixed_sibling(path: Path) -> Path:
    """Insert '.fixed' before the final extension.

    main.py -> main.fixed.py, archive.tar.gz -> archive.tar.fixed.gz,
    Makefile -> Makefile.fixed
    """
    if path.suffix:
        return path.with_name(f"{path.stem}{FIXED_SUFFIX}{path.suffix}")
    return path.with_name(f"{path.name}{FIXED_SUFFIX}")
