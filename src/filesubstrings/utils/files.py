"""Utility helpers for walking directory trees."""

from __future__ import annotations

import errno
import os
import stat
from pathlib import Path
from typing import Iterator, NoReturn

from filesubstrings.errors import AccessDenied, ExtractionError, PathNotFound, PathTooLong
from filesubstrings.models import FileRef


def _raise_translated(exc: OSError, path: Path | str) -> NoReturn:
    """Re-raise an OS error as the matching extraction failure."""
    target = exc.filename if exc.filename is not None else path
    error: ExtractionError
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        error = PathNotFound(target)
    elif isinstance(exc, PermissionError):
        error = AccessDenied(target)
    elif exc.errno == errno.ENAMETOOLONG:
        error = PathTooLong(target)
    else:
        raise exc
    raise error from exc


def ensure_directory(root: Path) -> None:
    """Fail unless ``root`` is an existing, reachable directory."""
    try:
        info = os.stat(root)
    except OSError as exc:
        _raise_translated(exc, root)
    if not stat.S_ISDIR(info.st_mode):
        raise PathNotFound(root)


def iter_files(root: Path) -> Iterator[FileRef]:
    """Yield every file below ``root``, descending into sub-directories.

    Files of a directory come first, sorted by name, followed by its
    sub-directories in sorted order. Any listing failure aborts the walk.
    """
    root = Path(root)
    ensure_directory(root)

    def _onerror(exc: OSError) -> None:
        _raise_translated(exc, root)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_onerror):
        dirnames.sort()
        current = Path(dirpath)
        for filename in sorted(filenames):
            yield FileRef(current / filename)
