"""Failures raised while scanning a directory tree."""

from __future__ import annotations

from pathlib import Path


class ExtractionError(Exception):
    """Base class for scan failures; carries the offending path."""

    def __init__(self, path: Path | str, message: str | None = None) -> None:
        self.path = Path(path)
        super().__init__(message or f"{self.__class__.__name__}: {self.path}")


class PathNotFound(ExtractionError):
    """The root directory does not exist or is not a directory."""


class AccessDenied(ExtractionError):
    """A directory could not be listed because of missing permissions."""


class PathTooLong(ExtractionError):
    """A path exceeded the platform length limit."""
