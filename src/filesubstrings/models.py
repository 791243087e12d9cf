"""Core FileSubstrings data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from filesubstrings.utils.text import base_name


@dataclass(frozen=True, slots=True)
class FileRef:
    """A scanned file."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def full_path(self) -> str:
        return str(self.path.absolute())

    @property
    def base_name(self) -> str:
        return base_name(self.path.name)


@dataclass(frozen=True, slots=True)
class SubstringEntry:
    """A substring together with the files it was found in."""

    token: str
    matches: Tuple[FileRef, ...]

    @property
    def occurrence_count(self) -> int:
        return len(self.matches)
