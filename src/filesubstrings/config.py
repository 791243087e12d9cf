"""Extractor configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_MIN_SUBSTRING_LENGTH = 3
DEFAULT_MIN_OCCURRENCE_COUNT = 2


@dataclass(frozen=True, slots=True)
class ExtractorConfig:
    root_path: Path = field(default_factory=Path.cwd)
    min_substring_length: int = DEFAULT_MIN_SUBSTRING_LENGTH
    min_occurrence_count: int = DEFAULT_MIN_OCCURRENCE_COUNT
    # None means no limit
    max_results: int | None = None
    unique_per_file: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "root_path", Path(self.root_path))
        for name in ("min_substring_length", "min_occurrence_count", "max_results"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    def resolve_root(self, base_dir: Path | None = None) -> Path:
        if self.root_path.is_absolute() or base_dir is None:
            return self.root_path
        return base_dir / self.root_path
