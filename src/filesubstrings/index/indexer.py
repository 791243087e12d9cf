"""Substring index construction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Tuple

from filesubstrings.config import DEFAULT_MIN_SUBSTRING_LENGTH
from filesubstrings.models import FileRef, SubstringEntry
from filesubstrings.utils.files import iter_files
from filesubstrings.utils.text import tokenize

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class IndexStats:
    files: int = 0
    tokens: int = 0


class SubstringIndex:
    """Read-only mapping from substring to the files containing it.

    Iteration follows the order in which substrings were first discovered.
    """

    __slots__ = ("_matches", "file_count")

    def __init__(self, matches: Mapping[str, Tuple[FileRef, ...]], file_count: int) -> None:
        self._matches = MappingProxyType(dict(matches))
        self.file_count = file_count

    def __len__(self) -> int:
        return len(self._matches)

    def __contains__(self, token: object) -> bool:
        return token in self._matches

    def __iter__(self) -> Iterator[str]:
        return iter(self._matches)

    def matches(self, token: str) -> Tuple[FileRef, ...] | None:
        return self._matches.get(token)

    def entries(self) -> Iterator[SubstringEntry]:
        for token, files in self._matches.items():
            yield SubstringEntry(token=token, matches=files)


class Indexer:
    """Walks a directory tree and records which files contain which substrings."""

    def __init__(
        self,
        *,
        min_substring_length: int = DEFAULT_MIN_SUBSTRING_LENGTH,
        unique_per_file: bool = False,
    ) -> None:
        self.min_substring_length = min_substring_length
        self.unique_per_file = unique_per_file

    def build(self, root: Path) -> SubstringIndex:
        """Scan ``root`` and return the finished index.

        Nothing is returned unless the whole tree was walked; traversal
        failures propagate to the caller.
        """
        LOGGER.debug("Scanning %s", root)
        mapping: Dict[str, List[FileRef]] = {}
        stats = IndexStats()

        for ref in iter_files(root):
            stats.files += 1
            tokens = self._tokens_for(ref)
            for token in tokens:
                mapping.setdefault(token, []).append(ref)
            stats.tokens += len(tokens)

        LOGGER.debug(
            "Scanned %d files, recorded %d substrings (%d distinct)",
            stats.files,
            stats.tokens,
            len(mapping),
        )
        return SubstringIndex(
            {token: tuple(files) for token, files in mapping.items()},
            file_count=stats.files,
        )

    def _tokens_for(self, ref: FileRef) -> List[str]:
        tokens = [t for t in tokenize(ref.base_name) if len(t) >= self.min_substring_length]
        if self.unique_per_file:
            tokens = list(dict.fromkeys(tokens))
        return tokens
