"""Substring extraction engine with a cached index."""

from __future__ import annotations

import enum
import logging
import threading
from typing import List, Optional

from filesubstrings.config import ExtractorConfig
from filesubstrings.index.indexer import Indexer, SubstringIndex
from filesubstrings.index.search import Searcher
from filesubstrings.models import FileRef, SubstringEntry

LOGGER = logging.getLogger(__name__)


class IndexState(enum.Enum):
    EMPTY = "empty"
    BUILT = "built"


class SubstringExtractor:
    """Builds the substring index on first use and answers queries from it.

    The index is kept until :meth:`reset` is called, so repeated queries do not
    walk the filesystem again. A failed scan leaves the extractor empty and
    re-raises the error.
    """

    def __init__(self, config: ExtractorConfig, *, indexer: Indexer | None = None) -> None:
        self.config = config
        self.indexer = indexer or Indexer(
            min_substring_length=config.min_substring_length,
            unique_per_file=config.unique_per_file,
        )
        self.searcher = Searcher(config)
        self._index: SubstringIndex | None = None
        self._lock = threading.Lock()

    @property
    def state(self) -> IndexState:
        return IndexState.BUILT if self._index is not None else IndexState.EMPTY

    @property
    def file_count(self) -> int:
        """Number of files visited while building the index."""
        return self._ensure_index().file_count

    def substrings(self) -> List[SubstringEntry]:
        return self.searcher.list_substrings(self._ensure_index())

    def get_files(self, token: str) -> Optional[List[FileRef]]:
        return self.searcher.get_files(self._ensure_index(), token)

    def reset(self) -> None:
        """Drop the cached index; the next query scans the filesystem again."""
        with self._lock:
            self._index = None
        LOGGER.debug("Index reset")

    def _ensure_index(self) -> SubstringIndex:
        index = self._index
        if index is not None:
            return index
        with self._lock:
            if self._index is None:
                self._index = self.indexer.build(self.config.root_path)
            return self._index
