"""Query interface over a substring index."""

from __future__ import annotations

from typing import List, Optional, Sequence, TypeVar

from filesubstrings.config import ExtractorConfig
from filesubstrings.index.indexer import SubstringIndex
from filesubstrings.models import FileRef, SubstringEntry

T = TypeVar("T")


def _limit(items: Sequence[T], max_results: int | None) -> List[T]:
    if max_results is None:
        return list(items)
    return list(items[:max_results])


class Searcher:
    """Filters, ranks and looks up substrings."""

    def __init__(self, config: ExtractorConfig) -> None:
        self.config = config

    def list_substrings(self, index: SubstringIndex) -> List[SubstringEntry]:
        """Substrings meeting the thresholds, most frequent first.

        Equal counts keep the order in which the substrings were discovered.
        """
        candidates = [
            entry
            for entry in index.entries()
            if entry.occurrence_count >= self.config.min_occurrence_count
            and len(entry.token) >= self.config.min_substring_length
        ]
        # sorted() is stable, so ties stay in discovery order
        ranked = sorted(candidates, key=lambda entry: entry.occurrence_count, reverse=True)
        return _limit(ranked, self.config.max_results)

    def get_files(self, index: SubstringIndex, token: str) -> Optional[List[FileRef]]:
        """Files whose base name contains ``token``, or None if it was never seen."""
        files = index.matches(token)
        if files is None:
            return None
        return _limit(files, self.config.max_results)
