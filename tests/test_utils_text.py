"""Tests for file name text utilities."""

from __future__ import annotations

import pytest

from filesubstrings.utils.text import base_name, tokenize


class TestBaseName:
    """Test base_name function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("report_v1.txt", "report_v1"),
            ("archive.tar.gz", "archive.tar"),
            ("Makefile", "Makefile"),
            (".bashrc", ""),
            ("trailing.", "trailing"),
            ("", ""),
        ],
    )
    def test_strips_last_extension(self, name: str, expected: str) -> None:
        """Should drop everything from the last dot on."""
        assert base_name(name) == expected


class TestTokenize:
    """Test tokenize function."""

    def test_splits_on_non_alphanumeric(self) -> None:
        """Should return maximal alphanumeric runs in order."""
        assert tokenize("report_v1") == ["report", "v1"]
        assert tokenize("my-file (copy) 2") == ["my", "file", "copy", "2"]

    def test_preserves_case(self) -> None:
        """Should keep the original casing of each run."""
        assert tokenize("Annual_REPORT_2024") == ["Annual", "REPORT", "2024"]

    def test_keeps_repeated_tokens(self) -> None:
        """Should not deduplicate tokens within one name."""
        assert tokenize("draft_draft") == ["draft", "draft"]

    def test_empty_string(self) -> None:
        """Should produce nothing for empty input."""
        assert tokenize("") == []

    def test_punctuation_only(self) -> None:
        """Should produce nothing for names without letters or digits."""
        assert tokenize("__--..()") == []

    def test_non_ascii_letters_split_runs(self) -> None:
        """Should treat non-ASCII letters as separators."""
        assert tokenize("café_menu") == ["caf", "menu"]
