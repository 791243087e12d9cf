"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def report_tree(tmp_path: Path) -> Path:
    """Directory holding report_v1.txt, report_v2.txt and summary.txt."""
    for name in ("report_v1.txt", "report_v2.txt", "summary.txt"):
        (tmp_path / name).write_text(name)
    return tmp_path
