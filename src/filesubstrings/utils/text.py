"""Text helpers for splitting file names into substrings."""

from __future__ import annotations

import re
from typing import List

_TOKEN_RE = re.compile(r"[a-zA-Z0-9]+", re.IGNORECASE | re.ASCII)


def base_name(name: str) -> str:
    """Return a file name without its last extension.

    A leading dot counts as an extension separator too, so ``.bashrc`` has an
    empty base name.
    """
    head, dot, _ = name.rpartition(".")
    return head if dot else name


def tokenize(text: str) -> List[str]:
    """Split text into maximal runs of ASCII letters and digits.

    Matched runs keep their original casing.
    """
    return _TOKEN_RE.findall(text)
