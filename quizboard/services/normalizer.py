"""Answer normalization for tolerant comparison."""

from __future__ import annotations

import re
from typing import Optional

_WHITESPACE_RE = re.compile(r"\s+")
_OUTSIDE_ALPHABET_RE = re.compile(r"[^a-zа-яё0-9]")


def normalize_answer(text: Optional[str]) -> str:
    """Lower-case ``text`` and keep only Latin, Cyrillic (with ``ё``) letters and digits.

    >>> normalize_answer(" Время! ")
    'время'
    """

    if not text:
        return ""
    lowered = text.lower()
    return _OUTSIDE_ALPHABET_RE.sub("", _WHITESPACE_RE.sub("", lowered))


def answers_match(submitted: Optional[str], expected: Optional[str]) -> bool:
    return normalize_answer(submitted) == normalize_answer(expected)


__all__ = ["answers_match", "normalize_answer"]
