"""Text helpers."""

from __future__ import annotations

import re
from typing import List

_CLAUSE_SPLIT_RE = re.compile(r"[,;]|\band\b", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(value: str) -> str:
    return _WHITESPACE_RE.sub(" ", value).strip()


def split_clauses(text: str) -> List[str]:
    """Split an utterance into trimmed clauses on ',', ';' and the word 'and'.

    Empty fragments are dropped. When nothing non-empty remains the trimmed
    input is returned as the only clause, so the result is never empty.
    """
    trimmed = text.strip()
    clauses = [part.strip() for part in _CLAUSE_SPLIT_RE.split(trimmed)]
    clauses = [clause for clause in clauses if clause]
    return clauses or [trimmed]


def slugify(value: str, max_len: int = 50) -> str:
    """Generate filesystem-safe slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
    if not slug:
        slug = "untitled"
    return slug[:max_len]
