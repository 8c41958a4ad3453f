"""Token-overlap relevance between a query and a posting's text."""
from __future__ import annotations

import re

from gigmatch.keywords import MIN_TOKEN_LEN

_WORD_RE = re.compile(r"\w+", re.ASCII)


def query_tokens(text: str) -> list[str]:
    """Word tokens of *text* with at least ``MIN_TOKEN_LEN`` characters."""
    return [w for w in _WORD_RE.findall((text or "").lower()) if len(w) >= MIN_TOKEN_LEN]


def text_match_percent(query: str, title: str, description: str) -> float:
    """Percentage of query tokens found anywhere in title + description.

    Substring containment, not whole words: "node" matches "nodejs".
    Repeated query tokens count once per occurrence.
    """
    tokens = query_tokens(query)
    if not tokens:
        return 0.0
    combined = f"{(title or '').lower()} {(description or '').lower()}"
    matches = sum(1 for t in tokens if t in combined)
    return matches / len(tokens) * 100
