"""Map free text to a single domain category by keyword lookup."""
from __future__ import annotations

from gigmatch.keywords import CATEGORY_KEYWORDS


def classify(text: str, categories: dict[str, tuple[str, ...]] = CATEGORY_KEYWORDS) -> str | None:
    """Return the first category whose keywords occur in *text*.

    Matching is plain substring containment on the lower-cased text, so
    short keywords like "ai" also hit inside longer words.
    """
    low = (text or "").lower()
    for category, keywords in categories.items():
        for keyword in keywords:
            if keyword in low:
                return category
    return None
