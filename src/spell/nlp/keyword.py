"""Keyword-based intent classifier.

Matches literal substrings of the lowercased input, so multi-word phrases
("take note") and keywords with a trailing space ("to ") work without
tokenizing. Fast and deterministic, but crude: it is meant to be the primary
stage of a HybridClassifier with a semantic fallback.
"""

import logging
from collections.abc import Sequence

from .result import IntentResult, unknown_result

logger = logging.getLogger(__name__)

# Order matters: when two intents get the same number of hits, the intent
# whose first matching keyword comes earlier in this table wins.
DEFAULT_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("remind", "reminder"),
    ("reminder", "reminder"),
    ("remember", "note"),
    ("note", "note"),
    ("take note", "note"),
    ("timer", "timer"),
    ("in ", "timer"),
    ("for ", "timer"),
    ("convert", "convert"),
    ("to ", "convert"),
    ("how many", "convert"),
)

BASE_CONFIDENCE = 0.4
CONFIDENCE_PER_HIT = 0.3
MAX_CONFIDENCE = 0.95


def keyword_confidence(hits: int) -> float:
    """Map a hit count to a confidence score.

    1 hit gives 0.7, 2 or more saturate at 0.95.
    """
    if hits <= 0:
        return 0.0
    return min(MAX_CONFIDENCE, BASE_CONFIDENCE + CONFIDENCE_PER_HIT * hits)


class KeywordClassifier:
    """Scores intents by counting keyword substring hits."""

    def __init__(self, keywords: Sequence[tuple[str, str]] | None = None) -> None:
        """Initialize the classifier.

        Args:
            keywords: Ordered (keyword, intent) pairs. Defaults to
                DEFAULT_KEYWORDS. Keywords are matched lowercased.
        """
        table = DEFAULT_KEYWORDS if keywords is None else keywords
        self._keywords: tuple[tuple[str, str], ...] = tuple(
            (keyword.lower(), intent) for keyword, intent in table
        )

    @property
    def keywords(self) -> tuple[tuple[str, str], ...]:
        """The keyword table in match order."""
        return self._keywords

    def score(self, text: str) -> dict[str, int]:
        """Count keyword hits per intent.

        The returned dict is ordered by each intent's first hit in the table.
        """
        lowered = text.lower()
        hits: dict[str, int] = {}
        for keyword, intent in self._keywords:
            if keyword and keyword in lowered:
                hits[intent] = hits.get(intent, 0) + 1
        return hits

    def classify(self, text: str) -> IntentResult:
        """Classify text by keyword hits.

        Args:
            text: The user's command.

        Returns:
            The intent with the most hits, or "unknown" with 0.0 confidence
            when nothing matched.
        """
        hits = self.score(text)
        if not hits:
            return unknown_result(text)

        best_intent = ""
        best_hits = 0
        for intent, count in hits.items():
            if count > best_hits:
                best_intent = intent
                best_hits = count

        confidence = keyword_confidence(best_hits)
        logger.debug(f"Keyword hits {hits} -> {best_intent} ({confidence:.2f})")
        return IntentResult(intent=best_intent, confidence=confidence, raw_text=text)


__all__ = [
    "DEFAULT_KEYWORDS",
    "KeywordClassifier",
    "keyword_confidence",
]
