"""Hybrid classifier combining a primary and a fallback classifier."""

import logging

from ..errors import MissingDependencyError
from .result import IntentClassifier, IntentResult, check_threshold

logger = logging.getLogger(__name__)

DEFAULT_PRIMARY_CONFIDENCE_THRESHOLD = 0.5


class HybridClassifier:
    """Tries the primary classifier first and falls back when it is unsure.

    Decision logic:
        1. Classify with the primary.
        2. If the primary result is unknown or its confidence is below
           primary_confidence_threshold, classify with the fallback.
        3. Use the fallback result only if it is not unknown and strictly
           more confident than the primary.

    A confident primary is trusted without consulting the fallback. Errors
    raised by either classifier propagate unchanged.

    Both roles accept anything with a classify(text) method, including
    another HybridClassifier.
    """

    def __init__(
        self,
        primary: IntentClassifier,
        fallback: IntentClassifier,
        primary_confidence_threshold: float = DEFAULT_PRIMARY_CONFIDENCE_THRESHOLD,
    ) -> None:
        """Initialize the hybrid classifier.

        Args:
            primary: Classifier to try first (typically keyword based).
            fallback: Classifier used when the primary is unsure.
            primary_confidence_threshold: Primary confidence needed to skip
                the fallback.

        Raises:
            MissingDependencyError: If primary or fallback is None.
        """
        if primary is None:
            raise MissingDependencyError("primary")
        if fallback is None:
            raise MissingDependencyError("fallback")
        self._primary = primary
        self._fallback = fallback
        self._primary_confidence_threshold = check_threshold(primary_confidence_threshold)

    @property
    def primary(self) -> IntentClassifier:
        return self._primary

    @property
    def fallback(self) -> IntentClassifier:
        return self._fallback

    @property
    def primary_confidence_threshold(self) -> float:
        """Primary confidence at or above which the fallback is skipped."""
        return self._primary_confidence_threshold

    @primary_confidence_threshold.setter
    def primary_confidence_threshold(self, value: float) -> None:
        self._primary_confidence_threshold = check_threshold(value)

    def classify(self, text: str) -> IntentResult:
        """Classify text using the primary, then the fallback if needed.

        Args:
            text: The user's command.

        Returns:
            The primary result, or the fallback result when it did better.
        """
        result = self._primary.classify(text)

        if not result.is_unknown and result.confidence >= self._primary_confidence_threshold:
            logger.debug(f"Primary accepted: {result.intent} ({result.confidence:.2f})")
            return result

        fallback = self._fallback.classify(text)
        if not fallback.is_unknown and fallback.confidence > result.confidence:
            logger.debug(
                f"Fallback {fallback.intent} ({fallback.confidence:.2f}) beat "
                f"primary {result.intent} ({result.confidence:.2f})"
            )
            return fallback

        return result


__all__ = ["DEFAULT_PRIMARY_CONFIDENCE_THRESHOLD", "HybridClassifier"]
