"""Semantic intent classifier using TF-IDF and cosine similarity."""

import logging
from collections.abc import Mapping, Sequence

from .result import IntentResult, check_threshold, unknown_result
from .vector_space import VectorSpaceModel

logger = logging.getLogger(__name__)

DEFAULT_ACCEPTANCE_THRESHOLD = 0.55


class SemanticClassifier:
    """Finds the closest example phrase and reports its intent.

    More forgiving than keyword matching (word order and extra words barely
    matter), but it only knows the vocabulary of its example corpus.

    The acceptance threshold can be changed between calls without rebuilding
    the model. It is not guarded for writes concurrent with classify().
    """

    def __init__(
        self,
        examples: Mapping[str, Sequence[str]],
        acceptance_threshold: float = DEFAULT_ACCEPTANCE_THRESHOLD,
    ) -> None:
        """Initialize the classifier.

        Args:
            examples: Intent name to example phrases.
            acceptance_threshold: Minimum similarity to accept a match.

        Raises:
            MissingDependencyError: If examples is None.
        """
        self._model = VectorSpaceModel(examples)
        self._acceptance_threshold = check_threshold(acceptance_threshold)

    @property
    def model(self) -> VectorSpaceModel:
        return self._model

    @property
    def acceptance_threshold(self) -> float:
        """Minimum cosine similarity for a labeled result."""
        return self._acceptance_threshold

    @acceptance_threshold.setter
    def acceptance_threshold(self, value: float) -> None:
        self._acceptance_threshold = check_threshold(value)

    def classify(self, text: str) -> IntentResult:
        """Classify text by similarity to the example corpus.

        Args:
            text: The user's command.

        Returns:
            The best matching intent and its similarity. Below the acceptance
            threshold the intent is "unknown" but the confidence still reports
            the best similarity found.
        """
        if not text or not text.strip():
            return unknown_result(text)

        vector = self._model.vectorize(text)
        best_intent, best_similarity = self._model.best_match(vector)

        if best_intent is None or best_similarity < self._acceptance_threshold:
            logger.debug(
                f"Semantic best {best_intent} ({best_similarity:.3f}) "
                f"below threshold {self._acceptance_threshold:.2f}"
            )
            return unknown_result(text, best_similarity)

        return IntentResult(intent=best_intent, confidence=best_similarity, raw_text=text)


__all__ = ["DEFAULT_ACCEPTANCE_THRESHOLD", "SemanticClassifier"]
