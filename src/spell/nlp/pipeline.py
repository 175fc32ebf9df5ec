"""NLP pipeline: classify a command, then annotate it with entities."""

import logging
from collections.abc import Mapping, Sequence

from ..config import ClassifierConfig
from ..errors import MissingDependencyError
from .entities import RuleBasedEntityExtractor
from .hybrid import HybridClassifier
from .keyword import KeywordClassifier
from .result import EntityExtractor, IntentClassifier, IntentResult
from .semantic import SemanticClassifier

logger = logging.getLogger(__name__)


class NlpPipeline:
    """Runs a classifier and an entity extractor over one command."""

    def __init__(self, classifier: IntentClassifier, extractor: EntityExtractor) -> None:
        if classifier is None:
            raise MissingDependencyError("classifier")
        if extractor is None:
            raise MissingDependencyError("extractor")
        self._classifier = classifier
        self._extractor = extractor

    @property
    def classifier(self) -> IntentClassifier:
        return self._classifier

    @property
    def extractor(self) -> EntityExtractor:
        return self._extractor

    @classmethod
    def from_examples(
        cls,
        examples: Mapping[str, Sequence[str]],
        config: ClassifierConfig | None = None,
        keywords: Sequence[tuple[str, str]] | None = None,
        extractor: EntityExtractor | None = None,
    ) -> "NlpPipeline":
        """Build the standard keyword -> semantic hybrid pipeline.

        Args:
            examples: Example corpus for the semantic classifier.
            config: Classifier thresholds, defaults to ClassifierConfig().
            keywords: Keyword table, defaults to the built-in table.
            extractor: Entity extractor, defaults to RuleBasedEntityExtractor.

        Returns:
            Configured pipeline.
        """
        config = config or ClassifierConfig()
        semantic = SemanticClassifier(examples, acceptance_threshold=config.acceptance_threshold)
        hybrid = HybridClassifier(
            KeywordClassifier(keywords),
            semantic,
            primary_confidence_threshold=config.primary_confidence_threshold,
        )
        logger.debug(
            f"Pipeline built: {len(semantic.model.vocabulary)} terms, "
            f"{sum(len(v) for v in examples.values())} examples"
        )
        return cls(hybrid, extractor or RuleBasedEntityExtractor())

    def handle(self, text: str) -> IntentResult:
        """Classify text and extract its entities.

        Args:
            text: The user's command.

        Returns:
            The classification result with entities filled in.
        """
        result = self._classifier.classify(text)
        if not result.raw_text:
            result.raw_text = text
        self._extractor.extract(text, result)
        logger.info(f"Handled {text!r} -> {result.intent} ({result.confidence:.2f})")
        return result


__all__ = ["NlpPipeline"]
