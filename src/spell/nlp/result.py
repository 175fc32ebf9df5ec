"""Classification result and the classifier/extractor capabilities.

Every classifier returns an IntentResult. The entity extractor adds keys to
``entities`` after classification; dispatchers treat the result as read-only.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

UNKNOWN_INTENT = "unknown"


class IntentType(Enum):
    """Intents the built-in command handlers understand."""

    REMINDER = "reminder"
    NOTE = "note"
    TIMER = "timer"
    CONVERT = "convert"
    UNKNOWN = UNKNOWN_INTENT


@dataclass
class IntentResult:
    """Classified intent with extracted entities.

    Attributes:
        intent: Intent name, or "unknown".
        confidence: Score in [0.0, 1.0]. Keyword results use a heuristic ramp,
            semantic results report the cosine similarity.
        raw_text: The text that was classified.
        entities: Entity kind ("datetime", "number", "units", "text") to value.
    """

    intent: str = UNKNOWN_INTENT
    confidence: float = 0.0
    raw_text: str = ""
    entities: dict[str, Any] = field(default_factory=dict)

    @property
    def is_unknown(self) -> bool:
        """True when no usable intent was found."""
        return not self.intent or self.intent == UNKNOWN_INTENT

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "intent": self.intent,
            "confidence": self.confidence,
            "raw_text": self.raw_text,
            "entities": self.entities,
        }


def unknown_result(text: str, confidence: float = 0.0) -> IntentResult:
    """Build an "unknown" result for the given text."""
    return IntentResult(intent=UNKNOWN_INTENT, confidence=confidence, raw_text=text)


def check_threshold(value: float) -> float:
    """Validate a confidence threshold.

    Raises:
        ValueError: If value is outside [0.0, 1.0].
    """
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"Threshold must be between 0.0 and 1.0, got {value}")
    return value


class IntentClassifier(Protocol):
    """Anything that can classify text into an IntentResult."""

    def classify(self, text: str) -> IntentResult:
        """Classify the given text."""
        ...


class EntityExtractor(Protocol):
    """Anything that can annotate an IntentResult with entities."""

    def extract(self, text: str, result: IntentResult) -> None:
        """Add extracted entities to ``result.entities``."""
        ...


__all__ = [
    "UNKNOWN_INTENT",
    "EntityExtractor",
    "IntentClassifier",
    "IntentResult",
    "IntentType",
    "check_threshold",
    "unknown_result",
]
