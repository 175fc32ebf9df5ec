"""Note handler."""

from ..nlp.result import IntentResult, IntentType
from .base import entity_text, format_confidence


class NoteHandler:
    """Echoes the note text. Notes are not persisted."""

    intent = IntentType.NOTE.value

    def process(self, result: IntentResult) -> list[str]:
        return [
            f"[Note] Intent confidence: {format_confidence(result)}",
            f"Note saved: {entity_text(result)}",
        ]


__all__ = ["NoteHandler"]
