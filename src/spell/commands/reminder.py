"""Reminder handler.

Reports the reminder text and every date/time found in it. Reminders are not
stored or scheduled.
"""

from ..nlp.result import IntentResult, IntentType
from .base import entity_list, entity_text, format_confidence

# Entity types that resolve to a point in time
_POINT_IN_TIME = ("datetime", "time", "date")


class ReminderHandler:
    """Prints the reminder text and its resolved times."""

    intent = IntentType.REMINDER.value

    def process(self, result: IntentResult) -> list[str]:
        lines = [f"[Reminder] Intent confidence: {format_confidence(result)}"]

        for entity in entity_list(result, "datetime"):
            lines.append(f"Reminder datetime text: {entity['text']}")
            if entity.get("type") in _POINT_IN_TIME:
                lines.append(f"Parsed datetime: {entity['value']}")

        lines.append(f"Reminder text: {entity_text(result)}")
        return lines


__all__ = ["ReminderHandler"]
