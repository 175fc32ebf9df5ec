"""Timer handler.

Works out how long the requested timer would run. Nothing is scheduled.
"""

from ..nlp.result import IntentResult, IntentType
from .base import entity_list, entity_text, format_confidence


def timer_seconds(result: IntentResult) -> int | None:
    """Total duration requested by a timer command.

    Sums "duration" entities ("10 minutes") and the offsets of relative
    times ("in 10 minutes").

    Returns:
        Seconds, or None if the command holds no duration.
    """
    total = 0
    found = False
    for entity in entity_list(result, "datetime"):
        if entity.get("type") == "duration":
            total += int(entity["value"])
            found = True
        elif entity.get("type") == "datetime" and "seconds" in entity:
            total += int(entity["seconds"])
            found = True
    return total if found else None


def format_duration(seconds: int) -> str:
    """Format seconds as a human-readable duration.

    Examples:
        >>> format_duration(5400)
        '1 hour and 30 minutes'
    """
    if seconds <= 0:
        return "0 seconds"

    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    parts = []
    if hours > 0:
        parts.append(f"{hours} hour{'s' if hours != 1 else ''}")
    if minutes > 0:
        parts.append(f"{minutes} minute{'s' if minutes != 1 else ''}")
    if secs > 0:
        parts.append(f"{secs} second{'s' if secs != 1 else ''}")

    return " and ".join(parts)


class TimerHandler:
    """Reports the timer's time entities and total duration."""

    intent = IntentType.TIMER.value

    def process(self, result: IntentResult) -> list[str]:
        lines = [f"[Timer] Intent confidence: {format_confidence(result)}"]

        entities = entity_list(result, "datetime")
        if not entities:
            lines.append(f"Timer started (raw): {entity_text(result)}")
            return lines

        for entity in entities:
            lines.append(f"Found datetime/entity: type={entity['type']} text='{entity['text']}'")

        seconds = timer_seconds(result)
        if seconds is not None:
            lines.append(f"Timer duration: {seconds} seconds ({format_duration(seconds)})")
        return lines


__all__ = ["TimerHandler", "format_duration", "timer_seconds"]
