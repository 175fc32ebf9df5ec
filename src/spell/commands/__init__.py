"""Command handlers for spell.

One handler per intent. Handlers only report what was extracted; nothing is
persisted or scheduled.
"""

from .base import Dispatcher, IntentHandler, entity_text
from .converter import ConvertHandler, target_unit
from .note import NoteHandler
from .reminder import ReminderHandler
from .timer import TimerHandler, format_duration, timer_seconds


def default_dispatcher() -> Dispatcher:
    """Dispatcher with the reminder, note, timer and convert handlers."""
    return Dispatcher([ReminderHandler(), NoteHandler(), TimerHandler(), ConvertHandler()])


__all__ = [
    "ConvertHandler",
    "Dispatcher",
    "IntentHandler",
    "NoteHandler",
    "ReminderHandler",
    "TimerHandler",
    "default_dispatcher",
    "entity_text",
    "format_duration",
    "target_unit",
    "timer_seconds",
]
