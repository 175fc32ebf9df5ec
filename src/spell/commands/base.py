"""Intent handlers and the dispatcher that routes results to them."""

import logging
from collections.abc import Iterable
from typing import Any, Protocol

from ..errors import UnknownIntentError
from ..nlp.result import IntentResult

logger = logging.getLogger(__name__)


class IntentHandler(Protocol):
    """Handles one intent and reports what it did as output lines."""

    intent: str

    def process(self, result: IntentResult) -> list[str]:
        """Process a classified command."""
        ...


def entity_text(result: IntentResult) -> str:
    """The "text" entity, falling back to the raw text."""
    text = result.entities.get("text")
    if text is None or not str(text).strip():
        return result.raw_text
    return str(text)


def entity_list(result: IntentResult, kind: str) -> list[dict[str, Any]]:
    """Entities of one kind, or an empty list."""
    value = result.entities.get(kind)
    return list(value) if isinstance(value, list) else []


def format_confidence(result: IntentResult) -> str:
    return f"{result.confidence:.2f}"


class Dispatcher:
    """Routes IntentResults to the handler registered for their intent."""

    def __init__(self, handlers: Iterable[IntentHandler] = ()) -> None:
        """Initialize the dispatcher.

        Args:
            handlers: Handlers to register. A later handler for the same
                intent replaces an earlier one.
        """
        self._handlers: dict[str, IntentHandler] = {}
        for handler in handlers:
            self.register(handler)

    def register(self, handler: IntentHandler) -> None:
        self._handlers[handler.intent] = handler

    def handles(self, intent: str) -> bool:
        return intent in self._handlers

    @property
    def intents(self) -> list[str]:
        """Registered intent names in registration order."""
        return list(self._handlers)

    def dispatch(self, result: IntentResult) -> list[str]:
        """Run the handler for the result's intent.

        Args:
            result: A classified command.

        Returns:
            The handler's output lines.

        Raises:
            UnknownIntentError: If no handler is registered for the intent.
        """
        handler = self._handlers.get(result.intent)
        if handler is None:
            raise UnknownIntentError(result.intent)

        logger.debug(f"Dispatching {result.intent} to {type(handler).__name__}")
        return handler.process(result)


__all__ = [
    "Dispatcher",
    "IntentHandler",
    "entity_list",
    "entity_text",
    "format_confidence",
]
