"""Error types for the spell assistant.

The classification core only raises on contract violations (a required
collaborator is missing). Text input never raises.
"""


class SpellError(Exception):
    """Base exception for spell errors."""

    pass


class MissingDependencyError(SpellError, TypeError):
    """Raised when a required constructor argument is None."""

    def __init__(self, name: str) -> None:
        """Initialize missing dependency error.

        Args:
            name: Name of the missing argument.
        """
        super().__init__(f"{name} is required")
        self.name = name


class CorpusError(SpellError, ValueError):
    """Raised when example corpus data has the wrong shape."""

    pass


class UnknownIntentError(SpellError, LookupError):
    """Raised when no handler is registered for an intent."""

    def __init__(self, intent: str) -> None:
        super().__init__(f"No handler registered for intent '{intent}'")
        self.intent = intent


class ConfigError(SpellError):
    """Raised when configuration values are invalid."""

    pass


__all__ = [
    "ConfigError",
    "CorpusError",
    "MissingDependencyError",
    "SpellError",
    "UnknownIntentError",
]
