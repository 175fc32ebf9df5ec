"""Configuration module for spell.

This module provides the typed configuration dataclasses. Loading and
profile selection live in ``loader`` and ``profiles``.
"""

from dataclasses import dataclass, field


@dataclass
class ClassifierConfig:
    """Intent classification thresholds."""

    acceptance_threshold: float = 0.8
    primary_confidence_threshold: float = 0.5


@dataclass
class ExamplesConfig:
    """Example corpus location."""

    path: str = "~/.spell/examples.json"
    auto_write: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    unlabeled_log: str = "~/.spell/unlabeled.jsonl"
    log_unlabeled: bool = True


@dataclass
class SpellConfig:
    """Main spell configuration."""

    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    examples: ExamplesConfig = field(default_factory=ExamplesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Public API
__all__ = [
    "ClassifierConfig",
    "ExamplesConfig",
    "LoggingConfig",
    "SpellConfig",
]
