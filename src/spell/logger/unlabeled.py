"""JSONL log of commands that could not be classified.

Each line records one unknown command so it can later be labeled and added
to the example corpus.
"""

import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ..nlp.result import IntentResult

logger = logging.getLogger(__name__)


@dataclass
class UnlabeledEntry:
    """One logged command.

    Attributes:
        timestamp: When the command was seen (UTC).
        intent: Intent the classifier returned, normally "unknown".
        confidence: Best score the classifier reached.
        text: The command text.
    """

    timestamp: datetime
    intent: str
    confidence: float
    text: str

    @classmethod
    def from_result(cls, text: str, result: IntentResult) -> "UnlabeledEntry":
        return cls(
            timestamp=datetime.now(UTC),
            intent=result.intent,
            confidence=round(result.confidence, 3),
            text=text,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "intent": self.intent,
            "confidence": self.confidence,
            "text": self.text,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UnlabeledEntry":
        """Create from dictionary."""
        return cls(
            timestamp=datetime.fromisoformat(data["timestamp"]),
            intent=data["intent"],
            confidence=float(data["confidence"]),
            text=data["text"],
        )


class UnlabeledLog:
    """Append-only JSONL file of unclassified commands."""

    def __init__(self, path: Path) -> None:
        """Initialize the log.

        Args:
            path: JSONL file to append to. Parent directories are created on
                first write.
        """
        self._path = path

    @property
    def path(self) -> Path:
        """Get the log file path."""
        return self._path

    def write(self, text: str, result: IntentResult) -> bool:
        """Append a command to the log.

        I/O errors are logged, not raised.

        Args:
            text: The command text.
            result: The classification result.

        Returns:
            True if the entry was written.
        """
        entry = UnlabeledEntry.from_result(text, result)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "a", encoding="utf-8") as f:
                json.dump(entry.to_dict(), f)
                f.write("\n")
        except OSError as e:
            logger.warning(f"Could not write unlabeled log {self._path}: {e}")
            return False

        logger.debug(f"Logged unlabeled command: {text!r}")
        return True

    def read(self) -> list[UnlabeledEntry]:
        """Read all logged commands.

        Returns:
            Entries in the order they were written. Lines that do not parse
            are skipped.
        """
        if not self._path.exists():
            return []

        entries = []
        with open(self._path, encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                try:
                    entries.append(UnlabeledEntry.from_dict(json.loads(line)))
                except (ValueError, KeyError, TypeError) as e:
                    logger.warning(f"Skipping malformed unlabeled log line: {e}")

        return entries


__all__ = ["UnlabeledEntry", "UnlabeledLog"]
