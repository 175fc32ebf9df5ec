"""Example corpus for the semantic classifier.

The corpus is a JSON object mapping intent names to lists of example
phrases:

    {"reminder": ["remind me to call mom tomorrow", ...], "note": [...]}

A built-in corpus is used when no file exists, and written out so it can be
edited.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from .errors import CorpusError

logger = logging.getLogger(__name__)

BUILTIN_EXAMPLES: dict[str, list[str]] = {
    "reminder": [
        "remind me to call mom tomorrow",
        "set a reminder for 8am",
        "reminder to buy milk",
        "remind me about the meeting at 9",
        "please remind me to pay bills",
    ],
    "note": [
        "take note of this",
        "remember that I have a meeting",
        "save this note",
        "note: buy coffee",
        "write this down",
    ],
    "timer": [
        "set timer for 10 minutes",
        "start countdown for 30 seconds",
        "run timer for 5 minutes",
        "timer 1 minute",
        "countdown 2 hours",
    ],
    "convert": [
        "convert 5 kilograms to grams",
        "how many meters are in 2 kilometers",
        "change 10 inches to centimeters",
        "convert 100 usd to eur",
        "what is 37 celsius in fahrenheit",
    ],
}


def builtin_examples() -> dict[str, list[str]]:
    """Fresh copy of the built-in corpus."""
    return {intent: list(phrases) for intent, phrases in BUILTIN_EXAMPLES.items()}


def parse_examples(data: Any) -> dict[str, list[str]]:
    """Validate decoded JSON as an example corpus.

    Args:
        data: Decoded JSON value.

    Returns:
        Intent name to example phrases.

    Raises:
        CorpusError: If data is not a non-empty mapping of intent names to
            lists of strings.
    """
    if not isinstance(data, dict):
        raise CorpusError(f"Example corpus must be a JSON object, got {type(data).__name__}")
    if not data:
        raise CorpusError("Example corpus is empty")

    examples: dict[str, list[str]] = {}
    for intent, phrases in data.items():
        if not isinstance(intent, str) or not intent.strip():
            raise CorpusError(f"Invalid intent name: {intent!r}")
        if not isinstance(phrases, list):
            raise CorpusError(f"Examples for {intent!r} must be a list")
        for phrase in phrases:
            if not isinstance(phrase, str):
                raise CorpusError(f"Example for {intent!r} is not a string: {phrase!r}")
        examples[intent] = list(phrases)
    return examples


def save_examples(examples: Mapping[str, Sequence[str]], path: Path) -> None:
    """Write an example corpus as pretty-printed JSON.

    Args:
        examples: Intent name to example phrases.
        path: Destination file. Parent directories are created.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {intent: list(phrases) for intent, phrases in examples.items()}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
    logger.debug(f"Saved {len(data)} intents to {path}")


def load_examples(path: Path, auto_write: bool = True) -> dict[str, list[str]]:
    """Load an example corpus, falling back to the built-in one.

    Args:
        path: JSON corpus file.
        auto_write: Write the built-in corpus to path when the file is missing.

    Returns:
        Intent name to example phrases. A file that cannot be read or parsed
        is logged and left untouched, and the built-in corpus is returned.
    """
    if not path.exists():
        examples = builtin_examples()
        if auto_write:
            try:
                save_examples(examples, path)
                logger.info(f"Wrote built-in examples to {path}")
            except OSError as e:
                logger.warning(f"Could not write examples to {path}: {e}")
        return examples

    try:
        with open(path, encoding="utf-8") as f:
            examples = parse_examples(json.load(f))
    except (OSError, json.JSONDecodeError, CorpusError) as e:
        logger.warning(f"Invalid examples file {path}, using built-in examples: {e}")
        return builtin_examples()

    logger.info(f"Loaded examples from {path} (intents: {len(examples)})")
    return examples


__all__ = [
    "BUILTIN_EXAMPLES",
    "builtin_examples",
    "load_examples",
    "parse_examples",
    "save_examples",
]
