"""Tokenizer shared by the vector space model and semantic classifier."""

import re

STOP_WORDS = frozenset(
    {"the", "a", "to", "for", "at", "be", "on", "of", "in", "me", "my", "is", "am", "are"}
)

_NON_WORD = re.compile(r"[^a-z0-9\s]")


def normalize(text: str) -> str:
    """Lowercase and replace anything but letters, digits and whitespace with spaces."""
    return _NON_WORD.sub(" ", text.lower())


def tokenize(text: str) -> list[str]:
    """Split text into normalized tokens.

    Tokens keep their left-to-right order. Single characters and stop words
    are dropped, so "Remind me, to call mom!" becomes ["remind", "call", "mom"].

    Args:
        text: Raw input text.

    Returns:
        List of tokens, empty for blank input.
    """
    return [
        token
        for token in normalize(text).split()
        if len(token) > 1 and token not in STOP_WORDS
    ]


__all__ = ["STOP_WORDS", "normalize", "tokenize"]
