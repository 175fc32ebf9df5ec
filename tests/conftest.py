"""Shared fixtures."""

from datetime import UTC, datetime

import pytest

# Monday
FIXED_NOW = datetime(2026, 1, 5, 10, 0, tzinfo=UTC)


@pytest.fixture
def examples() -> dict[str, list[str]]:
    """Small labeled corpus for the semantic classifier."""
    return {
        "reminder": [
            "remind me to call mom tomorrow",
            "set a reminder for 8am",
            "reminder to buy milk",
            "remind me about the meeting at 9",
        ],
        "note": [
            "take note of this",
            "remember that I have a meeting",
            "save this note",
            "write this down",
        ],
        "timer": [
            "set timer for 10 minutes",
            "start countdown for 30 seconds",
            "run timer for 5 minutes",
        ],
    }


@pytest.fixture
def fixed_now() -> datetime:
    """The time used by extractors under test."""
    return FIXED_NOW
