"""Rule-based entity extraction for dates/times, numbers and units.

Each kind of entity is extracted independently. A failing extraction is
recorded as an ExtractionOutcome with an error and logged; it never stops the
other extractions and never raises out of extract(). Whatever happens, the
result ends up with a "text" entity.

Entity values are lists of plain dicts so results stay JSON-serializable:

    datetime: {"text", "type", "value"}
        type "duration" -> value in seconds ("10 minutes")
        type "datetime" -> ISO timestamp, relative to now ("in 10 minutes"),
                           plus the offset in "seconds"
        type "time"     -> ISO timestamp of the next occurrence ("at 8am")
        type "date"     -> ISO date ("tomorrow", "friday")
    number:   {"text", "value"}
    units:    {"text", "value", "unit", "dimension"}
"""

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any

from .result import IntentResult

logger = logging.getLogger(__name__)

Entity = dict[str, Any]

WORD_NUMBERS = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

SCALE_WORDS = {"hundred": 100, "thousand": 1000}

DURATION_SECONDS = {
    "second": 1,
    "sec": 1,
    "minute": 60,
    "min": 60,
    "hour": 3600,
    "hr": 3600,
    "day": 86400,
    "week": 604800,
}

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

# alias -> (canonical unit, dimension)
UNITS: dict[str, tuple[str, str]] = {
    "millimeter": ("millimeter", "length"),
    "millimeters": ("millimeter", "length"),
    "mm": ("millimeter", "length"),
    "centimeter": ("centimeter", "length"),
    "centimeters": ("centimeter", "length"),
    "cm": ("centimeter", "length"),
    "meter": ("meter", "length"),
    "meters": ("meter", "length"),
    "metre": ("meter", "length"),
    "metres": ("meter", "length"),
    "m": ("meter", "length"),
    "kilometer": ("kilometer", "length"),
    "kilometers": ("kilometer", "length"),
    "km": ("kilometer", "length"),
    "inch": ("inch", "length"),
    "inches": ("inch", "length"),
    "foot": ("foot", "length"),
    "feet": ("foot", "length"),
    "ft": ("foot", "length"),
    "yard": ("yard", "length"),
    "yards": ("yard", "length"),
    "mile": ("mile", "length"),
    "miles": ("mile", "length"),
    "milligram": ("milligram", "mass"),
    "milligrams": ("milligram", "mass"),
    "mg": ("milligram", "mass"),
    "gram": ("gram", "mass"),
    "grams": ("gram", "mass"),
    "g": ("gram", "mass"),
    "kilogram": ("kilogram", "mass"),
    "kilograms": ("kilogram", "mass"),
    "kg": ("kilogram", "mass"),
    "pound": ("pound", "mass"),
    "pounds": ("pound", "mass"),
    "lb": ("pound", "mass"),
    "lbs": ("pound", "mass"),
    "ounce": ("ounce", "mass"),
    "ounces": ("ounce", "mass"),
    "oz": ("ounce", "mass"),
    "milliliter": ("milliliter", "volume"),
    "milliliters": ("milliliter", "volume"),
    "ml": ("milliliter", "volume"),
    "liter": ("liter", "volume"),
    "liters": ("liter", "volume"),
    "litre": ("liter", "volume"),
    "litres": ("liter", "volume"),
    "l": ("liter", "volume"),
    "gallon": ("gallon", "volume"),
    "gallons": ("gallon", "volume"),
    "cup": ("cup", "volume"),
    "cups": ("cup", "volume"),
    "celsius": ("celsius", "temperature"),
    "fahrenheit": ("fahrenheit", "temperature"),
    "kelvin": ("kelvin", "temperature"),
    "degrees": ("degree", "temperature"),
    "second": ("second", "time"),
    "seconds": ("second", "time"),
    "minute": ("minute", "time"),
    "minutes": ("minute", "time"),
    "hour": ("hour", "time"),
    "hours": ("hour", "time"),
    "day": ("day", "time"),
    "days": ("day", "time"),
    "week": ("week", "time"),
    "weeks": ("week", "time"),
    "usd": ("usd", "currency"),
    "dollar": ("usd", "currency"),
    "dollars": ("usd", "currency"),
    "eur": ("eur", "currency"),
    "euro": ("eur", "currency"),
    "euros": ("eur", "currency"),
    "gbp": ("gbp", "currency"),
    "jpy": ("jpy", "currency"),
    "yen": ("jpy", "currency"),
}


def _alternation(words: Iterable[str]) -> str:
    # Longest first so "minutes" wins over "m".
    return "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))


_WORD_NUMBER = _alternation(list(WORD_NUMBERS) + list(SCALE_WORDS))
_NUMBER = rf"\d+(?:\.\d+)?|(?:{_WORD_NUMBER})(?:[\s-]+(?:{_WORD_NUMBER}))*"
_DURATION_UNIT = r"(second|sec|minute|min|hour|hr|day|week)s?"

_DIGITS_RE = re.compile(r"(?<![\w.])\d+(?:\.\d+)?")
_DIGITS_ONLY_RE = re.compile(r"\d+(?:\.\d+)?")
_WORD_NUMBER_RE = re.compile(rf"\b(?:{_WORD_NUMBER})(?:[\s-]+(?:{_WORD_NUMBER}))*\b", re.IGNORECASE)
_RELATIVE_RE = re.compile(
    rf"\b(?:in|after)\s+(?P<amount>{_NUMBER}|an?)\s*{_DURATION_UNIT}\b", re.IGNORECASE
)
_DURATION_RE = re.compile(
    rf"(?<![\w.])(?P<amount>{_NUMBER}|an?)\s*{_DURATION_UNIT}\b", re.IGNORECASE
)
_CLOCK_PERIOD_RE = re.compile(
    r"(?:\bat\s+)?(?<![\w:.])(\d{1,2})(?:[:.](\d{2}))?\s*(am|pm)\b", re.IGNORECASE
)
_CLOCK_AT_RE = re.compile(r"\bat\s+(\d{1,2})(?::(\d{2}))?(?![\w:.])", re.IGNORECASE)
_DAY_RE = re.compile(rf"\b(today|tonight|tomorrow|{'|'.join(WEEKDAYS)})\b", re.IGNORECASE)
_UNIT_RE = re.compile(
    rf"(?<![\w.])(?P<amount>{_NUMBER})\s*(?P<unit>{_alternation(UNITS)})\b", re.IGNORECASE
)


def parse_number(text: str) -> int | float | None:
    """Parse digits or English number words into a number.

    Args:
        text: A number like "42", "2.5", "twenty five" or "three hundred".

    Returns:
        The value, or None if the text is not a number.

    Examples:
        >>> parse_number("forty-five")
        45
        >>> parse_number("1.5")
        1.5
    """
    text = text.strip().lower()
    if not text:
        return None
    if text in ("a", "an"):
        return 1

    if _DIGITS_ONLY_RE.fullmatch(text):
        value = float(text)
        return int(value) if value.is_integer() else value

    total = 0
    current = 0
    for word in re.split(r"[\s-]+", text):
        if word in WORD_NUMBERS:
            current += WORD_NUMBERS[word]
        elif word == "hundred":
            current = max(current, 1) * 100
        elif word == "thousand":
            total += max(current, 1) * 1000
            current = 0
        else:
            return None
    return total + current


def _overlaps(span: tuple[int, int], taken: list[tuple[int, int]]) -> bool:
    start, end = span
    return any(start < t_end and end > t_start for t_start, t_end in taken)


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class ExtractionOutcome:
    """Result of one sub-extraction.

    Attributes:
        kind: Entity key ("datetime", "number", "units").
        value: Extracted entities, empty if nothing was found.
        error: Error description if the extraction failed.
    """

    kind: str
    value: tuple[Entity, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RuleBasedEntityExtractor:
    """Extracts dates/times, numbers and units with regular expressions.

    Works offline with no models to load. Relative and clock times are
    resolved against the clock passed in (local time by default).
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        """Initialize the extractor.

        Args:
            clock: Returns the current time. Defaults to local now.
        """
        self._clock = clock or _local_now
        self._extractors: list[tuple[str, Callable[[str], list[Entity]]]] = [
            ("datetime", self.extract_datetimes),
            ("number", self.extract_numbers),
            ("units", self.extract_units),
        ]

    def extract(self, text: str, result: IntentResult) -> None:
        """Add extracted entities to the result.

        Keys are only added when something was found. The "text" entity is
        set to the input unless it already holds a non-blank value.
        """
        for outcome in self.extract_all(text):
            if outcome.ok and outcome.value:
                result.entities[outcome.kind] = list(outcome.value)

        existing = result.entities.get("text")
        if existing is None or not str(existing).strip():
            result.entities["text"] = text

    def extract_all(self, text: str) -> list[ExtractionOutcome]:
        """Run every sub-extraction and report each outcome."""
        return [self._attempt(kind, extractor, text) for kind, extractor in self._extractors]

    def _attempt(
        self, kind: str, extractor: Callable[[str], list[Entity]], text: str
    ) -> ExtractionOutcome:
        try:
            found = extractor(text)
        except Exception as e:
            logger.warning(f"{kind} extraction failed for {text!r}: {e}")
            return ExtractionOutcome(kind=kind, error=str(e) or type(e).__name__)
        return ExtractionOutcome(kind=kind, value=tuple(found))

    def extract_datetimes(self, text: str) -> list[Entity]:
        """Find durations, relative times, clock times and day references."""
        if not text:
            return []

        now = self._clock()
        lowered = text.lower()
        found: list[tuple[int, Entity]] = []
        taken: list[tuple[int, int]] = []

        for match in _RELATIVE_RE.finditer(text):
            seconds = self._duration_seconds(match.group("amount"), match.group(2))
            if seconds is None:
                continue
            taken.append(match.span())
            try:
                when = now + timedelta(seconds=seconds)
            except OverflowError:
                logger.debug(f"Relative time out of range: {match.group(0)!r}")
                continue
            found.append(
                (
                    match.start(),
                    {
                        "text": match.group(0),
                        "type": "datetime",
                        "value": when.isoformat(),
                        "seconds": seconds,
                    },
                )
            )

        for match in _DURATION_RE.finditer(text):
            if _overlaps(match.span(), taken):
                continue
            seconds = self._duration_seconds(match.group("amount"), match.group(2))
            if seconds is None:
                continue
            taken.append(match.span())
            found.append(
                (match.start(), {"text": match.group(0), "type": "duration", "value": seconds})
            )

        for pattern in (_CLOCK_PERIOD_RE, _CLOCK_AT_RE):
            for match in pattern.finditer(text):
                if _overlaps(match.span(), taken):
                    continue
                groups = match.groups()
                period = groups[2] if len(groups) > 2 else None
                resolved = self._resolve_clock(now, lowered, groups[0], groups[1], period)
                if resolved is None:
                    continue
                taken.append(match.span())
                found.append(
                    (
                        match.start(),
                        {"text": match.group(0), "type": "time", "value": resolved.isoformat()},
                    )
                )

        for match in _DAY_RE.finditer(text):
            day = self._resolve_day(now, match.group(1).lower())
            found.append(
                (match.start(), {"text": match.group(0), "type": "date", "value": day.isoformat()})
            )

        found.sort(key=lambda item: item[0])
        return [entity for _, entity in found]

    def extract_numbers(self, text: str) -> list[Entity]:
        """Find numbers written as digits or English words."""
        if not text:
            return []

        found: list[tuple[int, Entity]] = []
        for pattern in (_DIGITS_RE, _WORD_NUMBER_RE):
            for match in pattern.finditer(text):
                value = parse_number(match.group(0))
                if value is None:
                    continue
                found.append((match.start(), {"text": match.group(0), "value": value}))

        found.sort(key=lambda item: item[0])
        return [entity for _, entity in found]

    def extract_units(self, text: str) -> list[Entity]:
        """Find quantities with a unit of measure ("5 kilograms", "100 usd")."""
        if not text:
            return []

        found: list[Entity] = []
        for match in _UNIT_RE.finditer(text):
            value = parse_number(match.group("amount"))
            if value is None:
                continue
            unit, dimension = UNITS[match.group("unit").lower()]
            found.append(
                {"text": match.group(0), "value": value, "unit": unit, "dimension": dimension}
            )
        return found

    @staticmethod
    def _duration_seconds(amount: str, unit: str) -> int | None:
        value = parse_number(amount)
        if value is None:
            return None
        return int(value * DURATION_SECONDS[unit.lower()])

    @staticmethod
    def _resolve_clock(
        now: datetime, lowered: str, hour_text: str, minute_text: str | None, period: str | None
    ) -> datetime | None:
        hour = int(hour_text)
        minute = int(minute_text) if minute_text else 0

        if period:
            if not 1 <= hour <= 12:
                return None
            if period.lower() == "pm" and hour != 12:
                hour += 12
            elif period.lower() == "am" and hour == 12:
                hour = 0
        if hour > 23 or minute > 59:
            return None

        result = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
        if "tomorrow" in lowered:
            return result + timedelta(days=1)

        # If the time has passed today, it means tomorrow
        if result <= now:
            result += timedelta(days=1)
        return result

    @staticmethod
    def _resolve_day(now: datetime, word: str) -> date:
        today = now.date()
        if word in ("today", "tonight"):
            return today
        if word == "tomorrow":
            return today + timedelta(days=1)

        days_ahead = (WEEKDAYS.index(word) - today.weekday()) % 7
        return today + timedelta(days=days_ahead or 7)


__all__ = [
    "UNITS",
    "ExtractionOutcome",
    "RuleBasedEntityExtractor",
    "parse_number",
]
