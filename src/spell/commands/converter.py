"""Unit conversion handler.

Identifies what to convert and into which unit. The arithmetic itself is out
of scope; the handler only reports the parsed request.
"""

import re

from ..nlp.entities import UNITS
from ..nlp.result import IntentResult, IntentType
from .base import entity_list, entity_text, format_confidence

_TARGET_RE = re.compile(
    r"\b(?:to|into|in)\s+(" + "|".join(sorted(map(re.escape, UNITS), key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)


def target_unit(text: str) -> str | None:
    """Find the unit a conversion asks for ("... to grams" -> "gram").

    Returns:
        Canonical unit name, or None if no target unit is named.
    """
    target = None
    for match in _TARGET_RE.finditer(text):
        target = UNITS[match.group(1).lower()][0]
    return target


class ConvertHandler:
    """Reports the quantities and target unit of a conversion request."""

    intent = IntentType.CONVERT.value

    def process(self, result: IntentResult) -> list[str]:
        lines = [f"[Convert] Intent confidence: {format_confidence(result)}"]

        quantities = entity_list(result, "units")
        for quantity in quantities:
            lines.append(
                f"Quantity: {quantity['value']} {quantity['unit']} ({quantity['dimension']})"
            )

        target = target_unit(result.raw_text or entity_text(result))
        if target is not None:
            lines.append(f"Target unit: {target}")

        if not quantities and target is None:
            lines.append(f"Conversion request (raw): {entity_text(result)}")
        return lines


__all__ = ["ConvertHandler", "target_unit"]
