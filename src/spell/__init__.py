"""spell - natural-language command assistant.

spell turns a short command into an intent and its entities:
- Keyword matching for the obvious cases
- TF-IDF similarity against an example corpus for the rest
- Rule-based extraction of dates/times, numbers and units

Usage:
    spell "remind me to call mom tomorrow"
    spell cast "set timer for 10 minutes"
    spell --profile prod note "buy coffee"
"""

__version__ = "0.1.0"

from .config import SpellConfig
from .config.loader import load_config
from .nlp import IntentResult, NlpPipeline

__all__ = [
    "IntentResult",
    "NlpPipeline",
    "SpellConfig",
    "__version__",
    "load_config",
]
