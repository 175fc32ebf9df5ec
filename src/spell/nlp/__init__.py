"""Natural-language core for spell.

Provides the keyword, semantic and hybrid intent classifiers, the entity
extractor and the pipeline that ties them together.
"""

from .entities import ExtractionOutcome, RuleBasedEntityExtractor, parse_number
from .hybrid import HybridClassifier
from .keyword import DEFAULT_KEYWORDS, KeywordClassifier
from .pipeline import NlpPipeline
from .result import (
    UNKNOWN_INTENT,
    EntityExtractor,
    IntentClassifier,
    IntentResult,
    IntentType,
)
from .semantic import SemanticClassifier
from .tokenizer import STOP_WORDS, tokenize
from .vector_space import VectorSpaceModel, cosine_similarity

__all__ = [
    "DEFAULT_KEYWORDS",
    "STOP_WORDS",
    "UNKNOWN_INTENT",
    "EntityExtractor",
    "ExtractionOutcome",
    "HybridClassifier",
    "IntentClassifier",
    "IntentResult",
    "IntentType",
    "KeywordClassifier",
    "NlpPipeline",
    "RuleBasedEntityExtractor",
    "SemanticClassifier",
    "VectorSpaceModel",
    "cosine_similarity",
    "parse_number",
    "tokenize",
]
