"""TF-IDF vector space model over a labeled example corpus.

The model is built once from an example set (intent -> phrases) and is
read-only afterwards:

- vocabulary: every distinct token of every phrase, sorted, so vector
  indices are reproducible across runs.
- idf: smoothed inverse document frequency, ln((1 + N) / (1 + df)) + 1,
  where N is the number of phrases and df the number of phrases containing
  the token. Always positive.
- example vectors: one TF-IDF vector per phrase, grouped by intent in the
  order the corpus lists them.

Vectors are plain lists of floats; the corpus is small and hand-written, so a
linear scan over every example is fast enough.
"""

import math
from collections import Counter
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from ..errors import MissingDependencyError
from .tokenizer import tokenize

Vector = list[float]


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity of two equal-length vectors.

    Returns 0.0 when either vector has zero magnitude. With non-negative
    components the result lies in [0.0, 1.0]; it is clamped to absorb
    floating point overshoot.
    """
    dot = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for x, y in zip(a, b, strict=True):
        dot += x * y
        norm_a += x * x
        norm_b += y * y

    denominator = math.sqrt(norm_a) * math.sqrt(norm_b)
    if denominator == 0:
        return 0.0
    return max(0.0, min(1.0, dot / denominator))


class VectorSpaceModel:
    """Vocabulary, IDF table and example vectors for one example corpus."""

    def __init__(self, examples: Mapping[str, Sequence[str]]) -> None:
        """Build the model.

        Args:
            examples: Intent name to example phrases. An empty mapping is
                valid and yields an empty vocabulary that matches nothing.

        Raises:
            MissingDependencyError: If examples is None.
        """
        if examples is None:
            raise MissingDependencyError("examples")

        self._examples: dict[str, tuple[str, ...]] = {
            intent: tuple(phrases or ()) for intent, phrases in examples.items()
        }
        tokenized = {
            intent: [tokenize(phrase) for phrase in phrases]
            for intent, phrases in self._examples.items()
        }

        self._vocabulary = self._build_vocabulary(tokenized)
        self._index = {token: i for i, token in enumerate(self._vocabulary)}
        self._idf = self._compute_idf(tokenized)
        self._example_vectors = {
            intent: [self._vectorize_tokens(tokens) for tokens in documents]
            for intent, documents in tokenized.items()
        }

    @staticmethod
    def _build_vocabulary(tokenized: Mapping[str, list[list[str]]]) -> tuple[str, ...]:
        vocab: set[str] = set()
        for documents in tokenized.values():
            for tokens in documents:
                vocab.update(tokens)
        return tuple(sorted(vocab))

    def _compute_idf(self, tokenized: Mapping[str, list[list[str]]]) -> dict[str, float]:
        doc_count = sum(len(documents) for documents in tokenized.values())
        doc_freq: Counter[str] = Counter()
        for documents in tokenized.values():
            for tokens in documents:
                doc_freq.update(set(tokens))

        return {
            token: math.log((1 + doc_count) / (1 + doc_freq[token])) + 1
            for token in self._vocabulary
        }

    def _vectorize_tokens(self, tokens: list[str]) -> Vector:
        vector = [0.0] * len(self._vocabulary)
        if not tokens:
            return vector

        total = len(tokens)
        for token, count in Counter(tokens).items():
            index = self._index.get(token)
            if index is None:
                continue
            vector[index] = (count / total) * self._idf[token]
        return vector

    @property
    def vocabulary(self) -> tuple[str, ...]:
        """Sorted vocabulary; position i is vector dimension i."""
        return self._vocabulary

    @property
    def idf(self) -> Mapping[str, float]:
        """Read-only IDF table."""
        return MappingProxyType(self._idf)

    @property
    def examples(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only copy of the example corpus."""
        return MappingProxyType(self._examples)

    @property
    def example_vectors(self) -> Mapping[str, list[Vector]]:
        """Read-only view of the per-intent example vectors."""
        return MappingProxyType(self._example_vectors)

    @property
    def dimension(self) -> int:
        return len(self._vocabulary)

    def vectorize(self, text: str) -> Vector:
        """Build the TF-IDF vector for arbitrary text.

        Out-of-vocabulary tokens are ignored. Text without tokens yields the
        zero vector.
        """
        return self._vectorize_tokens(tokenize(text))

    def best_match(self, vector: Sequence[float]) -> tuple[str | None, float]:
        """Find the example most similar to a vector.

        Ties keep the first maximum in corpus order.

        Returns:
            (intent, similarity), or (None, 0.0) when nothing scores above 0.
        """
        best_intent: str | None = None
        best_similarity = 0.0
        for intent, vectors in self._example_vectors.items():
            for example in vectors:
                similarity = cosine_similarity(vector, example)
                if similarity > best_similarity:
                    best_intent = intent
                    best_similarity = similarity
        return best_intent, best_similarity


__all__ = ["Vector", "VectorSpaceModel", "cosine_similarity"]
