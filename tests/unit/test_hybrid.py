"""Unit tests for the hybrid classifier."""

import pytest

from spell.errors import MissingDependencyError
from spell.nlp.hybrid import DEFAULT_PRIMARY_CONFIDENCE_THRESHOLD, HybridClassifier
from spell.nlp.keyword import KeywordClassifier
from spell.nlp.result import IntentResult, unknown_result
from spell.nlp.semantic import SemanticClassifier


class StubClassifier:
    """Returns a fixed result and counts calls."""

    def __init__(self, result: IntentResult) -> None:
        self.result = result
        self.calls: list[str] = []

    def classify(self, text: str) -> IntentResult:
        self.calls.append(text)
        return self.result


class FailingClassifier:
    """Raises on every call."""

    def classify(self, text: str) -> IntentResult:
        raise RuntimeError("classifier broke")


class TestHybridWithStubs:
    """Tests for the fallback policy with controlled results."""

    def test_confident_primary_skips_fallback(self) -> None:
        """Test the fallback is never called when the primary is confident."""
        primary = StubClassifier(IntentResult("timer", 0.7, "x"))
        fallback = StubClassifier(IntentResult("note", 1.0, "x"))
        hybrid = HybridClassifier(primary, fallback)

        result = hybrid.classify("x")

        assert result.intent == "timer"
        assert fallback.calls == []

    def test_threshold_is_inclusive(self) -> None:
        """Test confidence equal to the threshold counts as confident."""
        primary = StubClassifier(IntentResult("timer", 0.5, "x"))
        fallback = StubClassifier(IntentResult("note", 1.0, "x"))

        assert HybridClassifier(primary, fallback).classify("x").intent == "timer"
        assert fallback.calls == []

    def test_weak_primary_replaced_by_better_fallback(self) -> None:
        """Test a more confident fallback wins over a weak primary."""
        primary = StubClassifier(IntentResult("timer", 0.3, "x"))
        fallback = StubClassifier(IntentResult("note", 0.6, "x"))

        result = HybridClassifier(primary, fallback).classify("x")

        assert result.intent == "note"
        assert fallback.calls == ["x"]

    def test_weak_primary_kept_when_fallback_not_better(self) -> None:
        """Test the primary is kept unless the fallback is strictly better."""
        primary = StubClassifier(IntentResult("timer", 0.3, "x"))
        fallback = StubClassifier(IntentResult("note", 0.3, "x"))

        assert HybridClassifier(primary, fallback).classify("x").intent == "timer"

    def test_unknown_fallback_never_wins(self) -> None:
        """Test an unknown fallback is ignored even with higher confidence."""
        primary = StubClassifier(unknown_result("x"))
        fallback = StubClassifier(unknown_result("x", 0.4))

        result = HybridClassifier(primary, fallback).classify("x")

        assert result is primary.result
        assert fallback.calls == ["x"]

    def test_unknown_primary_consults_fallback(self) -> None:
        """Test an unknown primary always triggers the fallback."""
        primary = StubClassifier(unknown_result("x"))
        fallback = StubClassifier(IntentResult("note", 0.1, "x"))

        assert HybridClassifier(primary, fallback).classify("x").intent == "note"

    @pytest.mark.parametrize(
        ("primary", "fallback"),
        [
            (IntentResult("timer", 0.7, "x"), unknown_result("x")),
            (IntentResult("timer", 0.2, "x"), unknown_result("x", 0.4)),
            (IntentResult("timer", 0.2, "x"), IntentResult("note", 0.1, "x")),
            (unknown_result("x"), IntentResult("note", 0.05, "x")),
            (unknown_result("x"), IntentResult("note", 0.9, "x")),
        ],
    )
    def test_labeled_input_never_unknown(
        self, primary: IntentResult, fallback: IntentResult
    ) -> None:
        """Test a label from either side is never lost to unknown."""
        hybrid = HybridClassifier(StubClassifier(primary), StubClassifier(fallback))
        assert not hybrid.classify("x").is_unknown

    def test_primary_error_propagates(self) -> None:
        """Test primary exceptions are not swallowed."""
        hybrid = HybridClassifier(FailingClassifier(), StubClassifier(unknown_result("x")))
        with pytest.raises(RuntimeError, match="classifier broke"):
            hybrid.classify("x")

    def test_nested_hybrid(self) -> None:
        """Test a hybrid can wrap another hybrid."""
        inner = HybridClassifier(
            StubClassifier(unknown_result("x")),
            StubClassifier(IntentResult("note", 0.4, "x")),
        )
        outer = HybridClassifier(inner, StubClassifier(IntentResult("timer", 0.9, "x")))

        assert outer.classify("x").intent == "timer"

    def test_threshold_property(self) -> None:
        """Test the threshold can be changed and is validated."""
        hybrid = HybridClassifier(
            StubClassifier(IntentResult("timer", 0.7, "x")),
            StubClassifier(IntentResult("note", 0.9, "x")),
        )
        assert hybrid.primary_confidence_threshold == DEFAULT_PRIMARY_CONFIDENCE_THRESHOLD

        hybrid.primary_confidence_threshold = 0.8
        assert hybrid.classify("x").intent == "note"

        with pytest.raises(ValueError):
            hybrid.primary_confidence_threshold = 2.0

    def test_missing_primary(self) -> None:
        """Test construction fails without a primary."""
        with pytest.raises(MissingDependencyError, match="primary"):
            HybridClassifier(None, StubClassifier(unknown_result("")))  # type: ignore[arg-type]

    def test_missing_fallback(self) -> None:
        """Test construction fails without a fallback."""
        with pytest.raises(MissingDependencyError, match="fallback"):
            HybridClassifier(StubClassifier(unknown_result("")), None)  # type: ignore[arg-type]


class TestKeywordSemanticHybrid:
    """Tests for the standard keyword then semantic pairing."""

    @pytest.fixture
    def classifier(self, examples: dict[str, list[str]]) -> HybridClassifier:
        """Create the standard hybrid over the test corpus."""
        return HybridClassifier(KeywordClassifier(), SemanticClassifier(examples))

    def test_keyword_match(self, classifier: HybridClassifier) -> None:
        """Test a keyword hit is returned directly."""
        result = classifier.classify("reminder to call dad")
        assert result.intent == "reminder"
        assert result.confidence > classifier.primary_confidence_threshold

    def test_semantic_fallback(self, classifier: HybridClassifier) -> None:
        """Test text without keywords falls back to similarity."""
        result = classifier.classify("please write this information down")
        assert result.intent == "note"
        assert result.confidence == pytest.approx(1.0)

    def test_unknown(self, classifier: HybridClassifier) -> None:
        """Test text neither stage understands."""
        result = classifier.classify("the weather is nice today")
        assert result.is_unknown
        assert result.confidence == 0.0

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank(self, classifier: HybridClassifier, text: str) -> None:
        """Test blank input is unknown."""
        result = classifier.classify(text)
        assert result.is_unknown
        assert result.confidence == 0.0
