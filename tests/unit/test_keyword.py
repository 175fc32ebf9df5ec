"""Unit tests for the keyword classifier."""

import pytest

from spell.nlp.keyword import DEFAULT_KEYWORDS, KeywordClassifier, keyword_confidence


class TestKeywordConfidence:
    """Tests for the hit-count confidence ramp."""

    def test_no_hits(self) -> None:
        """Test zero hits give zero confidence."""
        assert keyword_confidence(0) == 0.0

    def test_one_hit(self) -> None:
        """Test one hit gives 0.7."""
        assert keyword_confidence(1) == pytest.approx(0.7)

    @pytest.mark.parametrize("hits", [2, 3, 10])
    def test_saturates(self, hits: int) -> None:
        """Test two or more hits saturate at 0.95."""
        assert keyword_confidence(hits) == pytest.approx(0.95)


class TestKeywordClassifier:
    """Tests for KeywordClassifier."""

    @pytest.fixture
    def classifier(self) -> KeywordClassifier:
        """Create a classifier with the default table."""
        return KeywordClassifier()

    def test_default_table(self, classifier: KeywordClassifier) -> None:
        """Test the default table is used when none is given."""
        assert classifier.keywords == DEFAULT_KEYWORDS

    def test_reminder_wins_tie_with_convert(self, classifier: KeywordClassifier) -> None:
        """Test "remind" and "to " tie and the earlier table entry wins."""
        assert classifier.score("remind me to call mom") == {"reminder": 1, "convert": 1}

        result = classifier.classify("remind me to call mom")
        assert result.intent == "reminder"
        assert result.confidence == pytest.approx(0.7)
        assert result.raw_text == "remind me to call mom"

    def test_timer_two_hits(self, classifier: KeywordClassifier) -> None:
        """Test "timer" plus "for " saturate the confidence."""
        result = classifier.classify("set timer for 10 minutes")
        assert result.intent == "timer"
        assert result.confidence == pytest.approx(0.95)

    def test_multi_word_keyword(self, classifier: KeywordClassifier) -> None:
        """Test "note" and "take note" both count."""
        result = classifier.classify("take note of this important information")
        assert result.intent == "note"
        assert result.confidence == pytest.approx(0.95)

    def test_single_hit(self, classifier: KeywordClassifier) -> None:
        """Test one keyword hit gives 0.7."""
        result = classifier.classify("note this")
        assert result.intent == "note"
        assert result.confidence == pytest.approx(0.7)

    def test_case_insensitive(self, classifier: KeywordClassifier) -> None:
        """Test matching ignores case."""
        result = classifier.classify("SET TIMER")
        assert result.intent == "timer"
        assert result.confidence == pytest.approx(0.7)

    def test_substring_match(self, classifier: KeywordClassifier) -> None:
        """Test keywords match inside longer words."""
        assert classifier.score("reminders") == {"reminder": 2}

    def test_no_match(self, classifier: KeywordClassifier) -> None:
        """Test unmatched text is unknown with zero confidence."""
        result = classifier.classify("hello world")
        assert result.is_unknown
        assert result.confidence == 0.0

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_input(self, classifier: KeywordClassifier, text: str) -> None:
        """Test blank input is unknown."""
        result = classifier.classify(text)
        assert result.is_unknown
        assert result.confidence == 0.0

    def test_tie_break_follows_table_order(self) -> None:
        """Test the intent whose first keyword comes first wins a tie."""
        text = "beta alpha"
        assert KeywordClassifier([("alpha", "a"), ("beta", "b")]).classify(text).intent == "a"
        assert KeywordClassifier([("beta", "b"), ("alpha", "a")]).classify(text).intent == "b"

    def test_custom_keywords_lowercased(self) -> None:
        """Test injected keywords are matched case-insensitively."""
        classifier = KeywordClassifier([("PING", "ping")])
        assert classifier.keywords == (("ping", "ping"),)
        assert classifier.classify("Ping the server").intent == "ping"

    def test_empty_table(self) -> None:
        """Test an empty table classifies everything as unknown."""
        assert KeywordClassifier([]).classify("set timer").is_unknown

    @pytest.mark.parametrize(
        "text",
        ["remind me", "convert 5 kg to grams in a minute for me", "how many timers", "x"],
    )
    def test_confidence_in_range(self, classifier: KeywordClassifier, text: str) -> None:
        """Test confidence always lies in [0, 1]."""
        assert 0.0 <= classifier.classify(text).confidence <= 1.0
