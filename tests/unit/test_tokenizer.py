"""Unit tests for the tokenizer."""

from spell.nlp.tokenizer import STOP_WORDS, normalize, tokenize


class TestNormalize:
    """Tests for normalize."""

    def test_lowercases(self) -> None:
        """Test text is lowercased."""
        assert normalize("Set TIMER") == "set timer"

    def test_punctuation_becomes_space(self) -> None:
        """Test punctuation is replaced, not removed."""
        assert normalize("remind@me#to") == "remind me to"


class TestTokenize:
    """Tests for tokenize."""

    def test_strips_punctuation_and_stop_words(self) -> None:
        """Test the canonical example."""
        assert tokenize("Remind me, to call mom!") == ["remind", "call", "mom"]

    def test_keeps_order_and_duplicates(self) -> None:
        """Test tokens keep left-to-right order and repeats."""
        assert tokenize("note this note") == ["note", "this", "note"]

    def test_drops_single_characters(self) -> None:
        """Test tokens of length one are dropped."""
        assert tokenize("run timer for 5 minutes") == ["run", "timer", "minutes"]

    def test_keeps_digits(self) -> None:
        """Test multi-digit numbers survive."""
        assert tokenize("set timer for 10 minutes") == ["set", "timer", "10", "minutes"]

    def test_empty_input(self) -> None:
        """Test empty and whitespace-only input."""
        assert tokenize("") == []
        assert tokenize("   \t\n") == []

    def test_only_stop_words(self) -> None:
        """Test input made only of stop words."""
        assert tokenize("the a to for at on") == []

    def test_apostrophe_splits_word(self) -> None:
        """Test contractions split and the single letter is dropped."""
        assert tokenize("don't") == ["don"]

    def test_stop_word_set(self) -> None:
        """Test the exact stop word set."""
        assert STOP_WORDS == {
            "the", "a", "to", "for", "at", "be", "on", "of", "in", "me", "my", "is", "am", "are",
        }
