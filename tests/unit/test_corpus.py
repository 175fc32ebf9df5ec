"""Unit tests for example corpus loading and saving."""

import json
from pathlib import Path

import pytest

from spell.corpus import (
    BUILTIN_EXAMPLES,
    builtin_examples,
    load_examples,
    parse_examples,
    save_examples,
)
from spell.errors import CorpusError


class TestBuiltinExamples:
    """Tests for the built-in corpus."""

    def test_intents(self) -> None:
        """Test every built-in intent has five examples."""
        assert list(BUILTIN_EXAMPLES) == ["reminder", "note", "timer", "convert"]
        assert all(len(phrases) == 5 for phrases in BUILTIN_EXAMPLES.values())

    def test_copy_is_independent(self) -> None:
        """Test builtin_examples returns a fresh copy."""
        copy = builtin_examples()
        copy["note"].append("extra")
        assert "extra" not in BUILTIN_EXAMPLES["note"]


class TestParseExamples:
    """Tests for parse_examples."""

    def test_valid(self) -> None:
        """Test a well-formed mapping."""
        assert parse_examples({"note": ["write this down"]}) == {"note": ["write this down"]}

    def test_empty_list_allowed(self) -> None:
        """Test an intent may have no examples."""
        assert parse_examples({"note": []}) == {"note": []}

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "note",
            {},
            {"note": "write this down"},
            {"note": ["ok", 3]},
            {"": ["x"]},
        ],
    )
    def test_invalid(self, data: object) -> None:
        """Test malformed data raises CorpusError."""
        with pytest.raises(CorpusError):
            parse_examples(data)

    def test_corpus_error_is_value_error(self) -> None:
        """Test CorpusError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_examples(None)


class TestLoadAndSave:
    """Tests for load_examples and save_examples."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """Test saved examples load back unchanged."""
        path = tmp_path / "nested" / "examples.json"
        examples = {"greet": ["hello there", "héllo"], "bye": ["goodbye"]}

        save_examples(examples, path)

        assert load_examples(path) == examples

    def test_missing_file_writes_builtins(self, tmp_path: Path) -> None:
        """Test a missing file yields built-ins and writes them."""
        path = tmp_path / "examples.json"

        examples = load_examples(path)

        assert examples == BUILTIN_EXAMPLES
        assert json.loads(path.read_text()) == BUILTIN_EXAMPLES

    def test_missing_file_without_auto_write(self, tmp_path: Path) -> None:
        """Test auto_write=False leaves the file absent."""
        path = tmp_path / "examples.json"

        assert load_examples(path, auto_write=False) == BUILTIN_EXAMPLES
        assert not path.exists()

    def test_malformed_file_not_overwritten(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test invalid JSON falls back to built-ins and keeps the file."""
        path = tmp_path / "examples.json"
        path.write_text("{not json")

        assert load_examples(path) == BUILTIN_EXAMPLES
        assert path.read_text() == "{not json"
        assert "Invalid examples file" in caplog.text

    def test_wrong_shape_falls_back(self, tmp_path: Path) -> None:
        """Test a valid JSON file of the wrong shape falls back."""
        path = tmp_path / "examples.json"
        path.write_text(json.dumps({}))

        assert load_examples(path) == BUILTIN_EXAMPLES
        assert path.read_text() == "{}"
