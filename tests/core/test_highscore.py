"""Tests for the flat-file high-score store."""

import pytest

from wildcat.highscore import (
    HighScoreRecord,
    HighScoreStore,
    InMemoryHighScoreStore,
    format_record,
    parse_record,
)


class TestParseRecord:
    """Tests for reading the "<name>|<score>" layout."""

    def test_valid_record(self):
        assert parse_record("Alice|40") == HighScoreRecord("Alice", 40)

    def test_trailing_newline(self):
        assert parse_record("Alice|40\n") == ("Alice", 40)

    @pytest.mark.parametrize("text", ["", "Alice", "Alice|", "Alice|forty", "|x"])
    def test_corrupt_records_fall_back(self, text):
        assert parse_record(text) == HighScoreRecord("", 0)

    def test_name_containing_separator(self):
        assert parse_record("a|b|12") == ("a|b", 12)

    def test_format(self):
        assert format_record("Bob", 7) == "Bob|7"


class TestHighScoreStore:
    """Tests for loading and saving the file."""

    def test_missing_file(self, tmp_path):
        store = HighScoreStore(str(tmp_path / "nothing.txt"))
        assert store.load() == ("", 0)

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "highscore.txt"
        store = HighScoreStore(str(path))
        store.save("Alice", 41)

        assert path.read_text() == "Alice|41"
        assert store.load() == HighScoreRecord("Alice", 41)

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("garbage without separator")
        assert HighScoreStore(str(path)).load() == ("", 0)

    def test_save_failure_is_silent(self, tmp_path):
        store = HighScoreStore(str(tmp_path / "no" / "such" / "dir.txt"))
        store.save("Alice", 41)
        assert store.load() == ("", 0)

    def test_directory_as_path(self, tmp_path):
        store = HighScoreStore(str(tmp_path))
        assert store.load() == ("", 0)

    def test_default_path_from_config(self):
        from config import config

        assert HighScoreStore().path == config.storage.highscore_path


class TestInMemoryStore:
    def test_round_trip(self):
        store = InMemoryHighScoreStore()
        assert store.load() == ("", 0)
        store.save("Bob", 12)
        assert store.load() == ("Bob", 12)
