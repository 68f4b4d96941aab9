"""Best-ever score persistence: a single "<name>|<score>" record."""

import os
from typing import NamedTuple, Protocol

from config import config


class HighScoreRecord(NamedTuple):
    """The best winning score seen across all games."""

    name: str = ""
    score: int = 0


class ScoreStore(Protocol):
    """Anything that can load and save the high-score record."""

    def load(self) -> HighScoreRecord:
        ...

    def save(self, name: str, score: int) -> None:
        ...


def parse_record(text: str) -> HighScoreRecord:
    """
    Parse a stored record.

    Anything without a separator or with a non-integer score falls back to
    an empty record.
    """
    name, sep, score = text.strip().rpartition("|")
    if not sep:
        return HighScoreRecord()
    try:
        return HighScoreRecord(name.strip(), int(score.strip()))
    except ValueError:
        return HighScoreRecord()


def format_record(name: str, score: int) -> str:
    return f"{name}|{score}"


class HighScoreStore:
    """Flat-file high-score store with local recovery from bad files."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path or config.storage.highscore_path

    def load(self) -> HighScoreRecord:
        """Load the record; missing or corrupt files read as ("", 0)."""
        if not os.path.exists(self.path):
            return HighScoreRecord()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return parse_record(f.read())
        except (OSError, UnicodeDecodeError):
            return HighScoreRecord()

    def save(self, name: str, score: int) -> None:
        """Write the record; failures to write are ignored."""
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(format_record(name, score))
        except OSError:
            pass  # Silently fail if can't write


class InMemoryHighScoreStore:
    """High-score store that lives only as long as the process."""

    def __init__(self, name: str = "", score: int = 0) -> None:
        self._record = HighScoreRecord(name, score)

    def load(self) -> HighScoreRecord:
        return self._record

    def save(self, name: str, score: int) -> None:
        self._record = HighScoreRecord(name, score)
