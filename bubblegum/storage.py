"""Persistent storage of the best score ever reached."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

_KEY = "FScore"


def default_store_path() -> Path:
    """Return the file where the high score lives by default."""
    base = os.environ.get("XDG_DATA_HOME")
    root = Path(base) if base else Path.home() / ".local" / "share"
    return root / "bubblegum" / "highscore.json"


class HighScoreStore:
    """A single high score kept in a small JSON file."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else default_store_path()

    def high_score(self) -> int:
        """Return the stored high score, or 0 if none has been saved."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (FileNotFoundError, json.JSONDecodeError):
            return 0
        value = data.get(_KEY, 0) if isinstance(data, dict) else 0
        return value if isinstance(value, int) else 0

    def submit(self, score: int) -> bool:
        """Save the score if it beats the stored one; return whether it did."""
        if score <= self.high_score():
            return False
        self._write(score)
        return True

    def _write(self, score: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump({_KEY: score}, handle)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise