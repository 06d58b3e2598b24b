"""
Best-score persistence.

The engine never touches the disk directly: it is handed a tracker, and the
tracker is handed a store. Tests inject an InMemoryScoreStore; the pygame
front-end uses a JsonScoreStore.
"""

import json
import logging
import os
import tempfile
from typing import Dict, Optional, Protocol

from .config import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    """Key/value capability holding string values, like browser local storage."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryScoreStore:
    """Dict-backed store; nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonScoreStore:
    """
    Store backed by a single JSON object on disk.

    A missing file reads as empty. A file that can't be read or doesn't hold a
    JSON object is logged and also treated as empty, so a corrupt save never
    stops the game from starting.
    """

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable score file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring score file %s: expected a JSON object", self.path)
            return {}
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        # Write beside the target then swap, so a crash never leaves a half-written file.
        fd, tmp = tempfile.mkstemp(dir=parent or ".", prefix=".highscore-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise


def _parse_score(raw: Optional[str]) -> int:
    if raw is None:
        return 0
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("Stored high score %r is not an integer; using 0", raw)
        return 0
    if value < 0:
        logger.warning("Stored high score %d is negative; using 0", value)
        return 0
    return value


class HighScoreTracker:
    """Keeps the best score ever seen, loading it once and saving on new records."""

    def __init__(self, store: ScoreStore, key: str = HIGH_SCORE_KEY):
        self.store = store
        self.key = key
        self._high_score = _parse_score(store.get(key))
        logger.debug("Loaded high score %d", self._high_score)

    @property
    def high_score(self) -> int:
        return self._high_score

    def record(self, score: int) -> bool:
        """
        Compare a finished session's score against the best.
        Returns True if it set a new record. Ties don't count.
        """
        if score <= self._high_score:
            return False
        self._high_score = score
        try:
            self.store.set(self.key, str(score))
        except OSError:
            logger.exception("Failed to save high score %d", score)
        else:
            logger.info("New high score: %d", score)
        return True
