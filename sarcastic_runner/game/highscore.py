# sarcastic_runner/game/highscore.py
from __future__ import annotations
import json
import logging
from pathlib import Path
from .config import HIGHSCORE_KEY, HIGHSCORE_FILE_DEFAULT

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Single best score kept in a small JSON file under a fixed key."""

    def __init__(self, path: str | Path = HIGHSCORE_FILE_DEFAULT, key: str = HIGHSCORE_KEY):
        self.path = Path(path).expanduser()
        self.key = key

    def load(self) -> int:
        """Stored high score, or 0 when the file is missing or unreadable."""
        if not self.path.exists():
            return 0
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return max(0, int(data.get(self.key, 0)))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, e)
            return 0

    def save(self, value: int):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({self.key: int(value)}), encoding="utf-8")
        logger.info("High score %d saved to %s", value, self.path)
