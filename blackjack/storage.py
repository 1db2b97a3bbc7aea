"""Plain-text persistence for the all-time high score."""

import logging
import os

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Reads and writes a single non-negative integer in a text file.

    A missing, unreadable or corrupt file reads as 0. Write failures are
    logged and reported through the return value, never raised.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def load(self) -> int:
        """Load the stored high score, or 0 if none can be read."""
        if not os.path.exists(self.path):
            return 0

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read().strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0

        if not text:
            return 0
        if not (text.isascii() and text.isdigit()):
            logger.warning("Ignoring corrupt high score file %s: %r", self.path, text)
            return 0
        return int(text)

    def save(self, value: int) -> bool:
        """
        Write the high score.

        Returns:
            True if the value was written
        """
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(str(value))
        except OSError as exc:
            logger.warning("Failed to save high score to %s: %s", self.path, exc)
            return False
        return True
