"""In-memory buffer for verbose diagnostic lines."""

import logging
from datetime import datetime, timezone
from typing import List


class LogBuffer:
    """Collects timestamped diagnostic lines and forwards them to a logger."""

    def __init__(self, logger: logging.Logger, enabled: bool = False):
        self.logger = logger
        self.enabled = enabled
        self._lines: List[str] = []

    def log(self, message: str) -> None:
        """Buffer and emit ``message`` when enabled, else emit at DEBUG only."""
        if not self.enabled:
            self.logger.debug(message)
            return
        timestamp = datetime.now(timezone.utc).isoformat(timespec='seconds')
        self._lines.append(f"[{timestamp}] {message}")
        self.logger.info(message)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()
