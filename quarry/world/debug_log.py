"""DebugLog - bounded queue of human-readable game event messages.

Shown in the debug panel.  Every entry is also forwarded to the
``quarry.debug`` logger so a log file captures the full history, not
just the last few lines that fit in the panel.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator

logger = logging.getLogger("quarry.debug")

DEFAULT_CAPACITY = 10


class DebugLog:
    """FIFO message log that evicts the oldest entry when full.

    Attributes:
        capacity: Maximum number of retained messages.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._entries: deque[str] = deque(maxlen=capacity)

    def log(self, message: str) -> None:
        """Append a message, evicting the oldest one beyond capacity."""
        self._entries.append(message)
        logger.debug(message)

    def clear(self) -> None:
        """Remove every message."""
        self._entries.clear()

    @property
    def entries(self) -> list[str]:
        """Return the retained messages, oldest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
