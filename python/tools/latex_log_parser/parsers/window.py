"""
Sliding window over the most recent physical lines.

LaTeX wraps its output at a fixed width, so a pattern may straddle two lines.
The window keeps the last two lines so they can be matched as one text.
"""

from collections import deque
from typing import Deque, Optional


class LineWindow:
    """Fixed-capacity FIFO of the most recent physical lines."""

    def __init__(self, capacity: int = 2):
        if capacity < 1:
            raise ValueError("Window capacity must be at least 1")
        self._lines: Deque[str] = deque(maxlen=capacity)

    def push(self, line: str) -> None:
        """Append a line, evicting the oldest one when full."""
        self._lines.append(line)

    def text(self) -> str:
        """Held lines concatenated in arrival order, without separator."""
        return "".join(self._lines)

    def is_oldest_empty(self) -> bool:
        """Whether the least recent held line is the empty string."""
        return bool(self._lines) and self._lines[0] == ""

    @property
    def previous(self) -> Optional[str]:
        """The line before the current one, if the window holds one."""
        return self._lines[-2] if len(self._lines) > 1 else None

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)
