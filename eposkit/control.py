"""Keyboard control of two tasks' scheduling priorities.

The up and down arrows change the first task's priority, the left and
right arrows the second's. Priorities stay within ``0 .. 2 * NZERO - 1``.
"""

from __future__ import annotations

from collections.abc import Callable

NZERO = 20
MIN_PRIORITY = 0
MAX_PRIORITY = 2 * NZERO - 1
INITIAL_PRIORITY = 20

UP = 0x4800
DOWN = 0x5000
LEFT = 0x4D00
RIGHT = 0x4B00

_KEY_ACTIONS = {
    UP: ("p1", 1),
    DOWN: ("p1", -1),
    LEFT: ("p2", 1),
    RIGHT: ("p2", -1),
}


class PriorityControl:
    """Tracks two tasks' priorities and applies key presses to them."""

    def __init__(self, setpriority: Callable[[int, int], object], pid: int, cid: int) -> None:
        self._setpriority = setpriority
        self.pid = pid
        self.cid = cid
        self.p1 = INITIAL_PRIORITY
        self.p2 = INITIAL_PRIORITY
        setpriority(pid, self.p1)
        setpriority(cid, self.p2)

    def handle_key(self, key: int) -> bool:
        """Apply one key code; return True if a priority changed."""
        action = _KEY_ACTIONS.get(key)
        if action is None:
            return False
        attr, delta = action
        value = getattr(self, attr) + delta
        if not MIN_PRIORITY <= value <= MAX_PRIORITY:
            return False
        setattr(self, attr, value)
        self._setpriority(self.pid if attr == "p1" else self.cid, value)
        return True