"""Animated bar-chart sorting drawn onto a graphics device.

Each array element is a horizontal bar five pixels high; its length on
screen is a quarter of its value. Swaps are shown by briefly
highlighting the two bars involved.
"""

from __future__ import annotations

import time
from collections.abc import MutableSequence

from eposkit.clib import Rand
from eposkit.graphics import GraphicDevice, rgb

BAR_HEIGHT = 5
BAR_CLEAR_WIDTH = 300
BOUNDARY_HEIGHT = 600
VALUE_LIMIT = 1000
DEFAULT_DELAY = 0.001

BLACK = rgb(0, 0, 0)
GREEN = rgb(0, 255, 0)
RED = rgb(255, 0, 0)
YELLOW = rgb(255, 255, 0)
CYAN = rgb(0, 255, 255)


def create_array(size: int, rng: Rand | None = None) -> list[int]:
    """Return ``size`` pseudo-random integers in ``[0, 1000)``."""
    if rng is None:
        rng = Rand()
    return [rng.rand() % VALUE_LIMIT for _ in range(size)]


def _quarter(length: int) -> int:
    """Divide by four, truncating toward zero."""
    return length // 4 if length >= 0 else -((-length) // 4)


class SortCanvas:
    """Draws arrays as bars and animates sorts on a ``GraphicDevice``."""

    def __init__(self, device: GraphicDevice, delay: float = DEFAULT_DELAY) -> None:
        self.device = device
        self.delay = delay

    def _pause(self) -> None:
        if self.delay > 0:
            time.sleep(self.delay)

    def draw_bar(self, bar_size: int, length: int, l_edge: int, up_head: int, color: int) -> None:
        """Clear a bar's area and draw it ``length / 4`` pixels long.

        The first row of the bar is green; the rest take ``color``.
        """
        draw_length = _quarter(length)
        rows = range(up_head, up_head + bar_size)
        for y in rows:
            self.device.line(l_edge, y, l_edge + BAR_CLEAR_WIDTH, y, BLACK)
        for offset, y in enumerate(rows):
            shade = GREEN if offset % bar_size == 0 else color
            self.device.line(l_edge, y, l_edge + draw_length, y, shade)
        self._pause()

    def draw_arr(self, arr: MutableSequence[int], l_edge: int, color: int) -> None:
        """Draw every element of ``arr`` as a bar, one below the other."""
        for index, value in enumerate(arr):
            self.draw_bar(BAR_HEIGHT, value, l_edge, index * BAR_HEIGHT, color)

    def highlight_bar(
        self,
        bar_size: int,
        length: int,
        l_edge: int,
        up_head: int,
        highlight_color: int,
        original_color: int,
    ) -> None:
        """Show a bar in ``highlight_color`` for a moment, then restore it."""
        self.draw_bar(bar_size, length, l_edge, up_head, highlight_color)
        for _ in range(3):
            self._pause()
        self.draw_bar(bar_size, length, l_edge, up_head, original_color)

    def draw_swap(
        self,
        arr: MutableSequence[int],
        first_index: int,
        sec_index: int,
        l_edge: int,
        original_color: int,
    ) -> None:
        """Swap two elements of ``arr`` and redraw both with a highlight."""
        arr[first_index], arr[sec_index] = arr[sec_index], arr[first_index]
        self.highlight_bar(
            BAR_HEIGHT, arr[first_index], l_edge, first_index * BAR_HEIGHT, YELLOW, original_color
        )
        self.highlight_bar(
            BAR_HEIGHT, arr[sec_index], l_edge, sec_index * BAR_HEIGHT, CYAN, original_color
        )

    def draw_boundary(self, l_edge: int, up_head: int, size: int, color: int) -> None:
        """Fill a band ``size`` pixels wide and 600 high with ``color``."""
        for x in range(l_edge, l_edge + size):
            self.device.line(x, up_head, x, up_head + BOUNDARY_HEIGHT, color)

    def insertion_sort(self, arr: MutableSequence[int], l_edge: int) -> None:
        """Sort ``arr`` by insertion, animating each swap."""
        self.draw_arr(arr, l_edge, RED)
        for i in range(1, len(arr)):
            j = i
            while j > 0 and arr[j - 1] > arr[j]:
                self.draw_swap(arr, j, j - 1, l_edge, RED)
                self._pause()
                j -= 1

    def bubble_sort(self, arr: MutableSequence[int], l_edge: int) -> None:
        """Sort ``arr`` by bubble sort, animating each swap."""
        self.draw_arr(arr, l_edge, RED)
        size = len(arr)
        for done in range(size - 1):
            for j in range(size - done - 1):
                if arr[j] > arr[j + 1]:
                    self.draw_swap(arr, j, j + 1, l_edge, RED)