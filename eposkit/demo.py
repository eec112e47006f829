"""Side-by-side animated sort demonstration.

Two copies of one random array are bubble-sorted in two columns of an
800x600 screen, between two coloured boundaries, with each task's
priority shown as a blue bar along the bottom.
"""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass, field

from eposkit.clib import Rand
from eposkit.control import PriorityControl
from eposkit.graphics import GraphicDevice, rgb
from eposkit.visual import DEFAULT_DELAY, SortCanvas, create_array

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
BITS_PER_PIXEL = 24

RIGHT_EDGE = 410
LEFT_EDGE = 20
BOUNDARY_COLOR = rgb(80, 20, 100)
PRIORITY_COLOR = rgb(0, 0, 255)
PRIORITY_BAR_TOP = 580
PRIORITY_BAR_HEIGHT = 15
PRIORITY_SCALE = 20

RIGHT_TASK = 2
LEFT_TASK = 3


@dataclass
class DemoResult:
    """What a demonstration run produced."""

    device: GraphicDevice
    original: list[int]
    right: list[int]
    left: list[int]
    priorities: dict[int, int] = field(default_factory=dict)


def _draw_priorities(canvas: SortCanvas, priorities: dict[int, int]) -> None:
    for task, edge in ((RIGHT_TASK, RIGHT_EDGE - LEFT_EDGE), (LEFT_TASK, 0)):
        canvas.draw_bar(
            PRIORITY_BAR_HEIGHT,
            priorities[task] * PRIORITY_SCALE,
            edge,
            PRIORITY_BAR_TOP,
            PRIORITY_COLOR,
        )


def run_demo(size: int = 100, seed: int | None = None, delay: float = DEFAULT_DELAY) -> DemoResult:
    """Sort two copies of a random array on screen and return the outcome."""
    if seed is None:
        seed = int(time.time())
    device = GraphicDevice(
        SCREEN_WIDTH, SCREEN_HEIGHT, BITS_PER_PIXEL, SCREEN_WIDTH * BITS_PER_PIXEL // 8
    )
    canvas = SortCanvas(device, delay)

    original = create_array(size, Rand(seed))
    right = list(original)
    left = list(original)

    canvas.draw_boundary(RIGHT_EDGE - LEFT_EDGE, 0, LEFT_EDGE, BOUNDARY_COLOR)
    canvas.draw_boundary(0, 0, LEFT_EDGE, BOUNDARY_COLOR)

    priorities: dict[int, int] = {}
    PriorityControl(priorities.__setitem__, RIGHT_TASK, LEFT_TASK)
    _draw_priorities(canvas, priorities)

    canvas.bubble_sort(right, RIGHT_EDGE)
    canvas.bubble_sort(left, LEFT_EDGE)
    return DemoResult(device, original, right, left, priorities)


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration from the command line."""
    parser = argparse.ArgumentParser(description="Animated side-by-side bubble sort.")
    parser.add_argument("--size", type=int, default=100, help="number of elements")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--delay", type=float, default=DEFAULT_DELAY, help="seconds per step")
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size must not be negative")

    result = run_demo(args.size, args.seed, args.delay)
    print("original:", " ".join(map(str, result.original)))
    print("right:", " ".join(map(str, result.right)))
    print("left:", " ".join(map(str, result.left)))
    return 0