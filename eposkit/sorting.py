"""In-place comparison sorts over lists of integers.

``insertion_sort`` and ``quick_sort`` take an optional callback that is
told about every change, so a caller can animate the sort as it runs.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

ChangeCallback = Callable[[MutableSequence[int]], None]
SwapCallback = Callable[[int, int], None]


def bubble_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` ascending by repeatedly swapping adjacent pairs."""
    size = len(arr)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]


def selection_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` ascending by moving the smallest remaining item forward."""
    size = len(arr)
    for i in range(size - 1):
        min_index = min(range(i, size), key=arr.__getitem__)
        arr[i], arr[min_index] = arr[min_index], arr[i]


def insertion_sort(arr: MutableSequence[int], on_change: ChangeCallback | None = None) -> None:
    """Sort ``arr`` ascending by insertion.

    ``on_change`` is called with the list after every element shifted
    one place to the right.
    """
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
            if on_change is not None:
                on_change(arr)
        arr[j + 1] = key


def quick_sort(
    arr: MutableSequence[int],
    low: int = 0,
    high: int | None = None,
    on_swap: SwapCallback | None = None,
) -> None:
    """Sort ``arr[low:high + 1]`` ascending with a middle-element pivot.

    ``on_swap`` is called with the two indices of every swap performed,
    including swaps of an element with itself.
    """
    if high is None:
        high = len(arr) - 1

    def swap(i: int, j: int) -> None:
        arr[i], arr[j] = arr[j], arr[i]
        if on_swap is not None:
            on_swap(i, j)

    def partition(left: int, right: int, pivot: int) -> int:
        while True:
            left += 1
            while arr[left] < pivot:
                left += 1
            while left < right:
                right -= 1
                if not pivot < arr[right]:
                    break
            swap(left, right)
            if not left < right:
                return left

    def sort(lo: int, hi: int) -> None:
        if hi <= lo:
            return
        swap((lo + hi) // 2, hi)
        k = partition(lo - 1, hi, arr[hi])
        swap(k, hi)
        sort(lo, k - 1)
        sort(k + 1, hi)

    sort(low, high)