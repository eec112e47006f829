"""In-place quicksort driven by a three-way comparison function.

The algorithm is the Bentley-McIlroy "engineered" quicksort. It picks a
median-of-three pivot, or a ninther for large inputs, and partitions
three ways so that runs of equal keys are handled cheaply. Small
partitions, and partitions that needed no exchange, fall back to
insertion sort. The sort is not stable.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

Comparator = Callable[[Any, Any], int]

_SMALL = 7
_NINTHER = 40


def qsort(a: MutableSequence[Any], cmp: Comparator) -> None:
    """Sort ``a`` in place so that ``cmp`` never sees an element after a smaller one.

    ``cmp(x, y)`` must return a negative number, zero or a positive number
    when ``x`` is respectively less than, equal to or greater than ``y``.
    Exceptions raised by ``cmp`` propagate and leave ``a`` partly sorted.
    """

    def swap(i: int, j: int) -> None:
        a[i], a[j] = a[j], a[i]

    def vecswap(i: int, j: int, count: int) -> None:
        for k in range(count):
            swap(i + k, j + k)

    def med3(i: int, j: int, k: int) -> int:
        if cmp(a[i], a[j]) < 0:
            if cmp(a[j], a[k]) < 0:
                return j
            return k if cmp(a[i], a[k]) < 0 else i
        if cmp(a[j], a[k]) > 0:
            return j
        return i if cmp(a[i], a[k]) < 0 else k

    def insertion(lo: int, n: int) -> None:
        for m in range(lo + 1, lo + n):
            pos = m
            while pos > lo and cmp(a[pos - 1], a[pos]) > 0:
                swap(pos, pos - 1)
                pos -= 1

    def sort(lo: int, n: int) -> None:
        while True:
            if n < _SMALL:
                insertion(lo, n)
                return

            pm = lo + n // 2
            if n > _SMALL:
                pl = lo
                pn = lo + n - 1
                if n > _NINTHER:
                    d = n // 8
                    pl = med3(pl, pl + d, pl + 2 * d)
                    pm = med3(pm - d, pm, pm + d)
                    pn = med3(pn - 2 * d, pn - d, pn)
                pm = med3(pl, pm, pn)
            swap(lo, pm)

            pa = pb = lo + 1
            pc = pd = lo + n - 1
            swapped = False
            while True:
                while pb <= pc:
                    r = cmp(a[pb], a[lo])
                    if r > 0:
                        break
                    if r == 0:
                        swapped = True
                        swap(pa, pb)
                        pa += 1
                    pb += 1
                while pb <= pc:
                    r = cmp(a[pc], a[lo])
                    if r < 0:
                        break
                    if r == 0:
                        swapped = True
                        swap(pc, pd)
                        pd -= 1
                    pc -= 1
                if pb > pc:
                    break
                swap(pb, pc)
                swapped = True
                pb += 1
                pc -= 1

            if not swapped:
                insertion(lo, n)
                return

            pn = lo + n
            r = min(pa - lo, pb - pa)
            vecswap(lo, pb - r, r)
            r = min(pd - pc, pn - pd - 1)
            vecswap(pb, pn - r, r)

            r = pb - pa
            if r > 1:
                sort(lo, r)
            r = pd - pc
            if r > 1:
                lo = pn - r
                n = r
                continue
            return

    sort(0, len(a))