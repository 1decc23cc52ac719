"""
bubble_sort.py — Bubble Sort (live)
====================================
Yields an ArrayFrame at:
  1. Each adjacent comparison          →  pair COMPARING
  2. Each swap, before and after       →  pair SWAPPING
  3. End of every pass                 →  last unsorted slot SORTED
  4. Completion                        →  every slot SORTED

Stops early once a pass makes no swaps.
"""

from typing import Iterator, List, Sequence

from structures.item import Item, Status, fresh_copy
from algorithms.frame import ArrayFrame, array_frame, final_array_frame, set_status


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                          # 0
    "    for i in range(n - 1):",                   # 1
    "        swapped ← False",                      # 2
    "        for j in range(n - i - 1):",           # 3
    "            if a[j] > a[j + 1]:",              # 4
    "                swap(a[j], a[j + 1])",         # 5
    "                swapped ← True",               # 6
    "        if not swapped: break",                # 7
]


def bubble_sort(items: Sequence[Item]) -> Iterator[ArrayFrame]:
    arr = fresh_copy(items)
    n = len(arr)
    if n <= 1:
        yield final_array_frame(arr, "Nothing to sort.")
        return

    for i in range(n - 1):
        swapped = False
        progress = i / n
        for j in range(n - i - 1):
            set_status(arr, (j, j + 1), Status.COMPARING)
            yield array_frame(arr, f"Compare {arr[j].value} and {arr[j + 1].value}.", progress)

            if arr[j].value > arr[j + 1].value:
                set_status(arr, (j, j + 1), Status.SWAPPING)
                yield array_frame(arr, f"{arr[j].value} > {arr[j + 1].value} — swap.", progress)
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
                yield array_frame(arr, "Swapped.", progress)

            set_status(arr, (j, j + 1), Status.DEFAULT)

        set_status(arr, [n - i - 1], Status.SORTED)
        yield array_frame(arr, f"{arr[n - i - 1].value} has bubbled into place.", (i + 1) / n)
        if not swapped:
            break

    yield final_array_frame(arr, "Bubble sort complete.")
