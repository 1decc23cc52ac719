"""
insertion_sort.py — Insertion Sort (live)
==========================================
Walks each new element left with adjacent swaps.  Stable: an element
never moves past an equal value.
"""

from typing import Iterator, List, Sequence

from structures.item import Item, Status, fresh_copy
from algorithms.frame import ArrayFrame, array_frame, final_array_frame, set_status


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                       # 0
    "    for i in range(1, n):",                    # 1
    "        j ← i",                                # 2
    "        while j > 0 and a[j - 1] > a[j]:",     # 3
    "            swap(a[j - 1], a[j])",             # 4
    "            j ← j - 1",                        # 5
]


def insertion_sort(items: Sequence[Item]) -> Iterator[ArrayFrame]:
    arr = fresh_copy(items)
    n = len(arr)
    if n <= 1:
        yield final_array_frame(arr, "Nothing to sort.")
        return

    for i in range(1, n):
        progress = (i - 1) / (n - 1)
        set_status(arr, [i], Status.PIVOT)
        yield array_frame(arr, f"Insert {arr[i].value} into the sorted prefix.", progress)

        j = i
        while j > 0:
            set_status(arr, [j - 1], Status.COMPARING)
            yield array_frame(arr, f"Compare {arr[j - 1].value} and {arr[j].value}.", progress)
            if arr[j - 1].value <= arr[j].value:
                set_status(arr, [j - 1], Status.DEFAULT)
                break
            set_status(arr, (j - 1, j), Status.SWAPPING)
            yield array_frame(arr, f"{arr[j - 1].value} > {arr[j].value} — shift left.", progress)
            arr[j - 1], arr[j] = arr[j], arr[j - 1]
            set_status(arr, [j], Status.DEFAULT)
            set_status(arr, [j - 1], Status.PIVOT)
            j -= 1

        set_status(arr, [j], Status.DEFAULT)
        yield array_frame(arr, f"{arr[j].value} settled at index {j}.", i / (n - 1))

    yield final_array_frame(arr, "Insertion sort complete.")
