"""
selection_sort.py — Selection Sort (live)
==========================================
The running minimum is shown as PIVOT, each scanned candidate as
COMPARING; after the swap the front slot turns SORTED.
"""

from typing import Iterator, List, Sequence

from structures.item import Item, Status, fresh_copy
from algorithms.frame import ArrayFrame, array_frame, final_array_frame, set_status


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                       # 0
    "    for i in range(n - 1):",                   # 1
    "        min_idx ← i",                          # 2
    "        for j in range(i + 1, n):",            # 3
    "            if a[j] < a[min_idx]:",            # 4
    "                min_idx ← j",                  # 5
    "        swap(a[i], a[min_idx])",               # 6
]


def selection_sort(items: Sequence[Item]) -> Iterator[ArrayFrame]:
    arr = fresh_copy(items)
    n = len(arr)
    if n <= 1:
        yield final_array_frame(arr, "Nothing to sort.")
        return

    for i in range(n - 1):
        progress = i / n
        min_idx = i
        set_status(arr, [i], Status.PIVOT)
        yield array_frame(arr, f"Assume {arr[i].value} is the smallest remaining value.", progress)

        for j in range(i + 1, n):
            set_status(arr, [j], Status.COMPARING)
            yield array_frame(arr, f"Compare {arr[j].value} with current minimum {arr[min_idx].value}.", progress)

            if arr[j].value < arr[min_idx].value:
                set_status(arr, [min_idx], Status.DEFAULT)
                min_idx = j
                set_status(arr, [min_idx], Status.PIVOT)
                yield array_frame(arr, f"New minimum: {arr[min_idx].value}.", progress)
            else:
                set_status(arr, [j], Status.DEFAULT)

        if min_idx != i:
            set_status(arr, (i, min_idx), Status.SWAPPING)
            yield array_frame(arr, f"Swap {arr[i].value} and {arr[min_idx].value}.", progress)
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            set_status(arr, [min_idx], Status.DEFAULT)

        set_status(arr, [i], Status.SORTED)
        yield array_frame(arr, f"{arr[i].value} placed at position {i}.", (i + 1) / n)

    yield final_array_frame(arr, "Selection sort complete.")
