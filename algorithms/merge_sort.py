"""
merge_sort.py — Merge Sort (live)
==================================
Top-down merge sort.  The merge takes from the left run on ties
(`<=`), so equal values keep their original relative order.

Progress is the share of merge writes done out of the total the
recursion will perform (sum of every merged range's length).
"""

from typing import Iterator, List, Sequence

from structures.item import Item, Status, fresh_copy
from algorithms.frame import ArrayFrame, array_frame, final_array_frame, set_status


PSEUDOCODE: List[str] = [
    "def merge_sort(a, left, right):",              # 0
    "    if left >= right: return",                 # 1
    "    mid ← (left + right) // 2",                # 2
    "    merge_sort(a, left, mid)",                 # 3
    "    merge_sort(a, mid + 1, right)",            # 4
    "    merge(a, left, mid, right)",               # 5
    "def merge(a, left, mid, right):",              # 6
    "    take the smaller head of the two runs,",   # 7
    "    preferring the left run on ties",          # 8
]


def _merge_work(length: int) -> int:
    if length <= 1:
        return 0
    half = (length + 1) // 2
    return _merge_work(half) + _merge_work(length - half) + length


def merge_sort(items: Sequence[Item]) -> Iterator[ArrayFrame]:
    arr = fresh_copy(items)
    n = len(arr)
    if n <= 1:
        yield final_array_frame(arr, "Nothing to sort.")
        return

    total = _merge_work(n)
    written = 0

    def merge(left: int, mid: int, right: int) -> Iterator[ArrayFrame]:
        nonlocal written
        left_run = arr[left:mid + 1]
        right_run = arr[mid + 1:right + 1]
        i = j = 0
        k = left

        while i < len(left_run) or j < len(right_run):
            set_status(arr, [k], Status.COMPARING)
            if i < len(left_run) and j < len(right_run):
                desc = f"Compare {left_run[i].value} and {right_run[j].value}."
            else:
                desc = "Copy the remaining run."
            yield array_frame(arr, desc, written / total)

            if j >= len(right_run) or (i < len(left_run) and left_run[i].value <= right_run[j].value):
                arr[k] = left_run[i].with_status(Status.DEFAULT)
                i += 1
            else:
                arr[k] = right_run[j].with_status(Status.DEFAULT)
                j += 1
            k += 1
            written += 1

        yield array_frame(arr, f"Merged range [{left}, {right}].", written / total)

    def sort_range(left: int, right: int) -> Iterator[ArrayFrame]:
        if left >= right:
            return
        mid = (left + right) // 2
        yield from sort_range(left, mid)
        yield from sort_range(mid + 1, right)
        yield from merge(left, mid, right)

    yield from sort_range(0, n - 1)
    yield final_array_frame(arr, "Merge sort complete.")
