"""
quick_sort.py — Quick Sort (live)
==================================
Lomuto partition around the last element of each range.

Pending ranges live on an explicit stack (left range on top), so an
already-sorted input of any length never runs into the interpreter
recursion limit.  Each partition is one `yield from`; when the runner
closes the generator after a stop, GeneratorExit surfaces inside that
partition and no later range is ever started.
"""

from typing import Iterator, List, Sequence, Tuple

from structures.item import Item, Status, fresh_copy
from algorithms.frame import ArrayFrame, array_frame, final_array_frame, set_status


PSEUDOCODE: List[str] = [
    "def quick_sort(a, lo, hi):",                   # 0
    "    if lo >= hi: return",                      # 1
    "    pivot ← a[hi]",                            # 2
    "    i ← lo",                                   # 3
    "    for j in range(lo, hi):",                  # 4
    "        if a[j] < pivot:",                     # 5
    "            swap(a[i], a[j]); i ← i + 1",      # 6
    "    swap(a[i], a[hi])",                        # 7
    "    quick_sort(a, lo, i - 1)",                 # 8
    "    quick_sort(a, i + 1, hi)",                 # 9
]


def quick_sort(items: Sequence[Item]) -> Iterator[ArrayFrame]:
    arr = fresh_copy(items)
    n = len(arr)
    if n <= 1:
        yield final_array_frame(arr, "Nothing to sort.")
        return

    placed = 0

    def settle(idx: int, why: str) -> ArrayFrame:
        nonlocal placed
        set_status(arr, [idx], Status.SORTED)
        placed += 1
        return array_frame(arr, why, placed / n)

    def partition(lo: int, hi: int) -> Iterator[ArrayFrame]:
        pivot = arr[hi].value
        set_status(arr, [hi], Status.PIVOT)
        yield array_frame(arr, f"Pivot {pivot} chosen for range [{lo}, {hi}].", placed / n)

        i = lo
        for j in range(lo, hi):
            set_status(arr, [j], Status.COMPARING)
            yield array_frame(arr, f"Compare {arr[j].value} with pivot {pivot}.", placed / n)
            if arr[j].value < pivot:
                if i != j:
                    set_status(arr, (i, j), Status.SWAPPING)
                    yield array_frame(arr, f"{arr[j].value} < {pivot} — move it left.", placed / n)
                    arr[i], arr[j] = arr[j], arr[i]
                set_status(arr, (i, j), Status.DEFAULT)
                i += 1
            else:
                set_status(arr, [j], Status.DEFAULT)

        if i != hi:
            set_status(arr, (i, hi), Status.SWAPPING)
            yield array_frame(arr, f"Move pivot {pivot} into slot {i}.", placed / n)
            arr[i], arr[hi] = arr[hi], arr[i]
            set_status(arr, [hi], Status.DEFAULT)
        yield settle(i, f"Pivot {pivot} is in its final position.")
        return i

    pending: List[Tuple[int, int]] = [(0, n - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo > hi:
            continue
        if lo == hi:
            yield settle(lo, f"{arr[lo].value} is alone in its range.")
            continue
        p = yield from partition(lo, hi)
        pending.append((p + 1, hi))
        pending.append((lo, p - 1))

    yield final_array_frame(arr, "Quick sort complete.")
