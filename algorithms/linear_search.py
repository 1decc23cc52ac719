"""
linear_search.py — Linear Search (live)
========================================
Scan left to right until the target value turns up.

Final frame: the hit is TARGET, every other slot SORTED ("settled").
With no hit every slot ends SORTED.  A missing `target` searches for
the last element's value so there is always something to find.
"""

from typing import Iterator, List, Optional, Sequence

from structures.item import Item, Status, fresh_copy
from algorithms.frame import ArrayFrame, array_frame, final_array_frame, set_status


PSEUDOCODE: List[str] = [
    "def linear_search(a, target):",                # 0
    "    for i in range(n):",                       # 1
    "        if a[i] == target:",                   # 2
    "            return i",                         # 3
    "    return -1",                                # 4
]


def linear_search(items: Sequence[Item], target: Optional[int] = None) -> Iterator[ArrayFrame]:
    arr = fresh_copy(items)
    n = len(arr)
    if n == 0:
        yield final_array_frame(arr, "Empty array — nothing to search.")
        return
    if target is None:
        target = arr[-1].value

    for i in range(n):
        set_status(arr, [i], Status.COMPARING)
        yield array_frame(arr, f"Check index {i}: is {arr[i].value} == {target}?", i / n)

        if arr[i].value == target:
            set_status(arr, [i], Status.TARGET)
            yield array_frame(arr, f"Found {target} at index {i}.", 1.0)
            set_status(arr, [k for k in range(n) if k != i], Status.SORTED)
            yield array_frame(arr, f"Linear search complete: {target} is at index {i}.", 1.0, is_final=True)
            return

        set_status(arr, [i], Status.SORTED)

    yield final_array_frame(arr, f"{target} is not in the array.")
