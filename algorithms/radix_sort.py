"""
radix_sort.py — Radix Sort (live, LSD base 10)
===============================================
No comparisons: each pass distributes the values into ten buckets by
one decimal digit, then writes the buckets back in order.  Each pass is
stable, which is what makes the whole sort correct.

Negative values are shifted by the minimum before digit extraction so
every digit is non-negative.
"""

from typing import Iterator, List, Sequence

from structures.item import Item, Status, fresh_copy
from algorithms.frame import ArrayFrame, array_frame, final_array_frame, set_status


PSEUDOCODE: List[str] = [
    "def radix_sort(a):",                           # 0
    "    exp ← 1",                                  # 1
    "    while max(a) // exp > 0:",                 # 2
    "        buckets ← [[] for _ in range(10)]",    # 3
    "        for x in a: buckets[(x // exp) % 10].append(x)", # 4
    "        a ← concat(buckets)",                  # 5
    "        exp ← exp * 10",                       # 6
]


def radix_sort(items: Sequence[Item]) -> Iterator[ArrayFrame]:
    arr = fresh_copy(items)
    n = len(arr)
    if n <= 1:
        yield final_array_frame(arr, "Nothing to sort.")
        return

    offset = min(item.value for item in arr)
    offset = offset if offset < 0 else 0
    largest = max(item.value - offset for item in arr)

    passes = max(1, len(str(largest)))
    exp = 1
    for p in range(passes):
        buckets: List[List[Item]] = [[] for _ in range(10)]
        for i, item in enumerate(arr):
            digit = ((item.value - offset) // exp) % 10
            set_status(arr, [i], Status.COMPARING)
            yield array_frame(arr, f"{item.value}: digit {digit} at place {exp} → bucket {digit}.", (p + i / n) / passes)
            buckets[digit].append(arr[i].with_status(Status.DEFAULT))
            set_status(arr, [i], Status.DEFAULT)

        k = 0
        for digit, bucket in enumerate(buckets):
            for item in bucket:
                arr[k] = item.with_status(Status.SWAPPING)
                yield array_frame(arr, f"Write back {item.value} from bucket {digit}.", (p + 1) / passes)
                set_status(arr, [k], Status.DEFAULT)
                k += 1

        exp *= 10

    yield final_array_frame(arr, "Radix sort complete.")
