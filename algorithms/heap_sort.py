"""
heap_sort.py — Heap Sort (live)
================================
Build a max-heap, then repeatedly swap the root to the end of the
shrinking heap and re-heapify.  `heapify` recurses down the tree with
`yield from`; a stop anywhere in that chain ends the whole sort.

Colours:
    PIVOT     – the root currently being heapified
    COMPARING – a child being weighed against it
    SWAPPING  – the pair about to trade values
    SORTED    – extracted maxima at the tail
"""

from typing import Iterator, List, Sequence

from structures.item import Item, Status, fresh_copy
from algorithms.frame import ArrayFrame, array_frame, final_array_frame, set_status


PSEUDOCODE: List[str] = [
    "def heap_sort(a):",                            # 0
    "    for i in range(n // 2 - 1, -1, -1):",      # 1
    "        heapify(a, n, i)",                     # 2
    "    for end in range(n - 1, 0, -1):",          # 3
    "        swap(a[0], a[end])",                   # 4
    "        heapify(a, end, 0)",                   # 5
    "def heapify(a, size, root):",                  # 6
    "    largest ← max(root, left, right)",         # 7
    "    if largest != root:",                      # 8
    "        swap(a[root], a[largest])",            # 9
    "        heapify(a, size, largest)",            # 10
]


def heap_sort(items: Sequence[Item]) -> Iterator[ArrayFrame]:
    arr = fresh_copy(items)
    n = len(arr)
    if n <= 1:
        yield final_array_frame(arr, "Nothing to sort.")
        return

    extracted = 0

    def heapify(size: int, root: int) -> Iterator[ArrayFrame]:
        progress = extracted / n
        largest = root
        left, right = 2 * root + 1, 2 * root + 2

        set_status(arr, [root], Status.PIVOT)
        yield array_frame(arr, f"Heapify the subtree rooted at {arr[root].value}.", progress)

        for child in (left, right):
            if child < size:
                set_status(arr, [child], Status.COMPARING)
                yield array_frame(arr, f"Compare child {arr[child].value} with {arr[largest].value}.", progress)
                if arr[child].value > arr[largest].value:
                    largest = child

        set_status(arr, [c for c in (left, right) if c < size], Status.DEFAULT)

        if largest == root:
            set_status(arr, [root], Status.DEFAULT)
            return

        set_status(arr, (root, largest), Status.SWAPPING)
        yield array_frame(arr, f"Swap {arr[root].value} down with larger child {arr[largest].value}.", progress)
        arr[root], arr[largest] = arr[largest], arr[root]
        set_status(arr, (root, largest), Status.DEFAULT)
        yield array_frame(arr, "Swapped.", progress)

        yield from heapify(size, largest)

    # build max heap
    for i in range(n // 2 - 1, -1, -1):
        yield from heapify(n, i)

    # extract maxima
    for end in range(n - 1, 0, -1):
        set_status(arr, (0, end), Status.SWAPPING)
        yield array_frame(arr, f"Move max {arr[0].value} to the end of the heap.", extracted / n)
        arr[0], arr[end] = arr[end], arr[0]
        set_status(arr, [0], Status.DEFAULT)
        set_status(arr, [end], Status.SORTED)
        extracted += 1
        yield array_frame(arr, f"{arr[end].value} is sorted.", extracted / n)
        yield from heapify(end, 0)

    yield final_array_frame(arr, "Heap sort complete.")
