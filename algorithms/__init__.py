"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble_sort": AlgoInfo(key, label, fn, mode, input_kind, pseudocode, …),
        …
    }

Two kinds of entry:
    mode="live" – fn(payload, **params) returns a generator of Frames that
                  the live runner paces under stop / pause control.
    mode="log"  – fn(payload, **params) returns a generator of Snapshots
                  that is exhausted up front into a StepLog.

An entry whose fn is None is declared (it shows up in listings) but has
no implementation; asking to run it leaves the run in the Unavailable
state.  Adding an algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection_sort import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion_sort import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.quick_sort     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.merge_sort     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.heap_sort      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc
from algorithms.radix_sort     import radix_sort     as _radix,     PSEUDOCODE as _radix_pc
from algorithms.linear_search  import linear_search  as _linear,    PSEUDOCODE as _linear_pc
from algorithms.dfs            import dfs            as _dfs,       PSEUDOCODE as _dfs_pc
from algorithms.linked_list    import (
    reverse_linked_list as _reverse, REVERSE_PSEUDOCODE as _reverse_pc,
    middle_node         as _middle,  MIDDLE_PSEUDOCODE  as _middle_pc,
)
from algorithms.dijkstra       import dijkstra       as _dijkstra,  PSEUDOCODE as _dij_pc
from algorithms.prims          import prims          as _prims,     PSEUDOCODE as _prims_pc
from algorithms.huffman        import huffman        as _huffman,   PSEUDOCODE as _huff_pc


LIVE = "live"
LOG  = "log"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                       # registry key, e.g. "bubble_sort"
    label:            str                       # human label, e.g. "Bubble Sort"
    fn:               Optional[Callable]        # the generator function (None = not implemented)
    mode:             str                       # LIVE or LOG
    input_kind:       str                       # "array" | "graph" | "linked_list" | "text"
    pseudocode:       List[str] = field(default_factory=list)
    tags:             List[str] = field(default_factory=list)
    complexity_best:  str       = ""
    complexity_avg:   str       = ""
    complexity_worst: str       = ""
    complexity_space: str       = ""
    description:      str       = ""

    @property
    def available(self) -> bool:
        return self.fn is not None

    def to_dict(self) -> dict:
        return {
            "key":         self.key,
            "label":       self.label,
            "mode":        self.mode,
            "input_kind":  self.input_kind,
            "available":   self.available,
            "tags":        list(self.tags),
            "complexity":  {
                "best":    self.complexity_best,
                "average": self.complexity_avg,
                "worst":   self.complexity_worst,
                "space":   self.complexity_space,
            },
            "pseudocode":  list(self.pseudocode),
            "description": self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble_sort": AlgoInfo(
        key="bubble_sort", label="Bubble Sort", fn=_bubble, mode=LIVE, input_kind="array",
        pseudocode=_bubble_pc, tags=["sorting", "stable", "in-place"],
        complexity_best="O(n)", complexity_avg="O(n^2)", complexity_worst="O(n^2)", complexity_space="O(1)",
        description="Compares adjacent bars and swaps them until larger values settle at the end.",
    ),

    "selection_sort": AlgoInfo(
        key="selection_sort", label="Selection Sort", fn=_selection, mode=LIVE, input_kind="array",
        pseudocode=_selection_pc, tags=["sorting", "in-place"],
        complexity_best="O(n^2)", complexity_avg="O(n^2)", complexity_worst="O(n^2)", complexity_space="O(1)",
        description="Repeatedly chooses the smallest unsorted value and places it into position.",
    ),

    "insertion_sort": AlgoInfo(
        key="insertion_sort", label="Insertion Sort", fn=_insertion, mode=LIVE, input_kind="array",
        pseudocode=_insertion_pc, tags=["sorting", "stable", "in-place"],
        complexity_best="O(n)", complexity_avg="O(n^2)", complexity_worst="O(n^2)", complexity_space="O(1)",
        description="Grows a sorted prefix by shifting each new value left into place.",
    ),

    "quick_sort": AlgoInfo(
        key="quick_sort", label="Quick Sort", fn=_quick, mode=LIVE, input_kind="array",
        pseudocode=_quick_pc, tags=["sorting", "divide-and-conquer", "recursive"],
        complexity_best="O(n log n)", complexity_avg="O(n log n)", complexity_worst="O(n^2)", complexity_space="O(log n)",
        description="Partitions around a pivot and recursively solves left and right subarrays.",
    ),

    "merge_sort": AlgoInfo(
        key="merge_sort", label="Merge Sort", fn=_merge, mode=LIVE, input_kind="array",
        pseudocode=_merge_pc, tags=["sorting", "stable", "divide-and-conquer", "recursive"],
        complexity_best="O(n log n)", complexity_avg="O(n log n)", complexity_worst="O(n log n)", complexity_space="O(n)",
        description="Splits the array in half, sorts each half, then merges the sorted runs.",
    ),

    "heap_sort": AlgoInfo(
        key="heap_sort", label="Heap Sort", fn=_heap, mode=LIVE, input_kind="array",
        pseudocode=_heap_pc, tags=["sorting", "in-place", "recursive"],
        complexity_best="O(n log n)", complexity_avg="O(n log n)", complexity_worst="O(n log n)", complexity_space="O(1)",
        description="Builds a max heap and repeatedly extracts the maximum element to the end.",
    ),

    "radix_sort": AlgoInfo(
        key="radix_sort", label="Radix Sort", fn=_radix, mode=LIVE, input_kind="array",
        pseudocode=_radix_pc, tags=["sorting", "stable", "non-comparison"],
        complexity_best="O(nk)", complexity_avg="O(nk)", complexity_worst="O(nk)", complexity_space="O(n+k)",
        description="Distributes values into buckets digit by digit, least significant first.",
    ),

    "linear_search": AlgoInfo(
        key="linear_search", label="Linear Search", fn=_linear, mode=LIVE, input_kind="array",
        pseudocode=_linear_pc, tags=["searching"],
        complexity_best="O(1)", complexity_avg="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Scans each value from left to right until the target value is discovered.",
    ),

    "interpolation_search": AlgoInfo(
        key="interpolation_search", label="Interpolation Search", fn=None, mode=LIVE, input_kind="array",
        tags=["searching"],
        complexity_best="O(1)", complexity_avg="O(log log n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Probes where the target should sit in a uniformly distributed sorted array.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth First Search", fn=_dfs, mode=LIVE, input_kind="graph",
        pseudocode=_dfs_pc, tags=["graph", "traversal", "recursive"],
        complexity_best="O(V + E)", complexity_avg="O(V + E)", complexity_worst="O(V + E)", complexity_space="O(V)",
        description="Dives as deep as possible along each branch before backtracking.",
    ),

    "reverse_linked_list": AlgoInfo(
        key="reverse_linked_list", label="Reverse Linked List", fn=_reverse, mode=LIVE, input_kind="linked_list",
        pseudocode=_reverse_pc, tags=["linked-list", "pointers"],
        complexity_best="O(n)", complexity_avg="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Walk prev / current / next through the list, flipping each pointer.",
    ),

    "middle_node": AlgoInfo(
        key="middle_node", label="Find Middle Node", fn=_middle, mode=LIVE, input_kind="linked_list",
        pseudocode=_middle_pc, tags=["linked-list", "pointers", "two-pointer"],
        complexity_best="O(n)", complexity_avg="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Move slow by one step and fast by two steps until fast reaches the tail.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, mode=LOG, input_kind="graph",
        pseudocode=_dij_pc, tags=["graph", "weighted", "shortest-path"],
        complexity_best="O((V + E) log V)", complexity_avg="O((V + E) log V)",
        complexity_worst="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily finalises the closest unvisited node. Optimal for non-negative weights.",
    ),

    "prims": AlgoInfo(
        key="prims", label="Prim's MST", fn=_prims, mode=LOG, input_kind="graph",
        pseudocode=_prims_pc, tags=["graph", "weighted", "spanning-tree"],
        complexity_best="O(E log V)", complexity_avg="O(E log V)", complexity_worst="O(E log V)", complexity_space="O(V)",
        description="Grows a spanning tree by always taking the cheapest edge leaving it.",
    ),

    "huffman": AlgoInfo(
        key="huffman", label="Huffman Coding", fn=_huffman, mode=LOG, input_kind="text",
        pseudocode=_huff_pc, tags=["greedy", "tree", "compression"],
        complexity_best="O(n log n)", complexity_avg="O(n log n)", complexity_worst="O(n log n)", complexity_space="O(n)",
        description="Merges the two rarest symbols until one prefix-free code tree remains.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "LIVE",
    "LOG",
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
