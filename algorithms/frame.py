"""
frame.py — Live Animation Frames
=================================
Every live algorithm is a generator that yields Frame objects.  One
`yield` is one checkpoint: the runner renders the frame, then sleeps
for the frame's share of the user's delay while watching the
stop / pause flags.

Design decisions:
  - Frames are frozen and carry tuples / fresh dicts only, so a frame
    the renderer is still holding can never change under it.
  - Each algorithm reports its own `progress` (0.0 – 1.0).  Counting
    "sorted" bars only works for algorithms that settle exactly one bar
    per outer pass, so nothing here infers progress from statuses.
  - `hold` scales the nominal delay for this checkpoint (DFS shows an
    edge for half a beat, the linked-list relink for 0.65 of one) and
    `min_hold_ms` puts a floor under it when a delay is in effect.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from structures.item import Item, Status
from structures.linked_list import ListNode


@dataclass(frozen=True)
class Frame:
    description: str   = ""
    progress:    float = 0.0
    hold:        float = 1.0
    min_hold_ms: float = 0.0
    is_final:    bool  = False

    def delay_for(self, delay_ms: float) -> float:
        """Milliseconds to wait after rendering this frame."""
        if delay_ms <= 0:
            return 0.0
        return max(self.min_hold_ms, delay_ms * self.hold)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "progress":    round(self.progress, 4),
            "is_final":    self.is_final,
        }


@dataclass(frozen=True)
class ArrayFrame(Frame):
    items: Tuple[Item, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["items"] = [item.to_dict() for item in self.items]
        return data


@dataclass(frozen=True)
class GraphFrame(Frame):
    node_states:  Dict[str, str] = field(default_factory=dict)
    edge_states:  Dict[str, str] = field(default_factory=dict)
    current_node: Optional[str]  = None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            node_states=dict(self.node_states),
            edge_states=dict(self.edge_states),
            current_node=self.current_node,
        )
        return data


@dataclass(frozen=True)
class ListFrame(Frame):
    nodes:      Tuple[ListNode, ...]        = ()
    next_links: Tuple[Optional[int], ...]   = ()
    head_index: Optional[int]               = None
    markers:    Dict[str, Optional[int]]    = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            nodes=[n.to_dict() for n in self.nodes],
            next_links=list(self.next_links),
            head_index=self.head_index,
            markers=dict(self.markers),
        )
        return data


# ---------------------------------------------------------------------------
# Helpers shared by the array algorithms
# ---------------------------------------------------------------------------
def set_status(arr: List[Item], indices: Iterable[int], status: Status) -> None:
    for i in indices:
        arr[i] = arr[i].with_status(status)


def array_frame(arr: List[Item], description: str, progress: float = 0.0, **kwargs) -> ArrayFrame:
    return ArrayFrame(items=tuple(arr), description=description, progress=progress, **kwargs)


def final_array_frame(arr: List[Item], description: str, status: Status = Status.SORTED) -> ArrayFrame:
    """Mark every slot terminal and build the closing frame."""
    set_status(arr, range(len(arr)), status)
    return ArrayFrame(items=tuple(arr), description=description, progress=1.0, is_final=True)
