"""
linked_list.py — Index-Linked List State
=========================================
A singly linked list drawn as boxes and arrows.

The list is three parallel pieces of state:
    nodes       : List[ListNode]            (value + status per slot)
    next_links  : List[Optional[int]]       (next_links[i] = successor index or None)
    head_index  : Optional[int]

Following `next_links` from `head_index` normally ends at None.  A user
can relink things into a loop, so `traversal()` detects cycles instead
of assuming they cannot happen.
"""

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple


class ListStatus(Enum):
    DEFAULT  = "default"
    CURRENT  = "current"
    REVERSED = "reversed"
    SLOW     = "slow"
    FAST     = "fast"
    MIDDLE   = "middle"


@dataclass(frozen=True)
class ListNode:
    node_id: str
    value:   int
    status:  ListStatus = ListStatus.DEFAULT

    def with_status(self, status: ListStatus) -> "ListNode":
        return replace(self, status=status)

    def to_dict(self) -> dict:
        return {"id": self.node_id, "value": self.value, "status": self.status.value}


@dataclass
class LinkedListState:
    nodes:      List[ListNode]          = field(default_factory=list)
    next_links: List[Optional[int]]     = field(default_factory=list)
    head_index: Optional[int]           = None

    # ------------------------------------------------------------------
    @classmethod
    def generate(cls, size: int = 6, seed: Optional[int] = None) -> "LinkedListState":
        """Straight chain 0 → 1 → … → size-1 with random values 10-99."""
        rng = random.Random(seed)
        nodes = [ListNode(node_id=f"n{i}", value=rng.randint(10, 99)) for i in range(size)]
        links = [i + 1 if i + 1 < size else None for i in range(size)]
        return cls(nodes=nodes, next_links=links, head_index=0 if size > 0 else None)

    @classmethod
    def from_values(cls, values: List[int]) -> "LinkedListState":
        nodes = [ListNode(node_id=f"n{i}", value=v) for i, v in enumerate(values)]
        links = [i + 1 if i + 1 < len(values) else None for i in range(len(values))]
        return cls(nodes=nodes, next_links=links, head_index=0 if values else None)

    def traversal(self) -> Tuple[List[int], bool]:
        """Indices in list order starting at the head, and whether a cycle cut the walk short."""
        if self.head_index is None:
            return [], False
        order: List[int] = []
        seen = set()
        cursor = self.head_index
        while cursor is not None and cursor not in seen:
            order.append(cursor)
            seen.add(cursor)
            cursor = self.next_links[cursor]
        return order, cursor is not None

    def values_in_order(self) -> List[int]:
        order, _ = self.traversal()
        return [self.nodes[i].value for i in order]

    def copy(self) -> "LinkedListState":
        return LinkedListState(
            nodes=list(self.nodes),
            next_links=list(self.next_links),
            head_index=self.head_index,
        )

    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "nodes":      [n.to_dict() for n in self.nodes],
            "next_links": list(self.next_links),
            "head_index": self.head_index,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LinkedListState":
        nodes = [
            ListNode(node_id=str(n.get("id", f"n{i}")), value=n["value"],
                     status=ListStatus(n.get("status", "default")))
            for i, n in enumerate(data.get("nodes", []))
        ]
        links = list(data.get("next_links", []))
        if len(links) != len(nodes):
            raise ValueError("next_links must have one entry per node")
        for link in links:
            if link is not None and not 0 <= link < len(nodes):
                raise ValueError(f"next_links entry {link} is out of range")
        head = data.get("head_index")
        if head is not None and not 0 <= head < len(nodes):
            raise ValueError(f"head_index {head} is out of range")
        return cls(nodes=nodes, next_links=links, head_index=head)
