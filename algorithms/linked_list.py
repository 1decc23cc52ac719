"""
linked_list.py — Linked-List Pointer Walks (live)
==================================================
Two classic pointer exercises over a LinkedListState:

    reverse_linked_list – prev / current / next walk, relinking as it goes
    middle_node         – slow pointer moves 1, fast pointer moves 2

Both refuse to walk a list whose links loop back on themselves: a
cycle is reported in a single closing frame instead of spinning forever.
"""

from typing import Dict, Iterator, List, Optional

from structures.linked_list import LinkedListState, ListNode, ListStatus
from algorithms.frame import ListFrame


REVERSE_PSEUDOCODE: List[str] = [
    "def reverse(head):",                           # 0
    "    prev ← None; curr ← head",                 # 1
    "    while curr is not None:",                  # 2
    "        nxt ← curr.next",                      # 3
    "        curr.next ← prev",                     # 4
    "        prev ← curr; curr ← nxt",              # 5
    "    return prev",                              # 6
]

MIDDLE_PSEUDOCODE: List[str] = [
    "def find_middle(head):",                       # 0
    "    slow ← fast ← head",                       # 1
    "    while fast and fast.next:",                # 2
    "        slow ← slow.next",                     # 3
    "        fast ← fast.next.next",                # 4
    "    return slow",                              # 5
]

MARKER_KEYS = ("head", "current", "prev", "next", "slow", "fast", "middle")
RELINK_HOLD = 0.65
MIN_HOLD_MS = 120


def _markers(**pointers: Optional[int]) -> Dict[str, Optional[int]]:
    markers: Dict[str, Optional[int]] = {key: None for key in MARKER_KEYS}
    markers.update(pointers)
    return markers


def _refuse_cycle(state: LinkedListState) -> Optional[ListFrame]:
    order, has_cycle = state.traversal()
    if has_cycle:
        return ListFrame(
            nodes=tuple(state.nodes),
            next_links=tuple(state.next_links),
            head_index=state.head_index,
            markers=_markers(head=state.head_index),
            description=f"Cycle detected after {len(order)} node(s) — the walk would never end.",
            progress=1.0,
            is_final=True,
        )
    if state.head_index is None:
        return ListFrame(description="Empty list — nothing to do.", progress=1.0, is_final=True)
    return None


# ---------------------------------------------------------------------------
# Reverse
# ---------------------------------------------------------------------------
def reverse_linked_list(state: LinkedListState) -> Iterator[ListFrame]:
    refused = _refuse_cycle(state)
    if refused is not None:
        yield refused
        return

    nodes: List[ListNode] = [node.with_status(ListStatus.DEFAULT) for node in state.nodes]
    links = list(state.next_links)
    head = state.head_index
    length = len(state.traversal()[0])

    prev: Optional[int] = None
    current: Optional[int] = head
    step = 0

    while current is not None:
        nxt = links[current]
        step += 1
        for i, node in enumerate(nodes):
            if i == current:
                nodes[i] = node.with_status(ListStatus.CURRENT)
            elif node.status is not ListStatus.REVERSED:
                nodes[i] = node.with_status(ListStatus.DEFAULT)
        yield ListFrame(
            nodes=tuple(nodes),
            next_links=tuple(links),
            head_index=head,
            markers=_markers(head=head, current=current, prev=prev, next=nxt),
            description=f"Step {step}: save next of {nodes[current].value}, then reverse current pointer.",
            progress=(step - 1) / length,
        )

        links[current] = prev
        nodes[current] = nodes[current].with_status(ListStatus.REVERSED)
        yield ListFrame(
            nodes=tuple(nodes),
            next_links=tuple(links),
            head_index=head,
            markers=_markers(head=head, current=current, prev=prev, next=nxt),
            description=f"Step {step}: {nodes[current].value} now points back.",
            progress=step / length,
            hold=RELINK_HOLD,
            min_hold_ms=MIN_HOLD_MS,
        )

        prev, current = current, nxt

    nodes = [node.with_status(ListStatus.REVERSED) for node in nodes]
    yield ListFrame(
        nodes=tuple(nodes),
        next_links=tuple(links),
        head_index=prev,
        markers=_markers(head=prev),
        description="Reversal complete. Head now points to the old tail.",
        progress=1.0,
        is_final=True,
    )


# ---------------------------------------------------------------------------
# Middle node
# ---------------------------------------------------------------------------
def middle_node(state: LinkedListState) -> Iterator[ListFrame]:
    refused = _refuse_cycle(state)
    if refused is not None:
        yield refused
        return

    links = list(state.next_links)
    head = state.head_index
    nodes: List[ListNode] = [node.with_status(ListStatus.DEFAULT) for node in state.nodes]
    total_moves = len(state.traversal()[0]) // 2 or 1

    slow = fast = head
    step = 0
    while fast is not None and links[fast] is not None:
        step += 1
        for i, node in enumerate(nodes):
            if i == slow:
                nodes[i] = node.with_status(ListStatus.SLOW)
            elif i == fast:
                nodes[i] = node.with_status(ListStatus.FAST)
            else:
                nodes[i] = node.with_status(ListStatus.DEFAULT)
        yield ListFrame(
            nodes=tuple(nodes),
            next_links=tuple(links),
            head_index=head,
            markers=_markers(head=head, slow=slow, fast=fast),
            description=f"Step {step}: move slow by 1 and fast by 2 until fast reaches the tail.",
            progress=(step - 1) / total_moves,
        )
        slow = links[slow]
        fast_next = links[fast]
        fast = links[fast_next] if fast_next is not None else None

    nodes = [
        node.with_status(ListStatus.MIDDLE if i == slow else ListStatus.DEFAULT)
        for i, node in enumerate(nodes)
    ]
    yield ListFrame(
        nodes=tuple(nodes),
        next_links=tuple(links),
        head_index=head,
        markers=_markers(head=head, middle=slow),
        description=f"Middle node found: {nodes[slow].value}.",
        progress=1.0,
        is_final=True,
    )
