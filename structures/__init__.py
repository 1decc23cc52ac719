"""
structures/
-----------
Core data layer.  Public API:

    from structures import Item, Status, make_items, random_items
    from structures import Graph, Node, Edge, NodeStatus, EdgeStatus
    from structures import LinkedListState, ListNode, ListStatus
"""

from structures.item        import Item, Status, TERMINAL_STATUSES, make_items, random_items, fresh_copy, values_of
from structures.node        import Node, NodeStatus
from structures.edge        import Edge, EdgeStatus
from structures.graph       import Graph
from structures.linked_list import LinkedListState, ListNode, ListStatus

__all__ = [
    "Item",            "Status",      "TERMINAL_STATUSES",
    "make_items",      "random_items", "fresh_copy", "values_of",
    "Node",            "NodeStatus",
    "Edge",            "EdgeStatus",
    "Graph",
    "LinkedListState", "ListNode",    "ListStatus",
]
