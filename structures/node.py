from enum import Enum
from typing import Optional, Dict, Any


# ---------------------------------------------------------------------------
# Node Status Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class NodeStatus(Enum):
    DEFAULT    = "default"      # neutral grey
    PROCESSING = "processing"   # the node being expanded RIGHT NOW
    COMPARING  = "comparing"    # candidate under consideration
    VISITED    = "visited"      # fully processed / finalised


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Immutable identity (id, label), mutable position and status.

    Attributes:
        id       : Unique identifier (string; generated graphs use "0", "1", …).
        label    : Human-readable name shown on the canvas.
        x, y     : Canvas coordinates (pixel space of the caller's choosing).
        status   : Current NodeStatus for visual encoding.
        value    : Optional payload shown inside the node (random 1-99 when generated).
    """

    __slots__ = ("id", "label", "x", "y", "status", "value")

    def __init__(
        self,
        node_id: str,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
        value: Optional[int] = None,
    ):
        self.id: str              = str(node_id)
        self.label: str           = label or self.id
        self.x: float             = x
        self.y: float             = y
        self.status: NodeStatus   = NodeStatus.DEFAULT
        self.value: Optional[int] = value

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":     self.id,
            "label":  self.label,
            "x":      self.x,
            "y":      self.y,
            "value":  self.value,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        node = cls(
            node_id=data["id"],
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            label=data.get("label"),
            value=data.get("value"),
        )
        node.status = NodeStatus(data.get("status", "default"))
        return node

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, status={self.status.value}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
