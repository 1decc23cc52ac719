"""
edge.py — Graph Edge
====================
Connects two nodes.  Carries an optional weight and its own visual status
so the renderer can colour-code edges as the algorithm touches them.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Edges are undirected: `Graph` indexes each edge under both endpoints.
  - The default id is derived from the endpoints ("e-A-B"), which keeps
    generated graphs reproducible under a fixed seed.
"""

import math
from enum import Enum
from typing import Optional, Dict, Any


# ---------------------------------------------------------------------------
# Edge Status Enum — visual encoding for the renderer
# ---------------------------------------------------------------------------
class EdgeStatus(Enum):
    DEFAULT   = "default"     # thin, neutral grey
    COMPARING = "comparing"   # candidate edge being weighed (MST crossing edges)
    TRAVERSED = "traversed"   # walked by DFS / accepted into the spanning tree
    RELAXED   = "relaxed"     # distance update went through this edge


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge:
    """
    Attributes:
        id       : Unique identifier.
        source   : ID of one endpoint.
        target   : ID of the other endpoint.
        weight   : Numeric cost (None for unweighted graphs).
        status   : EdgeStatus for visual encoding.
    """

    __slots__ = ("id", "source", "target", "weight", "status")

    def __init__(
        self,
        source: str,
        target: str,
        weight: Optional[float] = None,
        edge_id: Optional[str] = None,
    ):
        self.id:     str                = edge_id or f"e-{source}-{target}"
        self.source: str                = str(source)
        self.target: str                = str(target)
        self.weight: Optional[float]    = weight
        self.status: EdgeStatus         = EdgeStatus.DEFAULT

    @property
    def cost(self) -> float:
        return 1.0 if self.weight is None else self.weight

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":     self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        weight = data.get("weight")
        if weight is not None and (
            isinstance(weight, bool)
            or not isinstance(weight, (int, float))
            or not math.isfinite(weight)
        ):
            raise ValueError(f"Edge weight must be a finite number or null, got {weight!r}")
        edge = cls(
            source=data["source"],
            target=data["target"],
            weight=weight,
            edge_id=data.get("id"),
        )
        edge.status = EdgeStatus(data.get("status", "default"))
        return edge

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.weight}, status={self.status.value})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
