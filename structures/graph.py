"""
graph.py — Graph Container & Generator
=======================================
Single source of truth for a graph input.  Live traversals and step-log
generators both read from this object; neither ever writes to the
caller's instance (they work on `copy()` or on their own state maps).

Responsibilities:
  1. Building nodes & edges                 (add / create)
  2. Adjacency queries                      (neighbours, get_edge_between)
  3. Random connected graph generation      (spanning tree + extra edges)
  4. Serialisation round-trip               (to_dict / from_dict)
  5. Deep copy

Design decisions:
  - Nodes & edges stored in plain dicts keyed by id for O(1) lookup, in
    insertion order.  Algorithms rely on that order for deterministic
    tie-breaks ("first node" is the default start, "first edge" wins a
    weight tie).
  - A separate adjacency dict `_adj[node_id] → [(neighbour_id, edge_id)]`
    is maintained incrementally so neighbour queries are O(degree), not O(E).
  - Every edge endpoint must already exist; `add_edge` refuses dangling edges.
"""

import math
import random
from collections import deque
from typing import Dict, List, Tuple, Optional, Set

from structures.node import Node
from structures.edge import Edge


class Graph:
    """
    Attributes:
        nodes      : {node_id: Node}
        edges      : {edge_id: Edge}
        weighted   : bool – whether weights are meaningful
        _adj       : {node_id: [(neighbour_id, edge_id), …]}
    """

    def __init__(self, weighted: bool = True):
        self.nodes:    Dict[str, Node] = {}
        self.edges:    Dict[str, Edge] = {}
        self.weighted: bool           = weighted
        self._adj:     Dict[str, List[Tuple[str, str]]] = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(
        self,
        node_id: str,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
        value: Optional[int] = None,
    ) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id=node_id, x=x, y=y, label=label, value=value))

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        for endpoint in (edge.source, edge.target):
            if endpoint not in self.nodes:
                raise ValueError(f"Edge {edge.id} references unknown node '{endpoint}'")
        if edge.id in self.edges:
            raise ValueError(f"Duplicate edge id '{edge.id}'")
        self.edges[edge.id] = edge
        self._adj[edge.source].append((edge.target, edge.id))
        if edge.source != edge.target:
            self._adj[edge.target].append((edge.source, edge.id))
        return edge

    def create_edge(
        self,
        source: str,
        target: str,
        weight: Optional[float] = None,
        edge_id: Optional[str] = None,
    ) -> Edge:
        return self.add_edge(Edge(source=source, target=target, weight=weight, edge_id=edge_id))

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge connecting a and b."""
        for nbr, eid in self._adj.get(a, []):
            if nbr == b:
                return self.edges[eid]
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """Return [(neighbour_id, edge)] in edge insertion order."""
        return [(nbr_id, self.edges[eid]) for nbr_id, eid in self._adj.get(node_id, [])]

    def is_connected(self) -> bool:
        if not self.nodes:
            return True
        start = next(iter(self.nodes))
        seen: Set[str] = {start}
        queue = deque([start])
        while queue:
            cur = queue.popleft()
            for nbr, _ in self._adj[cur]:
                if nbr not in seen:
                    seen.add(nbr)
                    queue.append(nbr)
        return len(seen) == len(self.nodes)

    # ==================================================================
    # COPY
    # ==================================================================
    def copy(self) -> "Graph":
        """Deep clone — algorithms never share node/edge objects with the caller."""
        return Graph.from_dict(self.to_dict())

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "weighted": self.weighted,
            "nodes":    [n.to_dict() for n in self.nodes.values()],
            "edges":    [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls(weighted=data.get("weighted", True))
        for nd in data.get("nodes", []):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    # ==================================================================
    # GENERATOR — Factory class-method
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 8,
        extra_edge_ratio: float = 0.5,
        weighted: bool = True,
        weight_range: Tuple[int, int] = (1, 20),
        seed: Optional[int] = None,
        canvas_w: float = 800,
        canvas_h: float = 450,
        min_distance: float = 100,
    ) -> "Graph":
        """
        Random connected graph.

        A random spanning tree is laid down first (each new node hangs off a
        random node that is already connected), so connectivity holds before
        `floor(num_nodes * extra_edge_ratio)` extra random edges are attempted.
        """
        rng = random.Random(seed)
        g = cls(weighted=weighted)
        padding = 50

        # place nodes, retrying a few times to keep them apart
        placed: List[Tuple[float, float]] = []
        for i in range(num_nodes):
            for _ in range(100):
                x = rng.uniform(padding, canvas_w - padding)
                y = rng.uniform(padding, canvas_h - padding)
                if all(math.hypot(px - x, py - y) >= min_distance for px, py in placed):
                    break
            placed.append((x, y))
            label = chr(65 + i) if num_nodes <= 26 else str(i)
            g.create_node(str(i), x=round(x, 1), y=round(y, 1), label=label, value=rng.randint(1, 99))

        def weight() -> Optional[int]:
            return rng.randint(*weight_range) if weighted else None

        # spanning tree backbone
        ids = list(g.nodes)
        connected = ids[:1]
        for nid in ids[1:]:
            anchor = rng.choice(connected)
            g.create_edge(anchor, nid, weight=weight())
            connected.append(nid)

        # extra density
        for _ in range(int(num_nodes * extra_edge_ratio)):
            u, v = rng.choice(ids), rng.choice(ids)
            if u != v and g.get_edge_between(u, v) is None:
                g.create_edge(u, v, weight=weight())

        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()}, weighted={self.weighted})"
