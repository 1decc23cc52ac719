"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm (step log)
============================================================
Generator-based Dijkstra over an undirected graph using a min-heap
(heapq).  Heap entries are `(distance, push_seq, node_id)`: the push
sequence number breaks distance ties in insertion order, so the same
graph always produces the same log.

Yields a Snapshot at:
  1. Initialise distances / push source
  2. Pop minimum-distance node        →  PROCESSING
  3. Stale heap entry                 →  skipped
  4. Node finalised                   →  VISITED
  5. Each neighbour check             →  edge highlighted
  6. Successful relaxation            →  distance updated, edge RELAXED
  7. Heap empty                       →  complete (reports unreachable nodes)

Returns {"previous": {node: predecessor}, "distances": {...}}; use
`reconstruct_path` to turn the predecessor map into a path.

Correctness note: Dijkstra requires non-negative weights.
"""

import heapq
import itertools
from typing import Any, Dict, Generator, List, Optional

from structures.graph import Graph
from structures.node import NodeStatus
from algorithms.step import Snapshot, StepBuilder


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",                 # 0
    "    dist ← {v: ∞ for v in V}",                 # 1
    "    dist[source] ← 0",                         # 2
    "    pq ← [(0, source)]",                       # 3
    "    while pq is not empty:",                   # 4
    "        (d, u) ← pq.pop_min()",                # 5
    "        if d > dist[u]: continue",             # 6
    "        visited.add(u)",                       # 7
    "        for (v, w) in adj(u):",                # 8
    "            if dist[u] + w < dist[v]:",        # 9
    "                dist[v] ← dist[u] + w",        # 10
    "                previous[v] ← u",              # 11
    "                pq.push((dist[v], v))",        # 12
    "    return dist, previous",                    # 13
]

INF = float("inf")


def dijkstra(
    graph: Graph,
    source: Optional[str] = None,
) -> Generator[Snapshot, None, Dict[str, Any]]:
    g = graph.copy()
    sb = StepBuilder(list(g.nodes), list(g.edges))

    if not g.nodes:
        sb.phase = "Completed"
        yield sb.build("Empty graph — nothing to explore.", is_final=True)
        return {"previous": {}, "distances": {}}

    if source is None:
        source = next(iter(g.nodes))
    elif source not in g.nodes:
        raise ValueError(f"Unknown source node '{source}'")

    dist:     Dict[str, float]         = {nid: INF for nid in g.nodes}
    previous: Dict[str, Optional[str]] = {nid: None for nid in g.nodes}
    visited:  set                      = set()
    seq       = itertools.count()
    dist[source] = 0.0
    pq = [(0.0, next(seq), source)]

    def label(nid: str) -> str:
        return g.nodes[nid].label

    def sync() -> None:
        sb.distances = dict(dist)
        sb.overlay["queue"] = [(n, d) for d, _, n in sorted(pq)]

    # --- init step ---
    sb.phase = "Initialise"
    sb.pseudocode_line = 2
    sync()
    yield sb.build("Initialize distances to Infinity, start node to 0.")

    # --- main loop ---
    sb.phase = "Exploring"
    while pq:
        d, _, u = heapq.heappop(pq)

        sb.set_current(u)
        sb.highlight_edge = None
        sb.pseudocode_line = 5
        sync()
        yield sb.build(f"Processing node {label(u)} with distance {_fmt(d)}.")

        if d > dist[u] or u in visited:
            sb.pseudocode_line = 6
            yield sb.build(f"Stale entry for {label(u)} (best is {_fmt(dist[u])}) — skip.")
            continue

        visited.add(u)
        sb.visit(u)
        sb.pseudocode_line = 7
        yield sb.build(f"Marked node {label(u)} as visited. Its distance {_fmt(d)} is final.")

        for v, edge in g.neighbours(u):
            if v in visited:
                continue
            sb.highlight_edge = (u, v)
            sb.pseudocode_line = 8
            yield sb.build(f"Checking neighbor {label(v)} with edge weight {_fmt(edge.cost)}.")

            candidate = dist[u] + edge.cost
            if candidate < dist[v]:
                dist[v] = candidate
                previous[v] = u
                heapq.heappush(pq, (candidate, next(seq), v))
                sb.relax_edge(edge.id)
                sb.node_states[v] = NodeStatus.COMPARING.value
                sb.pseudocode_line = 10
                sync()
                yield sb.build(f"Updated distance for node {label(v)} to {_fmt(candidate)}.")

    # --- complete ---
    sb.set_current(None)
    sb.highlight_edge = None
    sb.phase = "Completed"
    sb.pseudocode_line = 13
    sync()
    unreachable = [label(nid) for nid in g.nodes if nid not in visited]
    desc = "Algorithm complete."
    if unreachable:
        desc += f" Unreachable from {label(source)}: {', '.join(unreachable)}."
    yield sb.build(desc, is_final=True)

    return {"previous": previous, "distances": dict(dist)}


# ---------------------------------------------------------------------------
def reconstruct_path(previous: Dict[str, Optional[str]], source: str, target: str) -> List[str]:
    """Walk the predecessor map back from `target`.  Empty list if `target` was never reached."""
    if target not in previous:
        return []
    path, cur = [], target
    while cur is not None:
        path.append(cur)
        cur = previous.get(cur)
    path.reverse()
    return path if path[0] == source else []


def _fmt(value: float) -> str:
    if value == INF:
        return "∞"
    return str(int(value)) if float(value).is_integer() else f"{value:g}"
