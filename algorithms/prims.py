"""
prims.py — Prim's Minimum Spanning Tree (step log)
===================================================
Grows the tree from the start node one cheapest crossing edge at a
time.  Every round yields:

  1. All crossing edges (one end in the tree, one out) as COMPARING
  2. The winner TRAVERSED, its new endpoint VISITED, the rest reset

Ties on weight go to the edge inserted first, so the log is
reproducible.  If no crossing edge exists before every node is in the
tree the graph is disconnected: the last snapshot covers the start
node's component only.

Returns {"mst_edges": [edge ids], "total_weight": float, "tree_nodes": [ids]}.
"""

from typing import Any, Dict, Generator, List, Optional

from structures.edge import EdgeStatus
from structures.graph import Graph
from algorithms.step import Snapshot, StepBuilder


PSEUDOCODE: List[str] = [
    "def prims(graph, start):",                     # 0
    "    tree ← {start}",                           # 1
    "    while |tree| < |V|:",                      # 2
    "        crossing ← edges with one end in tree",# 3
    "        if crossing is empty: break",          # 4
    "        (u, v) ← min(crossing, key=weight)",   # 5
    "        tree.add(v); mst.add((u, v))",         # 6
    "    return mst",                               # 7
]


def prims(
    graph: Graph,
    start: Optional[str] = None,
) -> Generator[Snapshot, None, Dict[str, Any]]:
    g = graph.copy()
    sb = StepBuilder(list(g.nodes), list(g.edges))
    edge_order = {eid: i for i, eid in enumerate(g.edges)}

    if not g.nodes:
        sb.phase = "Completed"
        yield sb.build("Empty graph — no spanning tree to build.", is_final=True)
        return {"mst_edges": [], "total_weight": 0.0, "tree_nodes": []}

    if start is None:
        start = next(iter(g.nodes))
    elif start not in g.nodes:
        raise ValueError(f"Unknown start node '{start}'")

    tree: List[str] = [start]
    in_tree = {start}
    mst_edges: List[str] = []
    total = 0.0

    def sync() -> None:
        sb.overlay["mst_edges"] = list(mst_edges)
        sb.overlay["total_weight"] = total

    sb.phase = "Initialise"
    sb.set_current(start)
    sb.visit(start)
    sb.pseudocode_line = 1
    sync()
    yield sb.build(f"Start the tree at node {g.nodes[start].label}.")

    sb.phase = "Growing Tree"
    while len(in_tree) < len(g.nodes):
        crossing = [
            e for e in g.edges.values()
            if (e.source in in_tree) != (e.target in in_tree)
        ]
        if not crossing:
            break

        for e in crossing:
            sb.edge_states[e.id] = EdgeStatus.COMPARING.value
        sb.highlight_edges = [(e.source, e.target) for e in crossing]
        sb.pseudocode_line = 3
        yield sb.build(f"Weigh {len(crossing)} edge(s) crossing out of the tree.")

        best = min(crossing, key=lambda e: (e.cost, edge_order[e.id]))
        new_node = best.target if best.source in in_tree else best.source

        for e in crossing:
            sb.edge_states[e.id] = EdgeStatus.DEFAULT.value
        sb.edge_states[best.id] = EdgeStatus.TRAVERSED.value
        sb.highlight_edges = [(best.source, best.target)]
        in_tree.add(new_node)
        tree.append(new_node)
        mst_edges.append(best.id)
        total += best.cost
        sb.set_current(new_node)
        sb.visit(new_node)
        sb.pseudocode_line = 6
        sync()
        yield sb.build(f"Added edge with weight {best.cost:g} to MST (node {g.nodes[new_node].label} joins).")

    sb.set_current(None)
    sb.highlight_edges = []
    sb.phase = "Completed"
    sb.pseudocode_line = 7
    sync()
    if len(in_tree) < len(g.nodes):
        desc = (
            f"Graph is disconnected. MST complete for this component "
            f"({len(in_tree)} of {len(g.nodes)} nodes, total weight {total:g})."
        )
    else:
        desc = f"Minimum spanning tree complete. Total weight {total:g}."
    yield sb.build(desc, is_final=True)

    return {"mst_edges": mst_edges, "total_weight": total, "tree_nodes": tree}
