"""
dfs.py — Depth-First Search (live)
===================================
Depth-first search over an undirected graph.  The call stack is an
explicit list of (node, parent, neighbour iterator) entries, so long
path graphs never hit the interpreter recursion limit and closing the
generator stops the whole walk at once.

Yields a GraphFrame at:
  1. Entering a node              →  node PROCESSING
  2. Finishing the entry beat     →  node VISITED
  3. Taking a tree edge           →  edge TRAVERSED  (half-length beat)
  4. Completion                   →  reachable nodes VISITED

The edge back to the parent is skipped.  Nodes outside the start
node's component stay DEFAULT and the closing frame says how many
were unreachable.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from structures.edge import Edge, EdgeStatus
from structures.graph import Graph
from structures.node import NodeStatus
from algorithms.frame import GraphFrame


PSEUDOCODE: List[str] = [
    "def dfs(node, parent):",                       # 0
    "    visited.add(node)",                        # 1
    "    for (nbr, edge) in adj(node):",            # 2
    "        if nbr == parent: continue",           # 3
    "        if nbr not in visited:",               # 4
    "            mark edge traversed",              # 5
    "            dfs(nbr, node)",                   # 6
]


def dfs(graph: Graph, start: Optional[str] = None) -> Iterator[GraphFrame]:
    node_states: Dict[str, str] = {nid: NodeStatus.DEFAULT.value for nid in graph.nodes}
    edge_states: Dict[str, str] = {eid: EdgeStatus.DEFAULT.value for eid in graph.edges}
    n = len(node_states)

    if n == 0:
        yield GraphFrame(description="Empty graph — nothing to traverse.", progress=1.0, is_final=True)
        return

    if start is None:
        start = next(iter(graph.nodes))
    elif start not in graph.nodes:
        raise ValueError(f"Unknown start node '{start}'")

    visited = set()

    def frame(description: str, current: Optional[str], hold: float = 1.0) -> GraphFrame:
        return GraphFrame(
            node_states=dict(node_states),
            edge_states=dict(edge_states),
            current_node=current,
            description=description,
            progress=len(visited) / n,
            hold=hold,
        )

    def enter(node: str) -> GraphFrame:
        visited.add(node)
        node_states[node] = NodeStatus.PROCESSING.value
        f = frame(f"Visiting node {graph.nodes[node].label}.", node)
        node_states[node] = NodeStatus.VISITED.value
        return f

    yield enter(start)
    stack: List[Tuple[str, Optional[str], Iterator[Tuple[str, Edge]]]] = [
        (start, None, iter(graph.neighbours(start)))
    ]
    while stack:
        node, parent, nbrs = stack[-1]
        for nbr, edge in nbrs:
            if nbr != parent and nbr not in visited:
                break
        else:
            stack.pop()
            continue

        edge_states[edge.id] = EdgeStatus.TRAVERSED.value
        yield frame(f"Follow edge {graph.nodes[node].label} → {graph.nodes[nbr].label}.", node, hold=0.5)
        yield enter(nbr)
        stack.append((nbr, node, iter(graph.neighbours(nbr))))

    unreachable = n - len(visited)
    desc = "DFS traversal completed."
    if unreachable:
        desc += f" {unreachable} node(s) are not reachable from {graph.nodes[start].label}."
    yield GraphFrame(
        node_states=dict(node_states),
        edge_states=dict(edge_states),
        description=desc,
        progress=1.0,
        is_final=True,
    )
