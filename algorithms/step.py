"""
step.py — Algorithm Step Snapshot
==================================
Every step-log algorithm is a generator that yields Snapshot objects
and finally `return`s an auxiliary result.  A Snapshot is a
frozen-in-time picture of everything the visualizer needs to render
one frame:

    • The status of every node / edge (full maps, never deltas)
    • Which node is being processed and which edge is highlighted
    • The distance table and the finalised set (shortest paths)
    • Which line of pseudocode is executing right now
    • A plain-English description of what just happened
    • Algorithm-specific extras in `overlay` (Huffman forest, codes, …)

Design decisions:
  - Snapshot is a plain frozen dataclass.  The generator is the only
    writer; the playback controller / renderer are pure readers.
  - Frame i never needs frame i-1 or i+1: the builder keeps the running
    state and `build()` deep-copies all of it into each Snapshot, so a
    later mutation can never reach back into an earlier frame.
"""

import copy
import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Generator, List, Optional, Tuple

from structures.edge import EdgeStatus
from structures.node import NodeStatus


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        step_number     : 0-based index of this snapshot in the log.
        phase           : Coarse stage label ("Building Tree", …).
        description     : Human-readable account of this step.
        current_node    : ID of the node being processed right now.
        highlight_edge  : (source, target) of the edge under inspection, or None.
        node_states     : {node_id: status} for EVERY node.
        edge_states     : {edge_id: status} for EVERY edge.
        visited_set     : Node ids finalised so far, in finalisation order.
        distances       : {node_id: float} — inf for "not reached yet".
        highlight_nodes : Extra node ids to emphasise.
        highlight_edges : Extra (source, target) pairs to emphasise.
        pseudocode_line : 0-based index into the algorithm's PSEUDOCODE.
        overlay         : Algorithm-specific data:
                            • "queue"       – [(node_id, priority)] for PQ algos
                            • "forest"      – root ids (Huffman)
                            • "all_nodes"   – every tree node (Huffman)
                            • "edges"       – tree edges with 0/1 labels (Huffman)
                            • "frequencies" / "codes" (Huffman)
                            • "mst_edges" / "total_weight" (Prim)
        metrics         : Running tally: nodes_visited, edges_relaxed, …
        is_final        : True on the very last snapshot.
    """

    step_number:      int                          = 0
    phase:            str                          = ""
    description:      str                          = ""
    current_node:     Optional[str]                = None
    highlight_edge:   Optional[Tuple[str, str]]    = None
    node_states:      Dict[str, str]               = field(default_factory=dict)
    edge_states:      Dict[str, str]               = field(default_factory=dict)
    visited_set:      List[str]                    = field(default_factory=list)
    distances:        Dict[str, float]             = field(default_factory=dict)
    highlight_nodes:  List[Any]                    = field(default_factory=list)
    highlight_edges:  List[Tuple[Any, Any]]        = field(default_factory=list)
    pseudocode_line:  int                          = 0
    overlay:          Dict[str, Any]               = field(default_factory=dict)
    metrics:          Dict[str, Any]               = field(default_factory=dict)
    is_final:         bool                         = False

    def to_dict(self) -> Dict[str, Any]:
        return json_safe(asdict(self))


# ---------------------------------------------------------------------------
# Running-state builder so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that a generator keeps for the whole run.

    Usage inside an algorithm generator:
        sb = StepBuilder(node_ids, edge_ids)
        sb.set_current("A")
        sb.pseudocode_line = 6
        yield sb.build("Processing node A with distance 0.")
    """

    def __init__(self, node_ids: Optional[List[str]] = None, edge_ids: Optional[List[str]] = None):
        self.phase:            str                       = ""
        self.current_node:     Optional[str]             = None
        self.highlight_edge:   Optional[Tuple[str, str]] = None
        self.node_states:      Dict[str, str]            = {nid: NodeStatus.DEFAULT.value for nid in node_ids or []}
        self.edge_states:      Dict[str, str]            = {eid: EdgeStatus.DEFAULT.value for eid in edge_ids or []}
        self.visited_set:      List[str]                 = []
        self.distances:        Dict[str, float]          = {}
        self.highlight_nodes:  List[Any]                 = []
        self.highlight_edges:  List[Tuple[Any, Any]]     = []
        self.pseudocode_line:  int                       = 0
        self.overlay:          Dict[str, Any]            = {}
        self.metrics:          Dict[str, Any]            = {"nodes_visited": 0, "edges_relaxed": 0}
        self._count:           int                       = 0

    # -- helpers --
    def set_current(self, node_id: Optional[str]) -> None:
        if self.current_node is not None and self.node_states.get(self.current_node) == NodeStatus.PROCESSING.value:
            self.node_states[self.current_node] = NodeStatus.DEFAULT.value
        self.current_node = node_id
        if node_id is not None and self.node_states.get(node_id) != NodeStatus.VISITED.value:
            self.node_states[node_id] = NodeStatus.PROCESSING.value

    def visit(self, node_id: str) -> None:
        self.node_states[node_id] = NodeStatus.VISITED.value
        if node_id not in self.visited_set:
            self.visited_set.append(node_id)
        self.metrics["nodes_visited"] = len(self.visited_set)

    def relax_edge(self, edge_id: str) -> None:
        self.edge_states[edge_id] = EdgeStatus.RELAXED.value
        self.metrics["edges_relaxed"] = self.metrics.get("edges_relaxed", 0) + 1

    @property
    def count(self) -> int:
        return self._count

    def build(self, description: str, is_final: bool = False) -> Snapshot:
        snap = Snapshot(
            step_number=self._count,
            phase=self.phase,
            description=description,
            current_node=self.current_node,
            highlight_edge=self.highlight_edge,
            node_states=dict(self.node_states),
            edge_states=dict(self.edge_states),
            visited_set=list(self.visited_set),
            distances=dict(self.distances),
            highlight_nodes=list(self.highlight_nodes),
            highlight_edges=list(self.highlight_edges),
            pseudocode_line=self.pseudocode_line,
            overlay=copy.deepcopy(self.overlay),
            metrics=dict(self.metrics),
            is_final=is_final,
        )
        self._count += 1
        return snap


# ---------------------------------------------------------------------------
# StepLog — the finished, replayable product of a generator
# ---------------------------------------------------------------------------
@dataclass
class StepLog:
    steps: List[Snapshot]     = field(default_factory=list)
    aux:   Dict[str, Any]     = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, idx: int) -> Snapshot:
        return self.steps[idx]

    @property
    def last(self) -> Optional[Snapshot]:
        return self.steps[-1] if self.steps else None


def collect(generator: Generator[Snapshot, None, Optional[Dict[str, Any]]]) -> StepLog:
    """Exhaust a step generator, keeping every Snapshot and its return value."""
    steps: List[Snapshot] = []
    while True:
        try:
            steps.append(next(generator))
        except StopIteration as stop:
            return StepLog(steps=steps, aux=stop.value or {})


# ---------------------------------------------------------------------------
# JSON export
# ---------------------------------------------------------------------------
def json_safe(value: Any) -> Any:
    """Tuples → lists, inf / nan → None, recursively.  Output is json.dumps-able."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {k if isinstance(k, (str, int)) else str(k): json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(v) for v in value]
    return value
