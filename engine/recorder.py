"""
recorder.py — Run Recorder & Analytics
========================================
Runs an algorithm to completion with no pacing at all, keeps every
Snapshot (step-log algorithms) or Frame (live algorithms), and computes
the metrics card the Analytics panel shows.

Usage:
    rec = Recorder()
    rec.start("dijkstra", graph, source="0")
    rec.run_to_completion()          # exhausts the generator
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # JSON-safe dump for save / replay

    frames = Recorder().record_live("bubble_sort", [5, 3, 8, 1])
    log    = generate_log("huffman", "BEEP BOOP")

Unknown or unimplemented keys raise UnavailableAlgorithm; malformed
payloads raise ValueError.
"""

import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from algorithms import LIVE, LOG, AlgoInfo
from algorithms.frame import Frame, GraphFrame
from algorithms.step import StepLog, collect, json_safe
from engine.catalog import build_generator, prepare_input, resolve


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    mode:          str   = ""
    total_steps:   int   = 0          # Snapshots / Frames produced
    nodes_visited: int   = 0
    edges_relaxed: int   = 0          # relaxed (log) or traversed (live) edges
    wall_time_ms:  float = 0.0        # wall-clock time to run to completion
    completed:     bool  = False      # last step flagged is_final


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Every Snapshot / Frame from the run.
        aux     : Auxiliary result of a step-log run ({} for live runs).
        metrics : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.steps:   List[Any]            = []
        self.aux:     Dict[str, Any]       = {}
        self.metrics: Optional[RunMetrics] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._input:     Any                = None
        self._params:    Dict[str, Any]     = {}
        self._generator                     = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, payload: Any, **params) -> None:
        """Resolve the algorithm and build its generator for this run."""
        info = resolve(algo_key)
        self._algo_info = info
        self._input     = prepare_input(info, payload)
        self._params    = dict(params)
        self.steps      = []
        self.aux        = {}
        self.metrics    = None
        self._generator = build_generator(info, self._input, **params)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self._generator is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        if self._algo_info.mode == LOG:
            log = collect(self._generator)
            self.steps, self.aux = log.steps, log.aux
        else:
            self.steps = list(self._generator)
        self._generator = None
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.debug("recorded %s: %d step(s) in %.2f ms", self._algo_info.key, len(self.steps), wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    def record_live(self, algo_key: str, payload: Any, **params) -> List[Frame]:
        """Every frame a live algorithm would render, with no delay and no controller."""
        info = resolve(algo_key, mode=LIVE)
        self.start(info.key, payload, **params)
        self.run_to_completion()
        return list(self.steps)

    @property
    def log(self) -> StepLog:
        return StepLog(steps=list(self.steps), aux=self.aux)

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        info = self._algo_info
        return {
            "algo_key": info.key if info else "",
            "mode":     info.mode if info else "",
            "params":   json_safe(self._params),
            "input":    _export_input(self._input),
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "aux":      json_safe(self.aux),
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None

        nodes_visited = edges_relaxed = 0
        if info.mode == LOG and last is not None:
            nodes_visited = last.metrics.get("nodes_visited", 0)
            edges_relaxed = last.metrics.get("edges_relaxed", 0)
        elif isinstance(last, GraphFrame):
            nodes_visited = sum(1 for s in last.node_states.values() if s == "visited")
            edges_relaxed = sum(1 for s in last.edge_states.values() if s == "traversed")

        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            mode=info.mode,
            total_steps=len(self.steps),
            nodes_visited=nodes_visited,
            edges_relaxed=edges_relaxed,
            wall_time_ms=round(wall_ms, 2),
            completed=bool(last is not None and last.is_final),
        )


def _export_input(data: Any) -> Any:
    if data is None or isinstance(data, str):
        return data
    if isinstance(data, list):
        return [item.to_dict() for item in data]
    return data.to_dict()


# ---------------------------------------------------------------------------
# Step-log entry point
# ---------------------------------------------------------------------------
def generate_log(algo_key: str, payload: Any, **params) -> StepLog:
    """Run a step-log algorithm over `payload` and return its StepLog."""
    info = resolve(algo_key, mode=LOG)
    log = collect(build_generator(info, payload, **params))
    logger.debug("generated %s log: %d snapshot(s)", algo_key, len(log))
    return log
