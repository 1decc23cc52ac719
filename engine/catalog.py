"""
catalog.py — Registry lookup & input preparation
=================================================
Glue between the registry and the two runners:

    info   = resolve("bubble_sort", mode=LIVE)     # or UnavailableAlgorithm
    data   = prepare_input(info, [5, 3, 8, 1])     # → List[Item]
    frames = info.fn(data)

Payloads arrive either as ready-made structures (Items, Graph,
LinkedListState, str) or in their JSON form (lists of ints / dicts,
Graph.to_dict() output, …).  Anything else is a ValueError.

`generate_input(kind, …)` builds a fresh random input for one kind;
`input_size` / `check_input_size` enforce the per-kind caps the API
applies (see EngineConfig.size_limit).
"""

from typing import Any, Optional

from algorithms import AlgoInfo, get_algorithm
from structures.item import Item, make_items, random_items
from structures.graph import Graph
from structures.linked_list import LinkedListState


INPUT_KINDS = ("array", "graph", "linked_list", "text")


class UnavailableAlgorithm(LookupError):
    """The key is unknown, or the algorithm is declared without an implementation."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"{key}: {reason}")
        self.key = key
        self.reason = reason


def resolve(key: str, mode: Optional[str] = None) -> AlgoInfo:
    info = get_algorithm(key)
    if info is None:
        raise UnavailableAlgorithm(key, "unknown algorithm")
    if not info.available:
        raise UnavailableAlgorithm(key, "no implementation")
    if mode is not None and info.mode != mode:
        raise UnavailableAlgorithm(key, f"runs as a {info.mode} algorithm, not {mode}")
    return info


# ---------------------------------------------------------------------------
# Payload → structure
# ---------------------------------------------------------------------------
def prepare_input(info: AlgoInfo, payload: Any) -> Any:
    kind = info.input_kind
    if kind == "array":
        return _as_items(payload)
    if kind == "graph":
        return _as_graph(payload)
    if kind == "linked_list":
        return _as_linked_list(payload)
    if kind == "text":
        if not isinstance(payload, str):
            raise ValueError("text input must be a string")
        return payload
    raise ValueError(f"Unknown input kind: {kind}")


def _as_items(payload: Any):
    if isinstance(payload, dict):
        payload = payload.get("items", payload.get("values"))
    if not isinstance(payload, (list, tuple)):
        raise ValueError("array input must be a list")
    if all(isinstance(v, Item) for v in payload):
        return list(payload)
    if all(isinstance(v, dict) for v in payload):
        try:
            return [Item.from_dict(v) for v in payload]
        except KeyError as e:
            raise ValueError(f"array item missing {e}")
    if all(isinstance(v, int) and not isinstance(v, bool) for v in payload):
        return make_items(payload)
    raise ValueError("array input must be all integers or all item objects")


def _as_graph(payload: Any) -> Graph:
    if isinstance(payload, Graph):
        return payload
    if not isinstance(payload, dict):
        raise ValueError("graph input must be an object with nodes and edges")
    try:
        return Graph.from_dict(payload)
    except (KeyError, TypeError) as e:
        raise ValueError(f"malformed graph: {e}")


def _as_linked_list(payload: Any) -> LinkedListState:
    if isinstance(payload, LinkedListState):
        return payload
    if isinstance(payload, (list, tuple)):
        return LinkedListState.from_values(list(payload))
    if isinstance(payload, dict):
        try:
            return LinkedListState.from_dict(payload)
        except (KeyError, TypeError) as e:
            raise ValueError(f"malformed linked list: {e}")
    raise ValueError("linked list input must be a list of values or an object")


def input_size(data: Any) -> int:
    """Element count of a prepared input: items, graph nodes, list nodes or characters."""
    if isinstance(data, (Graph, LinkedListState)):
        return len(data.nodes)
    return len(data)


def check_input_size(kind: str, size: int, limit: int) -> None:
    if size > limit:
        raise ValueError(f"{kind} input too large: {size} > {limit}")


# ---------------------------------------------------------------------------
# Random inputs
# ---------------------------------------------------------------------------
def generate_input(kind: str, size: Optional[int] = None, seed: Optional[int] = None, **options) -> Any:
    if kind == "array":
        return random_items(
            size=40 if size is None else size,
            low=options.get("low", 5),
            high=options.get("high", 100),
            seed=seed,
        )
    if kind == "graph":
        return Graph.generate_random(
            num_nodes=8 if size is None else size,
            extra_edge_ratio=options.get("extra_edge_ratio", 0.5),
            weighted=options.get("weighted", True),
            seed=seed,
        )
    if kind == "linked_list":
        return LinkedListState.generate(size=6 if size is None else size, seed=seed)
    raise ValueError(f"Cannot generate input of kind '{kind}'")


def build_generator(info: AlgoInfo, payload: Any, **params):
    """prepare_input + call the algorithm; bad keyword parameters are a ValueError."""
    data = prepare_input(info, payload)
    try:
        return info.fn(data, **params)
    except TypeError as e:
        raise ValueError(f"bad parameters for {info.key}: {e}")
