import math

import pytest

from structures import EdgeStatus, Graph, NodeStatus
from algorithms.step import StepBuilder, collect, json_safe
from algorithms.dijkstra import dijkstra, reconstruct_path
from algorithms.prims import prims
from algorithms.huffman import huffman


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
def test_dijkstra_distances_and_path(abcd_graph):
    log = collect(dijkstra(abcd_graph, source="A"))
    dist = log.aux["distances"]
    assert dist["A"] == 0 and dist["B"] == 2 and dist["C"] == 5 and dist["D"] == 6
    assert reconstruct_path(log.aux["previous"], "A", "C") == ["A", "B", "C"]
    assert log.last.is_final
    assert log.last.distances == dist
    assert log.last.visited_set == ["A", "B", "C", "D"]


def test_dijkstra_first_snapshot_is_initialisation(abcd_graph):
    first = collect(dijkstra(abcd_graph, source="A")).steps[0]
    assert first.description == "Initialize distances to Infinity, start node to 0."
    assert first.distances["A"] == 0
    assert all(math.isinf(first.distances[n]) for n in "BCD")


def test_dijkstra_skips_stale_heap_entry(abcd_graph):
    log = collect(dijkstra(abcd_graph, source="A"))
    stale = [s for s in log.steps if s.description.startswith("Stale entry for C")]
    assert len(stale) == 1


def test_dijkstra_relax_snapshots_mark_edges(abcd_graph):
    log = collect(dijkstra(abcd_graph, source="A"))
    updates = [s for s in log.steps if s.description.startswith("Updated distance")]
    assert [s.description for s in updates] == [
        "Updated distance for node B to 2.",
        "Updated distance for node C to 10.",
        "Updated distance for node C to 5.",
        "Updated distance for node D to 6.",
    ]
    assert log.last.metrics["edges_relaxed"] == 4
    assert log.last.edge_states["e-B-C"] == "relaxed"


def test_dijkstra_unreachable_nodes(split_graph):
    log = collect(dijkstra(split_graph, source="A"))
    assert math.isinf(log.aux["distances"]["E"])
    assert reconstruct_path(log.aux["previous"], "A", "E") == []
    assert "Unreachable from A: E." in log.last.description
    assert log.last.node_states["E"] == "default"


def test_dijkstra_empty_graph():
    log = collect(dijkstra(Graph()))
    assert len(log) == 1
    assert log.last.is_final


def test_dijkstra_unknown_source(abcd_graph):
    with pytest.raises(ValueError):
        collect(dijkstra(abcd_graph, source="Z"))


def test_dijkstra_does_not_touch_input(abcd_graph):
    before = abcd_graph.to_dict()
    collect(dijkstra(abcd_graph))
    assert abcd_graph.to_dict() == before


# ---------------------------------------------------------------------------
# Prim
# ---------------------------------------------------------------------------
def test_prims_builds_minimum_tree(abcd_graph):
    log = collect(prims(abcd_graph, start="A"))
    assert log.aux["mst_edges"] == ["e-A-B", "e-B-C", "e-C-D"]
    assert log.aux["total_weight"] == 6
    assert log.aux["tree_nodes"] == ["A", "B", "C", "D"]
    assert log.last.overlay["total_weight"] == 6
    assert log.last.description == "Minimum spanning tree complete. Total weight 6."


def test_prims_highlights_crossing_edges_first(abcd_graph):
    log = collect(prims(abcd_graph, start="A"))
    weigh = log.steps[1]
    assert weigh.edge_states["e-A-B"] == "comparing"
    assert weigh.edge_states["e-A-C"] == "comparing"
    assert weigh.edge_states["e-B-C"] == "default"
    picked = log.steps[2]
    assert picked.edge_states["e-A-B"] == "traversed"
    assert picked.edge_states["e-A-C"] == "default"


def test_prims_disconnected_graph_ends_cleanly(split_graph):
    log = collect(prims(split_graph, start="A"))
    assert log.last.is_final
    assert log.last.description.startswith("Graph is disconnected. MST complete for this component")
    assert "E" not in log.aux["tree_nodes"]
    assert len(log.aux["mst_edges"]) == 3


def test_prims_tie_goes_to_first_inserted_edge():
    g = Graph()
    for name in "XYZ":
        g.create_node(name)
    g.create_edge("X", "Z", weight=1)
    g.create_edge("X", "Y", weight=1)
    g.create_edge("Y", "Z", weight=1)
    log = collect(prims(g, start="X"))
    assert log.aux["mst_edges"] == ["e-X-Z", "e-X-Y"]


# ---------------------------------------------------------------------------
# Huffman
# ---------------------------------------------------------------------------
def test_huffman_beep_boop():
    log = collect(huffman("BEEP BOOP"))
    freq = log.aux["frequencies"]
    assert freq == {"B": 2, "E": 2, "P": 2, " ": 1, "O": 2}
    assert list(freq) == ["B", "E", "P", " ", "O"]

    codes = log.aux["codes"]
    assert set(codes) == set(freq)
    assert len(set(codes.values())) == len(codes)
    for a in codes.values():
        for b in codes.values():
            if a != b:
                assert not b.startswith(a)

    assert log.aux["encoded"] == "".join(codes[c] for c in "BEEP BOOP")
    assert log.last.overlay["codes"] == codes


def test_huffman_phases_in_order():
    phases = []
    for snap in collect(huffman("abracadabra")).steps:
        if not phases or phases[-1] != snap.phase:
            phases.append(snap.phase)
    assert phases == ["Counting Frequencies", "Initial Forest", "Building Tree", "Generating Codes", "Completed"]


def test_huffman_single_symbol_gets_zero():
    log = collect(huffman("aaaa"))
    assert log.aux["codes"] == {"a": "0"}
    assert log.aux["encoded"] == "0000"


def test_huffman_empty_text():
    log = collect(huffman(""))
    assert len(log) == 1
    assert log.last.description == "Empty text provided."
    assert log.aux["codes"] == {}


def test_huffman_snapshots_never_share_state():
    log = collect(huffman("BEEP BOOP"))
    assert log.steps[0].overlay["codes"] == {}
    assert log.steps[0].overlay["edges"] == []
    assert len(log.last.overlay["edges"]) == 8
    code_counts = [len(s.overlay["codes"]) for s in log.steps]
    assert code_counts == sorted(code_counts)


# ---------------------------------------------------------------------------
# Log-wide properties
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("make", [
    lambda g: dijkstra(g, source="A"),
    lambda g: prims(g, start="A"),
    lambda g: huffman("mississippi river"),
])
def test_logs_are_deterministic(abcd_graph, make):
    first = [s.to_dict() for s in collect(make(abcd_graph)).steps]
    second = [s.to_dict() for s in collect(make(abcd_graph.copy())).steps]
    assert first == second


@pytest.mark.parametrize("make", [
    lambda g: dijkstra(g, source="A"),
    lambda g: prims(g, start="A"),
    lambda g: huffman("BEEP BOOP"),
])
def test_logs_are_numbered_with_one_final(abcd_graph, make):
    steps = collect(make(abcd_graph)).steps
    assert [s.step_number for s in steps] == list(range(len(steps)))
    assert [s.is_final for s in steps] == [False] * (len(steps) - 1) + [True]


@pytest.mark.parametrize("make", [
    lambda g: dijkstra(g, source="A"),
    lambda g: prims(g, start="A"),
])
def test_graph_statuses_come_from_the_enums(split_graph, make):
    node_vocab = {s.value for s in NodeStatus}
    edge_vocab = {s.value for s in EdgeStatus}
    for snap in collect(make(split_graph)).steps:
        assert set(snap.node_states.values()) <= node_vocab
        assert set(snap.edge_states.values()) <= edge_vocab


def test_builder_copies_state_into_each_snapshot():
    sb = StepBuilder(["A", "B"], ["e-A-B"])
    sb.overlay["queue"] = [("A", 0)]
    first = sb.build("one")
    sb.visit("A")
    sb.overlay["queue"].append(("B", 2))
    second = sb.build("two")
    assert first.node_states == {"A": "default", "B": "default"}
    assert first.overlay["queue"] == [("A", 0)]
    assert second.overlay["queue"] == [("A", 0), ("B", 2)]
    assert (first.step_number, second.step_number) == (0, 1)


def test_json_safe_handles_infinity_and_tuples():
    assert json_safe({"d": float("inf"), "e": ("A", "B"), "n": [1.5]}) == {"d": None, "e": ["A", "B"], "n": [1.5]}
