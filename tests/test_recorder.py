import json

import pytest

from structures import LinkedListState
from engine import Recorder, UnavailableAlgorithm, generate_log


def test_log_run_metrics(abcd_graph):
    rec = Recorder()
    rec.start("dijkstra", abcd_graph, source="A")
    metrics = rec.run_to_completion()
    assert metrics.algo_key == "dijkstra"
    assert metrics.mode == "log"
    assert metrics.total_steps == len(rec.steps)
    assert metrics.nodes_visited == 4
    assert metrics.edges_relaxed == 4
    assert metrics.completed
    assert rec.aux["distances"]["C"] == 5


def test_live_run_metrics_for_graphs(abcd_graph):
    rec = Recorder()
    frames = rec.record_live("dfs", abcd_graph)
    assert frames[-1].is_final
    assert rec.metrics.nodes_visited == 4
    assert rec.metrics.edges_relaxed == 3
    assert rec.aux == {}


def test_export_is_json_safe(split_graph):
    rec = Recorder()
    rec.start("dijkstra", split_graph, source="A")
    rec.run_to_completion()
    dumped = rec.export()
    json.dumps(dumped)
    assert dumped["aux"]["distances"]["E"] is None
    assert dumped["steps"][0]["distances"]["B"] is None
    assert dumped["input"]["nodes"][0]["id"] == "A"
    assert dumped["params"] == {"source": "A"}


def test_export_live_frames():
    rec = Recorder()
    rec.record_live("reverse_linked_list", LinkedListState.from_values([1, 2, 3]))
    dumped = rec.export()
    json.dumps(dumped)
    assert dumped["steps"][-1]["head_index"] == 2
    assert dumped["steps"][-1]["is_final"]


def test_run_before_start():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_unknown_and_unimplemented_keys():
    with pytest.raises(UnavailableAlgorithm):
        Recorder().start("bogo_sort", [1])
    with pytest.raises(UnavailableAlgorithm):
        Recorder().record_live("interpolation_search", [1, 2])
    with pytest.raises(UnavailableAlgorithm):
        generate_log("bubble_sort", [1, 2])


def test_bad_payloads_are_value_errors():
    with pytest.raises(ValueError):
        generate_log("huffman", 42)
    with pytest.raises(ValueError):
        Recorder().record_live("bubble_sort", "not a list")
    with pytest.raises(ValueError):
        generate_log("dijkstra", {"nodes": [{"id": "A"}], "edges": [{"source": "A", "target": "Q"}]})
    with pytest.raises(ValueError):
        Recorder().record_live("bubble_sort", [1, 2], unexpected=True)


def test_generate_log_accepts_json_graphs(abcd_graph):
    log = generate_log("prims", abcd_graph.to_dict())
    assert log.aux["total_weight"] == 6


@pytest.mark.parametrize("values", [
    [{"value": 1.5}, {"value": 0.5}],
    [{"value": "3"}, {"value": 1}],
    [{"value": True}, {"value": 2}],
])
def test_item_dicts_must_hold_integers(values):
    with pytest.raises(ValueError):
        Recorder().record_live("radix_sort", values)


@pytest.mark.parametrize("weight", ["5", True, float("inf"), [1]])
def test_edge_weights_must_be_numbers(abcd_graph, weight):
    data = abcd_graph.to_dict()
    data["edges"][0]["weight"] = weight
    with pytest.raises(ValueError):
        generate_log("dijkstra", data, source="A")


def test_null_and_float_weights_are_accepted(abcd_graph):
    data = abcd_graph.to_dict()
    data["edges"][0]["weight"] = None
    data["edges"][1]["weight"] = 2.5
    log = generate_log("dijkstra", data, source="A")
    assert log.aux["distances"]["B"] == 1.0
    assert log.aux["distances"]["C"] == 3.5
