import inspect
import sys
from contextlib import contextmanager

import pytest

from structures import Graph, LinkedListState, NodeStatus, EdgeStatus, ListStatus, Status, TERMINAL_STATUSES, make_items, random_items, values_of
from algorithms import REGISTRY, LIVE
from algorithms.bubble_sort import bubble_sort
from algorithms.dfs import dfs
from algorithms.linear_search import linear_search
from algorithms.linked_list import middle_node, reverse_linked_list
from algorithms.merge_sort import merge_sort
from algorithms.quick_sort import quick_sort


SORTS = ["bubble_sort", "selection_sort", "insertion_sort", "quick_sort", "merge_sort", "heap_sort", "radix_sort"]


def run(key, items):
    return list(REGISTRY[key].fn(items))


@contextmanager
def recursion_headroom(levels=100):
    """Lower the interpreter recursion limit to `levels` above the current depth."""
    old = sys.getrecursionlimit()
    sys.setrecursionlimit(len(inspect.stack(0)) + levels)
    try:
        yield
    finally:
        sys.setrecursionlimit(old)


def chain_graph(n):
    g = Graph()
    for i in range(n):
        g.create_node(str(i))
    for i in range(n - 1):
        g.create_edge(str(i), str(i + 1), weight=1)
    return g


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------
def test_bubble_sort_four_items():
    frames = list(bubble_sort(make_items([5, 3, 8, 1])))
    last = frames[-1]
    assert [(i.value, i.status) for i in last.items] == [
        (1, Status.SORTED), (3, Status.SORTED), (5, Status.SORTED), (8, Status.SORTED),
    ]

    def adjacent_pair_comparing(frame):
        statuses = [i.status for i in frame.items]
        return any(a is b is Status.COMPARING for a, b in zip(statuses, statuses[1:]))

    assert any(adjacent_pair_comparing(f) for f in frames[:-1])


@pytest.mark.parametrize("key", SORTS)
@pytest.mark.parametrize("values", [[], [7], [5, 3, 8, 1], [9, 2, 2, 7, 0, 5, 5, 13, 1], [-4, 12, 0, -30, 7]])
def test_sorts_end_sorted_and_terminal(key, values):
    frames = run(key, make_items(values))
    last = frames[-1]
    assert last.is_final
    assert last.progress == 1.0
    assert values_of(last.items) == sorted(values)
    assert all(item.status in TERMINAL_STATUSES for item in last.items)
    assert [f.is_final for f in frames].count(True) == 1


@pytest.mark.parametrize("key", SORTS)
def test_sorts_on_random_input(key):
    items = random_items(25, seed=11)
    assert values_of(run(key, items)[-1].items) == sorted(values_of(items))


@pytest.mark.parametrize("key", SORTS)
def test_sorts_do_not_touch_caller_items(key):
    items = make_items([3, 1, 2])
    snapshot = list(items)
    run(key, items)
    assert items == snapshot


@pytest.mark.parametrize("key", SORTS)
def test_progress_stays_in_range(key):
    for frame in run(key, random_items(12, seed=2)):
        assert 0.0 <= frame.progress <= 1.0


@pytest.mark.parametrize("key", SORTS)
def test_frames_are_independent(key):
    frames = run(key, make_items([4, 2, 3, 1]))
    # the first frame still shows the input order after later frames reordered it
    assert values_of(frames[0].items) == [4, 2, 3, 1]
    assert values_of(frames[-1].items) == [1, 2, 3, 4]


def test_quick_sort_on_sorted_input_runs_without_deep_recursion():
    n = 300
    last = None
    with recursion_headroom():
        for last in quick_sort(make_items(range(n))):
            pass
    assert last.is_final
    assert values_of(last.items) == list(range(n))
    assert {i.status for i in last.items} == {Status.SORTED}


def test_quick_sort_frame_order_left_range_first():
    settled = []
    seen = set()
    for frame in quick_sort(make_items([3, 1, 2, 5, 4])):
        for idx, item in enumerate(frame.items):
            if item.status is Status.SORTED and idx not in seen:
                seen.add(idx)
                settled.append(idx)
    # pivot 4 lands at 3, then [3, 1, 2] is finished before [5]
    assert settled[:4] == [3, 1, 0, 2]
    assert settled[-1] == 4


def test_merge_sort_is_stable():
    items = make_items([3, 1, 3, 1, 2])
    last = list(merge_sort(items))[-1]
    assert [(i.value, i.key) for i in last.items] == [(1, 1), (1, 3), (2, 4), (3, 0), (3, 2)]


@pytest.mark.parametrize("key", ["insertion_sort", "radix_sort", "bubble_sort"])
def test_other_stable_sorts_keep_order(key):
    last = run(key, make_items([2, 1, 2, 1]))[-1]
    assert [i.key for i in last.items] == [1, 3, 0, 2]


# ---------------------------------------------------------------------------
# Searching
# ---------------------------------------------------------------------------
def test_linear_search_marks_target():
    last = list(linear_search(make_items([4, 8, 15, 16]), target=15))[-1]
    assert [i.status for i in last.items] == [Status.SORTED, Status.SORTED, Status.TARGET, Status.SORTED]
    assert last.is_final


def test_linear_search_defaults_to_last_value():
    last = list(linear_search(make_items([4, 8, 15])))[-1]
    assert last.items[2].status is Status.TARGET


def test_linear_search_miss_checks_everything():
    frames = list(linear_search(make_items([1, 2, 3]), target=99))
    assert all(i.status is Status.SORTED for i in frames[-1].items)
    assert "not in the array" in frames[-1].description


def test_linear_search_empty():
    frames = list(linear_search([]))
    assert len(frames) == 1 and frames[0].is_final


# ---------------------------------------------------------------------------
# DFS
# ---------------------------------------------------------------------------
def test_dfs_visits_every_reachable_node(abcd_graph):
    frames = list(dfs(abcd_graph, start="A"))
    last = frames[-1]
    assert set(last.node_states.values()) == {"visited"}
    traversed = [eid for eid, s in last.edge_states.items() if s == "traversed"]
    assert traversed == ["e-A-B", "e-B-C", "e-C-D"]
    assert frames[0].current_node == "A"
    assert frames[0].node_states["A"] == "processing"


def test_dfs_reports_unreachable(split_graph):
    last = list(dfs(split_graph, start="A"))[-1]
    assert last.node_states["E"] == "default"
    assert "1 node(s) are not reachable" in last.description


def test_dfs_edge_frames_hold_half_a_beat(abcd_graph):
    edge_frames = [f for f in dfs(abcd_graph) if f.description.startswith("Follow edge")]
    assert edge_frames and all(f.hold == 0.5 for f in edge_frames)
    assert edge_frames[0].delay_for(100) == 50


def test_dfs_unknown_start(abcd_graph):
    with pytest.raises(ValueError):
        list(dfs(abcd_graph, start="nope"))


def test_dfs_long_path_runs_without_deep_recursion():
    n = 300
    with recursion_headroom():
        frames = list(dfs(chain_graph(n)))
    last = frames[-1]
    assert set(last.node_states.values()) == {"visited"}
    assert set(last.edge_states.values()) == {"traversed"}
    assert [f.current_node for f in frames if f.description.startswith("Visiting")] == [str(i) for i in range(n)]


def test_dfs_close_stops_the_walk():
    walk = dfs(chain_graph(50))
    for _ in range(10):
        next(walk)
    walk.close()
    with pytest.raises(StopIteration):
        next(walk)


def test_dfs_statuses_come_from_the_enums(split_graph):
    node_vocab = {s.value for s in NodeStatus}
    edge_vocab = {s.value for s in EdgeStatus}
    for frame in dfs(split_graph):
        assert set(frame.node_states.values()) <= node_vocab
        assert set(frame.edge_states.values()) <= edge_vocab


def test_dfs_empty_graph():
    from structures import Graph
    frames = list(dfs(Graph()))
    assert len(frames) == 1 and frames[0].is_final


# ---------------------------------------------------------------------------
# Linked lists
# ---------------------------------------------------------------------------
def _state_of(frame):
    return LinkedListState(nodes=list(frame.nodes), next_links=list(frame.next_links), head_index=frame.head_index)


def test_reverse_linked_list():
    state = LinkedListState.from_values([1, 2, 3, 4])
    frames = list(reverse_linked_list(state))
    last = frames[-1]
    assert last.is_final
    assert last.head_index == 3
    assert _state_of(last).values_in_order() == [4, 3, 2, 1]
    assert all(n.status is ListStatus.REVERSED for n in last.nodes)
    # the input is untouched
    assert state.values_in_order() == [1, 2, 3, 4]


def test_relink_frames_have_a_floor():
    relinks = [f for f in reverse_linked_list(LinkedListState.from_values([1, 2])) if f.hold != 1.0]
    assert relinks
    assert relinks[0].delay_for(10) == 120
    assert relinks[0].delay_for(0) == 0


@pytest.mark.parametrize("values, middle", [([1, 2, 3, 4, 5], 3), ([1, 2, 3, 4], 3), ([7], 7), ([1, 2], 2)])
def test_middle_node(values, middle):
    last = list(middle_node(LinkedListState.from_values(values)))[-1]
    marked = [n for n in last.nodes if n.status is ListStatus.MIDDLE]
    assert [n.value for n in marked] == [middle]
    assert last.markers["middle"] == values.index(middle)


@pytest.mark.parametrize("walk", [reverse_linked_list, middle_node])
def test_cycle_is_refused(walk):
    state = LinkedListState.from_values([1, 2, 3])
    state.next_links[2] = 1
    frames = list(walk(state))
    assert len(frames) == 1
    assert frames[0].is_final
    assert "Cycle detected" in frames[0].description


@pytest.mark.parametrize("walk", [reverse_linked_list, middle_node])
def test_empty_list(walk):
    frames = list(walk(LinkedListState()))
    assert len(frames) == 1 and frames[0].is_final


def test_every_live_entry_yields_a_final_frame():
    for info in REGISTRY.values():
        if info.mode != LIVE or info.fn is None or info.input_kind != "array":
            continue
        assert list(info.fn(make_items([2, 1])))[-1].is_final
