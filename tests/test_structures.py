import pytest

from structures import (
    Edge, Graph, Item, LinkedListState, Status, fresh_copy, make_items, random_items, values_of,
)


def test_make_items_stamps_insertion_key():
    items = make_items([4, 4, 1])
    assert [i.key for i in items] == [0, 1, 2]
    assert all(i.status is Status.DEFAULT for i in items)


def test_random_items_is_seeded():
    assert values_of(random_items(10, seed=7)) == values_of(random_items(10, seed=7))
    assert all(5 <= v <= 100 for v in values_of(random_items(50, seed=1)))


def test_fresh_copy_leaves_caller_list_alone():
    original = [Item(3, Status.SORTED, 0), Item(1, Status.PIVOT, 1)]
    copied = fresh_copy(original)
    copied[0] = copied[0].with_status(Status.SWAPPING)
    assert original[0].status is Status.SORTED
    assert [i.status for i in fresh_copy(original)] == [Status.DEFAULT, Status.DEFAULT]


def test_item_dict_round_trip_keeps_status():
    item = Item(9, Status.TARGET, 3)
    assert Item.from_dict(item.to_dict()) == item


@pytest.mark.parametrize("value", [1.5, "7", None, False])
def test_item_from_dict_rejects_non_integers(value):
    with pytest.raises(ValueError):
        Item.from_dict({"value": value})


def test_edge_from_dict_checks_weight():
    assert Edge.from_dict({"source": "A", "target": "B"}).weight is None
    assert Edge.from_dict({"source": "A", "target": "B", "weight": 4}).cost == 4
    for bad in ("4", False, float("nan")):
        with pytest.raises(ValueError):
            Edge.from_dict({"source": "A", "target": "B", "weight": bad})


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_generated_graph_is_connected(seed):
    g = Graph.generate_random(num_nodes=9, seed=seed)
    assert g.node_count() == 9
    assert g.edge_count() >= 8
    assert g.is_connected()
    for edge in g.edges.values():
        assert edge.source in g.nodes and edge.target in g.nodes


def test_add_edge_rejects_unknown_endpoint(abcd_graph):
    with pytest.raises(ValueError):
        abcd_graph.create_edge("A", "Z", weight=1)


def test_graph_copy_is_independent(abcd_graph):
    clone = abcd_graph.copy()
    clone.create_node("Q")
    clone.edges["e-A-B"].weight = 99
    assert "Q" not in abcd_graph.nodes
    assert abcd_graph.edges["e-A-B"].weight == 2


def test_split_graph_is_not_connected(split_graph):
    assert not split_graph.is_connected()


def test_linked_list_traversal_and_cycle():
    state = LinkedListState.from_values([1, 2, 3])
    assert state.traversal() == ([0, 1, 2], False)
    assert state.values_in_order() == [1, 2, 3]

    looped = state.copy()
    looped.next_links[2] = 0
    order, has_cycle = looped.traversal()
    assert order == [0, 1, 2]
    assert has_cycle
    assert state.next_links[2] is None


def test_linked_list_from_dict_validates_links():
    data = LinkedListState.from_values([1, 2]).to_dict()
    data["next_links"] = [5, None]
    with pytest.raises(ValueError):
        LinkedListState.from_dict(data)


def test_generated_linked_list_is_a_chain():
    state = LinkedListState.generate(size=5, seed=3)
    order, has_cycle = state.traversal()
    assert order == [0, 1, 2, 3, 4]
    assert not has_cycle
    assert LinkedListState.generate(size=0).head_index is None
