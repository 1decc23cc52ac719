import pytest

from structures.graph import Graph


def build_graph(edges, extra_nodes=()):
    g = Graph(weighted=True)
    names = []
    for a, b, _ in edges:
        for name in (a, b):
            if name not in names:
                names.append(name)
    for name in list(names) + list(extra_nodes):
        g.create_node(name, label=name)
    for a, b, w in edges:
        g.create_edge(a, b, weight=w)
    return g


@pytest.fixture
def abcd_graph():
    """A-B:2, B-C:3, A-C:10, plus D hanging off C."""
    return build_graph([("A", "B", 2), ("B", "C", 3), ("A", "C", 10), ("C", "D", 1)])


@pytest.fixture
def split_graph():
    """Same as abcd_graph with an isolated node E."""
    return build_graph([("A", "B", 2), ("B", "C", 3), ("A", "C", 10), ("C", "D", 1)], extra_nodes=["E"])
