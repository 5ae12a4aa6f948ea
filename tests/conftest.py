"""Shared test fixtures."""

import pytest

from graphset.core.graph import Graph


@pytest.fixture
def sample_graph() -> Graph:
    """Fixture providing a graph with three labelled nodes and four edges."""
    return Graph(
        [
            {"label": "foo", "id": 2},
            {"label": "bar", "id": 1},
            {"label": "chuck", "id": 3},
        ],
        [
            {"node1": "foo", "node2": "bar"},
            {"node1": "bar", "node2": "foo"},
            {"node1": "bar", "node2": "chuck"},
            {"node1": "foo", "node2": "chuck"},
        ],
    )


@pytest.fixture
def sample_graph_1() -> Graph:
    """Fixture providing the same labels as sample_graph with different fields."""
    return Graph(
        [
            {"label": "bar", "num": 3},
            {"label": "foo", "num": 42},
            {"label": "chuck", "num": 78},
        ],
        [
            {"node1": "foo", "node2": "bar", "time": 1.0},
            {"node1": "bar", "node2": "foo", "time": 2.5},
            {"node1": "foo", "node2": "chuck", "time": 3.1},
        ],
    )


@pytest.fixture
def empty_graph() -> Graph:
    """Fixture providing a graph without nodes or edges."""
    return Graph()


@pytest.fixture
def directed_graph() -> Graph:
    """Fixture providing a two-node directed graph foo -> bar."""
    graph = Graph(
        [{"label": "foo"}, {"label": "bar"}],
        [{"node1": "foo", "node2": "bar"}],
    )
    graph.attrs["directed"] = True
    return graph


@pytest.fixture
def alice_graph() -> Graph:
    """Fixture providing a directed triangle.

    Alice ----> Bob
      ^          ^
      |          |
    Oscar -------'
    """
    return Graph(
        [{"label": "Alice"}, {"label": "Bob"}, {"label": "Oscar"}],
        [
            {"node1": "Alice", "node2": "Bob"},
            {"node1": "Oscar", "node2": "Alice"},
            {"node1": "Oscar", "node2": "Bob"},
        ],
    )
