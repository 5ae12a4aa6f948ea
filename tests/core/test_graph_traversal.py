"""
Tests for degree and neighbour queries.
"""

from graphset.core.graph import Graph
from graphset.core.models import Node
from graphset.core.traversal import GraphTraversal, resolve_label


def labels(nodes):
    return [n.label for n in nodes]


def test_resolve_label():
    """Test label resolution from nodes and raw values."""
    assert resolve_label(Node({"label": "foo"})) == "foo"
    assert resolve_label("foo") == "foo"
    assert resolve_label(Node()) is None


def test_node_degree_by_label(alice_graph):
    """Test directed degree by label."""
    assert alice_graph.degree_of("Alice") == 2
    assert alice_graph.degree_of("Oscar") == 2
    assert alice_graph.degree_of("Bob") == 2
    assert alice_graph.degree_of("not found") == 0


def test_node_degree_by_object(alice_graph):
    """Test directed degree given a node."""
    assert alice_graph.degree_of(Node({"label": "Alice"})) == 2


def test_node_in_degree(alice_graph):
    """Test in-degree."""
    assert alice_graph.in_degree_of("Alice") == 1
    assert alice_graph.in_degree_of("Bob") == 2
    assert alice_graph.in_degree_of("Oscar") == 0
    assert alice_graph.in_degree_of("not found") == 0
    assert alice_graph.in_degree_of(Node({"label": "Alice"})) == 1


def test_node_out_degree(alice_graph):
    """Test out-degree."""
    assert alice_graph.out_degree_of("Alice") == 1
    assert alice_graph.out_degree_of("Bob") == 0
    assert alice_graph.out_degree_of("Oscar") == 2
    assert alice_graph.out_degree_of("not found") == 0
    assert alice_graph.out_degree_of(Node({"label": "Alice"})) == 1


def test_directed_degrees(directed_graph):
    """Test degrees on a single directed edge."""
    assert directed_graph.out_degree_of("foo") == 1
    assert directed_graph.in_degree_of("foo") == 0
    assert directed_graph.degree_of("bar") == 1


def test_undirected_degree(sample_graph):
    """Test that undirected degree counts every touching edge once."""
    sample_graph.directed = False
    assert sample_graph.degree_of("chuck") == 2
    assert sample_graph.degree_of("foo") == 3
    assert sample_graph.degree_of("bar") == 3


def test_degree_of_node_without_label_field():
    """Test that a graph without labels finds nothing."""
    g = Graph([{"name": "foo"}], [{"node1": "foo", "node2": "foo"}])
    assert g.degree_of("foo") == 0
    assert g.get_neighbours("foo") == []


def test_get_node_unexisting_label(sample_graph):
    """Test looking up an unknown label."""
    assert sample_graph.get_node("foobar") is None


def test_get_node_existing_label(sample_graph):
    """Test looking up a known label returns the stored node."""
    assert sample_graph.get_node("foo") is sample_graph.nodes[0]
    assert sample_graph.get_node(Node({"label": "bar"})) is sample_graph.nodes[1]


def test_get_node_first_match():
    """Test that the first node with a label wins."""
    g = Graph([{"label": "a", "n": 1}, {"label": "a", "n": 2}])
    assert g.get_node("a")["n"] == 1


def test_get_neighbours_unexisting_node(sample_graph):
    """Test neighbours of unknown nodes."""
    assert sample_graph.get_neighbours("moo") == []
    assert sample_graph.get_neighbours(Node({"label": "moo"})) == []


def test_get_neighbours_undirected_graph(sample_graph):
    """Test undirected neighbours follow edge order without duplicates."""
    g = sample_graph
    g.attrs["directed"] = False

    assert labels(g.get_neighbours("chuck")) == ["bar", "foo"]
    assert labels(g.get_neighbours("foo")) == ["bar", "chuck"]


def test_get_neighbours_directed_graph(directed_graph):
    """Test directed neighbours only follow outgoing edges."""
    assert labels(directed_graph.get_neighbours("foo")) == ["bar"]
    assert directed_graph.get_neighbours("bar") == []


def test_get_neighbours_returns_graph_nodes(directed_graph):
    """Test that neighbours are the graph's own node objects."""
    assert directed_graph.get_neighbours("foo")[0] is directed_graph.nodes[1]


def test_get_neighbours_bad_edges():
    """Test that edges missing an endpoint are skipped."""
    g = Graph(
        [{"label": "foo"}, {"label": "bar"}, {"label": "moo"}],
        [{"node1": "foo"}, {"node1": "foo", "node2": "moo"}],
    )

    n = g.get_neighbours("foo")
    assert len(n) == 1
    assert n[0].label == "moo"
    assert g.degree_of("foo") == 1


def test_get_neighbours_dangling_endpoint():
    """Test that an endpoint naming no node is skipped."""
    g = Graph(
        [{"label": "foo"}, {"label": "bar"}],
        [{"node1": "foo", "node2": "ghost"}, {"node1": "foo", "node2": "bar"}],
    )
    assert labels(g.get_neighbors("foo")) == ["bar"]


def test_undirected_self_loop():
    """Test a self loop in an undirected graph."""
    g = Graph([{"label": "foo"}], [{"node1": "foo", "node2": "foo"}], attrs={"directed": False})
    assert g.degree_of("foo") == 1
    assert labels(g.get_neighbours("foo")) == ["foo"]


def test_traversal_helper(alice_graph):
    """Test using the traversal helper directly."""
    traversal = GraphTraversal(alice_graph)
    assert labels(traversal.get_neighbours("Oscar")) == ["Alice", "Bob"]
    assert traversal.degree_of("Bob") == alice_graph.degree_of("Bob")
