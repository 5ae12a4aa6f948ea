"""
Core graph data structure built from record collections.

This module provides the Graph class: one collection of nodes, one collection
of edges and a mapping of graph-level attributes (``directed`` is ``True`` by
default). Graphs combine through set-algebra operators that work on the node
and edge collections independently and always return a new graph:

    g1 & g2    intersection
    g1 | g2    union
    g1 ^ g2    symmetric difference
    g1 + g2    concatenation (duplicates kept)
    g1 - g2    difference

Each operator returns ``None`` instead of raising when the other operand is
not a Graph, so callers can test the result before combining mixed data.
"""

from copy import deepcopy
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .models import EdgeCollection, Node, NodeCollection, RecordLike
from .options import WriteOptions
from .traversal import GraphTraversal


class Graph:
    """
    A graph with nodes, edges and graph-level attributes.

    Equality only looks at the nodes and edges (in order); the attribute
    mapping is ignored.

    Attributes:
        nodes (NodeCollection): Nodes of the graph
        edges (EdgeCollection): Edges of the graph
        attrs (Dict[str, Any]): Graph attributes (e.g. author, description)
    """

    def __init__(
        self,
        nodes: Optional[Iterable[RecordLike]] = None,
        edges: Optional[Iterable[RecordLike]] = None,
        attrs: Optional[Mapping[str, Any]] = None,
    ):
        """
        Initialize a graph.

        Args:
            nodes: Nodes as Node objects or mappings
            edges: Edges as Edge objects or mappings
            attrs: Graph attributes merged over ``{"directed": True}``

        Raises:
            RecordTypeError: If a node or edge is neither a mapping nor a record
        """
        self.nodes = NodeCollection(nodes)
        self.edges = EdgeCollection(edges)
        self.attrs: Dict[str, Any] = {"directed": True}
        if attrs:
            self.attrs.update(attrs)

    @property
    def directed(self) -> bool:
        """Whether the graph is directed."""
        return bool(self.attrs.get("directed"))

    @directed.setter
    def directed(self, value: bool) -> None:
        self.attrs["directed"] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return False
        return self.nodes == other.nodes and self.edges == other.edges

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)}, attrs={self.attrs!r})"

    def clone(self) -> "Graph":
        """
        Clone the graph.

        Every node and edge is cloned too, so the copy can be mutated without
        affecting this graph.
        """
        graph = Graph(attrs=deepcopy(self.attrs))
        graph.nodes = self.nodes.clone()
        graph.edges = self.edges.clone()
        return graph

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        """Return ``{"nodes": [...], "edges": [...]}`` with plain attribute dicts."""
        return {"nodes": self.nodes.to_list(), "edges": self.edges.to_list()}

    # Set algebra

    def intersect(self, other: Any) -> Optional["Graph"]:
        """
        Return a new graph with the nodes and edges found in both graphs.

        Args:
            other: Graph to intersect with

        Returns:
            The intersection, or None if ``other`` is not a Graph
        """
        if not isinstance(other, Graph):
            return None
        return Graph(self.nodes & other.nodes, self.edges & other.edges)

    def union(self, other: Any) -> Optional["Graph"]:
        """
        Return a new graph with every distinct node and edge of either graph.

        Args:
            other: Graph to unite with

        Returns:
            The union, or None if ``other`` is not a Graph
        """
        if not isinstance(other, Graph):
            return None
        return Graph(self.nodes | other.nodes, self.edges | other.edges)

    def symmetric_difference(self, other: Any) -> Optional["Graph"]:
        """
        Return a new graph with the nodes and edges in one graph but not both.

        Args:
            other: Graph to compare with

        Returns:
            The symmetric difference, or None if ``other`` is not a Graph
        """
        if not isinstance(other, Graph):
            return None
        return Graph(self.nodes ^ other.nodes, self.edges ^ other.edges)

    def concat(self, other: Any) -> Optional["Graph"]:
        """Add two graphs, keeping duplicate nodes and edges."""
        if not isinstance(other, Graph):
            return None
        return Graph(self.nodes + other.nodes, self.edges + other.edges)

    def difference(self, other: Any) -> Optional["Graph"]:
        """
        Return a copy of this graph without the nodes and edges of ``other``.

        Args:
            other: Graph whose nodes and edges are removed

        Returns:
            The difference, or None if ``other`` is not a Graph
        """
        if not isinstance(other, Graph):
            return None
        return Graph(self.nodes - other.nodes, self.edges - other.edges)

    def not_(self, other: Any) -> Optional["Graph"]:
        """Alias of ``difference``."""
        return self.difference(other)

    __and__ = intersect
    __or__ = union
    __xor__ = symmetric_difference
    __add__ = concat
    __sub__ = difference

    # Traversal

    def get_node(self, node_or_label: Any) -> Optional[Node]:
        """Return the first node with the given label, or None."""
        return GraphTraversal(self).get_node(node_or_label)

    def degree_of(self, node_or_label: Any) -> int:
        """Return the number of edges touching the node."""
        return GraphTraversal(self).degree_of(node_or_label)

    def in_degree_of(self, node_or_label: Any) -> int:
        """Return the number of edges ending at the node."""
        return GraphTraversal(self).in_degree_of(node_or_label)

    def out_degree_of(self, node_or_label: Any) -> int:
        """Return the number of edges starting at the node."""
        return GraphTraversal(self).out_degree_of(node_or_label)

    def get_neighbours(self, node_or_label: Any) -> List[Node]:
        """Return the nodes adjacent to the node."""
        return GraphTraversal(self).get_neighbours(node_or_label)

    get_neighbors = get_neighbours

    # Files

    def write(
        self, filename: str, options: Optional[Union[WriteOptions, Mapping[str, Any]]] = None
    ) -> None:
        """
        Write the graph into a file, choosing the format from the extension.

        Args:
            filename: Target path; no extension means YAML
            options: Write options (e.g. ``{"gephi": True}`` for GDF files)

        Raises:
            UnsupportedFormatError: If no serializer handles the extension
        """
        from .serialization import write_graph

        write_graph(self, filename, options)

    @classmethod
    def read(cls, filename: str) -> "Graph":
        """Read a graph from a file, choosing the format from the extension."""
        from .serialization import read_graph

        return read_graph(filename)
