"""
Degree and neighbour queries over a graph's edge list.

Nodes are identified by their ``label`` field and edges name their endpoints
with ``node1`` and ``node2``. Lookups are linear scans in insertion order.
Queries about an unknown label return neutral results (``None``, ``0`` or an
empty list), and edges missing an endpoint field are skipped.
"""

from typing import TYPE_CHECKING, Any, Iterator, List, Optional, Tuple

from .models import Edge, Node, Record

if TYPE_CHECKING:
    from .graph import Graph


def resolve_label(node_or_label: Any) -> Any:
    """Return the label of a node, or the argument itself if it is not a record."""
    if isinstance(node_or_label, Record):
        return node_or_label.get("label")
    return node_or_label


class GraphTraversal:
    """Neighbourhood queries for a single graph."""

    def __init__(self, graph: "Graph"):
        """
        Initialize the traversal helper.

        Args:
            graph: The graph to query
        """
        self.graph = graph

    def _endpoints(self) -> Iterator[Tuple[Edge, Any, Any]]:
        for edge in self.graph.edges:
            if "node1" not in edge or "node2" not in edge:
                continue
            yield edge, edge["node1"], edge["node2"]

    def get_node(self, node_or_label: Any) -> Optional[Node]:
        """
        Find a node by label.

        Args:
            node_or_label: A label, or a node whose label is used

        Returns:
            The first node carrying that label, or None
        """
        label = resolve_label(node_or_label)
        if label is None:
            return None
        for node in self.graph.nodes:
            if node.get("label") == label:
                return node
        return None

    def out_degree_of(self, node_or_label: Any) -> int:
        """Count edges whose ``node1`` is the node."""
        node = self.get_node(node_or_label)
        if node is None:
            return 0
        return sum(1 for _, n1, _ in self._endpoints() if n1 == node.label)

    def in_degree_of(self, node_or_label: Any) -> int:
        """Count edges whose ``node2`` is the node."""
        node = self.get_node(node_or_label)
        if node is None:
            return 0
        return sum(1 for _, _, n2 in self._endpoints() if n2 == node.label)

    def degree_of(self, node_or_label: Any) -> int:
        """
        Count edges touching the node.

        Directed graphs sum in- and out-degree. Undirected graphs count each
        edge with either endpoint on the node once.
        """
        if self.graph.directed:
            return self.in_degree_of(node_or_label) + self.out_degree_of(node_or_label)

        node = self.get_node(node_or_label)
        if node is None:
            return 0
        label = node.label
        return sum(1 for _, n1, n2 in self._endpoints() if label in (n1, n2))

    def get_neighbours(self, node_or_label: Any) -> List[Node]:
        """
        Return the nodes adjacent to the node.

        Directed graphs follow edges from ``node1`` to ``node2``. Undirected
        graphs take the other endpoint of every edge touching the node. Each
        neighbour appears once, in the order its first connecting edge appears.

        Args:
            node_or_label: A label, or a node whose label is used

        Returns:
            List of neighbour nodes, empty if the node is unknown
        """
        node = self.get_node(node_or_label)
        if node is None:
            return []
        label = node.label
        directed = self.graph.directed

        neighbours: List[Node] = []
        for _, n1, n2 in self._endpoints():
            if n1 == label:
                other = n2
            elif n2 == label and not directed:
                other = n1
            else:
                continue

            neighbour = self.get_node(other)
            if neighbour is None:
                continue
            if not any(neighbour is seen for seen in neighbours):
                neighbours.append(neighbour)
        return neighbours
