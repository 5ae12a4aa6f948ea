"""Field normalization across several graphs.

Before comparing nodes and edges from graphs with different schemas, every
graph can be projected onto the fields they all share. The shared fields are
sampled from the first node and first edge of each graph, so all records of a
graph are assumed to carry the same keys.
"""

from typing import List, Optional, Set

from ..graph import Graph
from ..models import Record, RecordCollection


def _common_keys(samples: List[Optional[Record]]) -> Set[str]:
    keys: Optional[Set[str]] = None
    for sample in samples:
        sample_keys = set(sample.keys()) if sample is not None else set()
        keys = sample_keys if keys is None else keys & sample_keys
    return keys or set()


def _project(collection: RecordCollection, keys: Set[str]) -> None:
    for record in collection:
        record.attrs = {k: v for k, v in record.items() if k in keys}


def keep_only_same_fields(*graphs: Graph) -> List[Graph]:
    """Return clones of ``graphs`` keeping only the node/edge fields common to all.

    The input graphs are never modified.

    Args:
        graphs: Graphs to normalize

    Returns:
        One projected clone per input graph, in the same order
    """
    clones = [g.clone() for g in graphs]

    node_keys = _common_keys([g.nodes[0] if len(g.nodes) else None for g in clones])
    edge_keys = _common_keys([g.edges[0] if len(g.edges) else None for g in clones])

    for graph in clones:
        _project(graph.nodes, node_keys)
        _project(graph.edges, edge_keys)

    return clones
