"""N-ary set operations over graphs.

``intersection``, ``union`` and ``xor`` fold the matching binary Graph operator
left to right over any number of graphs. A trailing options record (a
``GroupOptions`` or a mapping) or the ``same_fields`` keyword enables the field
normalization pass first.
"""

import logging
from dataclasses import replace
from functools import reduce
from typing import Any, Callable, Mapping, Optional

from ..graph import Graph
from ..options import GroupOptions
from .fields import keep_only_same_fields

logger = logging.getLogger(__name__)

BinaryOp = Callable[[Graph, Graph], Optional[Graph]]


def _perform_group_op(op: BinaryOp, args: tuple, same_fields: Optional[bool]) -> Optional[Graph]:
    """Fold ``op`` over the graphs in ``args``.

    Returns None when no graph is given or when an argument is not a Graph.
    """
    graphs = list(args)
    if not graphs:
        return None

    options = GroupOptions()
    if isinstance(graphs[-1], (GroupOptions, Mapping)):
        if len(graphs) == 1:
            return None
        options = GroupOptions.from_value(graphs.pop())
    if same_fields is not None:
        options = replace(options, same_fields=same_fields)

    if not all(isinstance(g, Graph) for g in graphs):
        return None

    if options.same_fields:
        graphs = keep_only_same_fields(*graphs)

    logger.debug(f"Folding {op.__name__} over {len(graphs)} graphs")
    return reduce(op, graphs)


def intersection(*graphs: Any, same_fields: Optional[bool] = None) -> Optional[Graph]:
    """Return a new Graph which is the intersection of every given graph.

    Each node of the result is in every given graph (idem for edges).

    Args:
        graphs: Graphs, optionally followed by an options record
        same_fields: Compare nodes/edges only on the fields every graph has

    Returns:
        The intersection, or None for no graphs or a non-Graph argument
    """
    return _perform_group_op(Graph.intersect, graphs, same_fields)


def union(*graphs: Any, same_fields: Optional[bool] = None) -> Optional[Graph]:
    """Return a new Graph which is the union of every given graph.

    Each node of the result is in at least one given graph (idem for edges).
    """
    return _perform_group_op(Graph.union, graphs, same_fields)


def xor(*graphs: Any, same_fields: Optional[bool] = None) -> Optional[Graph]:
    """Return the symmetric difference folded over every given graph."""
    return _perform_group_op(Graph.symmetric_difference, graphs, same_fields)
