"""GDF (Graph Data Format) reader and writer.

A GDF document has a node section and an optional edge section, each opened by
a header line listing typed columns::

    nodedef>label VARCHAR,id INT,visible BOOLEAN
    foo,2,true
    bar,1,false
    edgedef>node1 VARCHAR,node2 VARCHAR,weight DOUBLE
    foo,bar,0.5

Column types are matched case-insensitively. The integer family (``int``,
``integer``, ``tinyint``, ``smallint``, ``bigint``) gives ints, ``float`` and
``double`` give floats and ``boolean`` gives bools. Anything else stays a
string. A boolean is ``False`` only when its text contains ``null`` or
``false``; every other text, the empty string included, is ``True``.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from ..core.exceptions import GDFParseError, SerializationError
from ..core.graph import Graph
from ..core.models import RecordCollection

logger = logging.getLogger(__name__)

NODES_HEADER = "nodedef>"
EDGES_HEADER = "edgedef>"

INT_TYPES = {"int", "integer", "tinyint", "smallint", "bigint"}
FLOAT_TYPES = {"float", "double"}

_INT_PREFIX = re.compile(r"\s*[-+]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")
_FALSY = re.compile(r"null|false", re.IGNORECASE)

INT32_MAX = 2**31 - 1

ColumnDef = Tuple[str, Optional[str]]


def read_def(definition: str) -> ColumnDef:
    """Split a column definition into its name and normalized type.

    The last whitespace-separated token is the type; the remaining tokens form
    the name. A definition with a single token has no type.

    Returns:
        ``(name, type)`` where type is ``"int"``, ``"float"``, ``"boolean"``,
        the raw type text for other types, or None
    """
    tokens = definition.split()
    if len(tokens) < 2:
        return (tokens[0] if tokens else "", None)

    *name, value_type = tokens
    lowered = value_type.lower()
    if lowered in INT_TYPES:
        value_type = "int"
    elif lowered in FLOAT_TYPES:
        value_type = "float"
    elif lowered == "boolean":
        value_type = "boolean"
    return " ".join(name), value_type


def parse_field(value: str, value_type: Optional[str]) -> Any:
    """Convert raw field text according to its column type."""
    if value_type == "int":
        match = _INT_PREFIX.match(value)
        return int(match.group()) if match else 0
    if value_type == "float":
        match = _FLOAT_PREFIX.match(value)
        return float(match.group()) if match else 0.0
    if value_type == "boolean":
        return not _FALSY.search(value)
    return value


def _read_defs(header: str, prefix: str) -> List[ColumnDef]:
    return [read_def(d) for d in header[len(prefix):].strip().split(",") if d.strip()]


def _read_rows(lines: List[str], defs: List[ColumnDef]) -> List[Dict[str, Any]]:
    rows = []
    for line in lines:
        if not line.strip():
            continue
        row = {}
        for value, (name, value_type) in zip(line.split(","), defs):
            row[name] = parse_field(value, value_type)
        rows.append(row)
    return rows


def parse(text: str) -> Graph:
    """Parse GDF text into a Graph.

    Args:
        text: Whole GDF document

    Returns:
        The parsed graph; its edges are empty when there is no edge section

    Raises:
        GDFParseError: If the text has no ``nodedef>`` header
    """
    lines = text.splitlines()

    nodes_index = next((i for i, line in enumerate(lines) if line.startswith(NODES_HEADER)), None)
    if nodes_index is None:
        raise GDFParseError(f"Missing '{NODES_HEADER}' header line")
    edges_index = next(
        (i for i, line in enumerate(lines) if i > nodes_index and line.startswith(EDGES_HEADER)),
        None,
    )

    node_end = edges_index if edges_index is not None else len(lines)
    node_defs = _read_defs(lines[nodes_index], NODES_HEADER)
    nodes = _read_rows(lines[nodes_index + 1 : node_end], node_defs)

    edges: List[Dict[str, Any]] = []
    if edges_index is not None:
        edge_defs = _read_defs(lines[edges_index], EDGES_HEADER)
        edges = _read_rows(lines[edges_index + 1 :], edge_defs)

    logger.debug(f"Parsed GDF document with {len(nodes)} nodes and {len(edges)} edges")
    return Graph(nodes, edges)


def load(path: str, encoding: str = "utf-8") -> Graph:
    """Read and parse a GDF file."""
    try:
        with open(path, "r", encoding=encoding) as f:
            text = f.read()
    except OSError as e:
        logger.error(f"Failed to read GDF file {path}: {str(e)}")
        raise SerializationError(f"Cannot read {path}: {e}") from e
    return parse(text)


def _column_type(value: Any, gephi: bool) -> str:
    if isinstance(value, bool):
        return "BOOLEAN"
    if isinstance(value, int):
        return "BIGINT" if gephi and abs(value) > INT32_MAX else "INT"
    if isinstance(value, float):
        return "DOUBLE"
    return "VARCHAR"


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _unparse_section(prefix: str, records: RecordCollection, gephi: bool) -> List[str]:
    if not len(records):
        return [prefix]
    first = records[0]
    columns = list(first.keys())
    header = ",".join(f"{k} {_column_type(first[k], gephi)}" for k in columns)
    lines = [prefix + header]
    for record in records:
        lines.append(",".join(_format_value(record.get(k)) for k in columns))
    return lines


def unparse(graph: Graph, gephi: bool = False) -> str:
    """Render a Graph as GDF text.

    Columns are taken from the first node (first edge) and typed from its
    values. The edge section is only written when the graph has edges.

    Args:
        graph: Graph to render
        gephi: Type integers beyond 32 bits as ``BIGINT``

    Returns:
        The GDF document, newline-terminated
    """
    lines = _unparse_section(NODES_HEADER, graph.nodes, gephi)
    if len(graph.edges):
        lines.extend(_unparse_section(EDGES_HEADER, graph.edges, gephi))
    return "\n".join(lines) + "\n"


def dump(graph: Graph, path: str, gephi: bool = False, encoding: str = "utf-8") -> None:
    """Write a Graph to a GDF file."""
    try:
        with open(path, "w", encoding=encoding) as f:
            f.write(unparse(graph, gephi=gephi))
    except OSError as e:
        logger.error(f"Failed to write GDF file {path}: {str(e)}")
        raise SerializationError(f"Cannot write {path}: {e}") from e
