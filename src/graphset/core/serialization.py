"""Graph serialization keyed by file extension.

Serializers turn a Graph into text and back. They are registered in
``SerializationRegistry`` under one or more file extensions; ``write_graph``
and ``read_graph`` resolve the serializer from the filename at call time.

Registered by default:

- ``yml``, ``yaml`` and filenames without extension: YAML structured dump
- ``json``: JSON structured dump
- ``gdf``: GDF tabular text format

A structured dump is ``{"nodes": [...], "edges": [...]}`` where every entry is
the plain attribute mapping of a node or edge.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Type, Union

import yaml

from ..io import gdf
from ..utils.validation import validate_graph_document
from .exceptions import SerializationError, UnsupportedFormatError, ValidationError
from .graph import Graph
from .options import WriteOptions

logger = logging.getLogger(__name__)

OptionsLike = Optional[Union[WriteOptions, Mapping[str, Any]]]


class GraphSerializer(ABC):
    @abstractmethod
    def serialize(self, graph: Graph, options: WriteOptions) -> str:
        pass

    @abstractmethod
    def deserialize(self, data: str) -> Graph:
        pass


def _graph_from_document(document: Any) -> Graph:
    result = validate_graph_document(document)
    if not result.is_valid:
        raise ValidationError("; ".join(result.errors))
    return Graph(document["nodes"], document["edges"], document.get("attrs"))


class YAMLGraphSerializer(GraphSerializer):
    def serialize(self, graph: Graph, options: WriteOptions) -> str:
        return yaml.safe_dump(
            graph.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=options.indent,
        )

    def deserialize(self, data: str) -> Graph:
        try:
            document = yaml.safe_load(data)
        except yaml.YAMLError as e:
            raise SerializationError(f"Invalid YAML document: {e}") from e
        return _graph_from_document(document)


class JSONGraphSerializer(GraphSerializer):
    def serialize(self, graph: Graph, options: WriteOptions) -> str:
        return json.dumps(graph.to_dict(), indent=options.indent)

    def deserialize(self, data: str) -> Graph:
        try:
            document = json.loads(data)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Invalid JSON document: {e}") from e
        return _graph_from_document(document)


class GDFGraphSerializer(GraphSerializer):
    def serialize(self, graph: Graph, options: WriteOptions) -> str:
        return gdf.unparse(graph, gephi=options.gephi)

    def deserialize(self, data: str) -> Graph:
        return gdf.parse(data)


class SerializationRegistry:
    _serializers: Dict[str, Type[GraphSerializer]] = {}

    @classmethod
    def register(cls, extension: str, serializer: Type[GraphSerializer]):
        cls._serializers[extension.lower().lstrip(".")] = serializer

    @classmethod
    def unregister(cls, extension: str) -> None:
        cls._serializers.pop(extension.lower().lstrip("."), None)

    @classmethod
    def extensions(cls):
        return sorted(cls._serializers)

    @classmethod
    def get_serializer(cls, extension: str) -> GraphSerializer:
        key = extension.lower().lstrip(".")
        if key not in cls._serializers:
            raise UnsupportedFormatError(f"No handler for {extension} file extension.")
        return cls._serializers[key]()


def file_extension(filename: str) -> str:
    """Return the lower-cased extension of ``filename`` without the dot ("" if none)."""
    return os.path.splitext(filename)[1].lstrip(".").lower()


def write_graph(graph: Graph, filename: str, options: OptionsLike = None) -> None:
    """Write ``graph`` to ``filename`` using the serializer registered for its extension.

    Raises:
        UnsupportedFormatError: If no serializer handles the extension; no file is created
        SerializationError: If the file cannot be written
    """
    opts = WriteOptions.from_value(options)
    serializer = SerializationRegistry.get_serializer(file_extension(filename))
    data = serializer.serialize(graph, opts)
    try:
        with open(filename, "w", encoding=opts.encoding) as f:
            f.write(data)
    except OSError as e:
        logger.error(f"Failed to write graph to {filename}: {str(e)}")
        raise SerializationError(f"Cannot write {filename}: {e}") from e
    logger.debug(
        f"Wrote graph with {len(graph.nodes)} nodes and {len(graph.edges)} edges to {filename}"
    )


def read_graph(filename: str, encoding: str = "utf-8") -> Graph:
    """Read a graph from ``filename`` using the serializer registered for its extension.

    Raises:
        UnsupportedFormatError: If no serializer handles the extension
        SerializationError: If the file cannot be read or decoded
        ValidationError: If a structured document has the wrong layout
    """
    serializer = SerializationRegistry.get_serializer(file_extension(filename))
    try:
        with open(filename, "r", encoding=encoding) as f:
            data = f.read()
    except OSError as e:
        logger.error(f"Failed to read graph from {filename}: {str(e)}")
        raise SerializationError(f"Cannot read {filename}: {e}") from e
    graph = serializer.deserialize(data)
    logger.debug(f"Read graph with {len(graph.nodes)} nodes and {len(graph.edges)} edges")
    return graph


# Register default serializers
SerializationRegistry.register("", YAMLGraphSerializer)
SerializationRegistry.register("yml", YAMLGraphSerializer)
SerializationRegistry.register("yaml", YAMLGraphSerializer)
SerializationRegistry.register("json", JSONGraphSerializer)
SerializationRegistry.register("gdf", GDFGraphSerializer)
