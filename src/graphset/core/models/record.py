"""
Record models for the graph system.

A record is an attribute bag: a mapping from field name to a scalar value
(integer, float, boolean or string). Nodes and edges are both records. Two
records are equal when they hold the same keys and, under every key, values of
the same type that compare equal. ``True`` and ``1`` are different values, as
are ``1`` and ``1.0``. Key order and the record's position in a collection play
no part in equality.
"""

from copy import deepcopy
from typing import Any, Dict, ItemsView, Iterator, KeysView, Mapping, Optional, Union

from ..exceptions import RecordTypeError

RecordLike = Union["Record", Mapping[str, Any]]


def same_attrs(left: Mapping[str, Any], right: Mapping[str, Any]) -> bool:
    """Compare two attribute mappings key by key with strict value types."""
    if left.keys() != right.keys():
        return False
    for key, value in left.items():
        other = right[key]
        if type(value) is not type(other) or value != other:
            return False
    return True


class Record:
    """
    Attribute-bearing entity wrapping a mapping of field names to values.

    Constructing a record from another record re-wraps the same attribute
    dict. Use ``clone()`` when an independent copy is needed.

    Indexing a missing field (``record["x"]``) raises ``KeyError`` like a
    dict; ``get()`` returns ``None`` instead.

    Attributes:
        attrs (Dict[str, Any]): The underlying attribute mapping
    """

    __slots__ = ("attrs",)

    def __init__(self, attrs: Optional[RecordLike] = None):
        if attrs is None:
            self.attrs: Dict[str, Any] = {}
        elif isinstance(attrs, Record):
            self.attrs = attrs.attrs
        elif isinstance(attrs, dict):
            self.attrs = attrs
        elif isinstance(attrs, Mapping):
            self.attrs = dict(attrs)
        else:
            raise RecordTypeError(f"{attrs!r} is not a mapping or a {type(self).__name__}")

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default`` if absent."""
        return self.attrs.get(key, default)

    def set(self, key: str, value: Any) -> "Record":
        """Store ``value`` under ``key`` and return the record."""
        self.attrs[key] = value
        return self

    def update(self, mapping: RecordLike) -> "Record":
        """Merge ``mapping`` into the attributes; its values win on collision."""
        if isinstance(mapping, Record):
            mapping = mapping.attrs
        self.attrs.update(mapping)
        return self

    def delete(self, key: str) -> Any:
        """Remove ``key`` and return its value (``None`` if it was absent)."""
        return self.attrs.pop(key, None)

    def keys(self) -> KeysView:
        return self.attrs.keys()

    def items(self) -> ItemsView:
        return self.attrs.items()

    def clone(self) -> "Record":
        """Return a record of the same type holding a deep copy of the attributes."""
        return type(self)(deepcopy(self.attrs))

    def to_dict(self) -> Dict[str, Any]:
        """Return the attributes as a plain dict."""
        return dict(self.attrs)

    def __getitem__(self, key: str) -> Any:
        return self.attrs[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.attrs[key] = value

    def __delitem__(self, key: str) -> None:
        del self.attrs[key]

    def __contains__(self, key: object) -> bool:
        return key in self.attrs

    def __iter__(self) -> Iterator[str]:
        return iter(self.attrs)

    def __len__(self) -> int:
        return len(self.attrs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Record):
            return same_attrs(self.attrs, other.attrs)
        if isinstance(other, Mapping):
            return same_attrs(self.attrs, other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attrs!r})"


class Node(Record):
    """
    A graph vertex.

    By convention a node carries a ``label`` field which identifies it in
    traversal queries. Nothing enforces its presence.
    """

    __slots__ = ()

    @property
    def label(self) -> Any:
        return self.attrs.get("label")


class Edge(Record):
    """
    A graph edge.

    By convention an edge carries ``node1`` and ``node2`` fields naming the
    labels of its endpoints. For directed graphs ``node1`` is the source.
    """

    __slots__ = ()

    @property
    def node1(self) -> Any:
        return self.attrs.get("node1")

    @property
    def node2(self) -> Any:
        return self.attrs.get("node2")
