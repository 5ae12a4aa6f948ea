"""
Record collections for the graph system.

This module provides the ordered containers holding a graph's nodes and edges.
A collection stores records as a list (duplicates allowed) but its set-algebra
methods compare records by value (see ``Record`` equality) with multiset
semantics:

- union: ordered, de-duplicated ``A ++ B``
- intersection: ``min(count_A, count_B)`` copies, in A's order
- concat: ``A ++ B`` with every duplicate kept
- difference: one-for-one cancellation of A's elements against B
- symmetric difference: ``(A - B) ++ (B - A)``, the multiset symmetric
  difference; a record common to both sides survives ``|count_A - count_B|`` times

Every algebra method returns a new collection of cloned records and leaves
both operands untouched.

A collection also owns a *defaults* mapping. Defaults fill fields missing from
existing and future records but never replace a value a record already holds.
"""

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Type, Union, overload

from ..exceptions import RecordTypeError
from .record import Edge, Node, Record, RecordLike


def _take_match(pool: List[Record], record: Record) -> bool:
    """Remove the first record equal to ``record`` from ``pool``; report if one was found."""
    for i, candidate in enumerate(pool):
        if candidate == record:
            del pool[i]
            return True
    return False


class RecordCollection:
    """
    Ordered, duplicate-permitting sequence of records with a defaults mapping.

    Attributes:
        record_type (Type[Record]): Class used to wrap inserted values
        defaults (Dict[str, Any]): Running defaults applied to every element
    """

    record_type: Type[Record] = Record

    def __init__(self, records: Optional[Iterable[RecordLike]] = None):
        """
        Initialize the collection.

        Values are wrapped without copying: a Record keeps sharing its
        attribute dict, a dict is wrapped as is.

        Args:
            records: Initial records or mappings

        Raises:
            RecordTypeError: If a value is neither a mapping nor a Record
        """
        self._items: List[Record] = [self._wrap(r) for r in (records or [])]
        self.defaults: Dict[str, Any] = {}

    def _wrap(self, value: Any) -> Record:
        if not isinstance(value, (Record, Mapping)):
            raise RecordTypeError(
                f"{value!r} is not a mapping or a {self.record_type.__name__}"
            )
        if isinstance(value, self.record_type):
            return value
        return self.record_type(value)

    def _with_defaults(self, record: Record) -> Record:
        merged = dict(self.defaults)
        merged.update(record.attrs)
        record.attrs = merged
        return record

    def set_default(self, mapping: Mapping[str, Any]) -> "RecordCollection":
        """
        Merge ``mapping`` into the defaults and reapply them to every element.

        Later calls replace earlier default values for the same key, but an
        element that already holds a key keeps its own value.

        Args:
            mapping: Field names and default values

        Returns:
            The collection itself
        """
        self.defaults.update(mapping)
        for record in self._items:
            self._with_defaults(record)
        return self

    def push(self, value: RecordLike) -> "RecordCollection":
        """
        Append a clone of ``value`` with the current defaults filled in.

        Args:
            value: A Record or a mapping of attributes

        Returns:
            The collection itself

        Raises:
            RecordTypeError: If ``value`` is neither a mapping nor a Record
        """
        if not isinstance(value, (Record, Mapping)):
            raise RecordTypeError(
                f"{value!r} is not a mapping or a {self.record_type.__name__}"
            )
        record = self._wrap(value).clone()
        self._items.append(self._with_defaults(record))
        return self

    append = push

    def extend(self, values: Iterable[RecordLike]) -> "RecordCollection":
        for value in values:
            self.push(value)
        return self

    def clone(self) -> "RecordCollection":
        """Return a deep copy: new collection, cloned records, copied defaults."""
        copy = self._new([r.clone() for r in self._items])
        copy.defaults = dict(self.defaults)
        return copy

    def to_list(self) -> List[Dict[str, Any]]:
        """Return the elements as plain attribute dicts."""
        return [r.to_dict() for r in self._items]

    def count(self, value: RecordLike) -> int:
        return sum(1 for r in self._items if r == value)

    # Set algebra

    def _new(self, records: Iterable[Record]) -> "RecordCollection":
        return type(self)(records)

    def _coerce(self, other: Iterable[RecordLike]) -> List[Record]:
        if isinstance(other, RecordCollection):
            return list(other)
        return [self._wrap(r) for r in other]

    def union(self, other: Iterable[RecordLike]) -> "RecordCollection":
        """Return every distinct record of ``self`` then ``other``, in first-seen order."""
        result: List[Record] = []
        for record in list(self._items) + self._coerce(other):
            if record not in result:
                result.append(record.clone())
        return self._new(result)

    def intersection(self, other: Iterable[RecordLike]) -> "RecordCollection":
        """Return records present in both, ``min(count_self, count_other)`` times each."""
        pool = self._coerce(other)
        return self._new(r.clone() for r in self._items if _take_match(pool, r))

    def concat(self, other: Iterable[RecordLike]) -> "RecordCollection":
        """Return ``self`` followed by ``other``, keeping duplicates."""
        return self._new(r.clone() for r in list(self._items) + self._coerce(other))

    def difference(self, other: Iterable[RecordLike]) -> "RecordCollection":
        """Return ``self`` with each record of ``other`` cancelling one equal record."""
        pool = self._coerce(other)
        return self._new(r.clone() for r in self._items if not _take_match(pool, r))

    def symmetric_difference(self, other: Iterable[RecordLike]) -> "RecordCollection":
        """Return records of either side not cancelled by an equal record on the other side."""
        other_records = self._coerce(other)
        left = self.difference(other_records)
        right = self._new(other_records).difference(self._items)
        return self._new(list(left) + list(right))

    def __or__(self, other: Iterable[RecordLike]) -> "RecordCollection":
        return self.union(other)

    def __and__(self, other: Iterable[RecordLike]) -> "RecordCollection":
        return self.intersection(other)

    def __add__(self, other: Iterable[RecordLike]) -> "RecordCollection":
        return self.concat(other)

    def __sub__(self, other: Iterable[RecordLike]) -> "RecordCollection":
        return self.difference(other)

    def __xor__(self, other: Iterable[RecordLike]) -> "RecordCollection":
        return self.symmetric_difference(other)

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> Record: ...

    @overload
    def __getitem__(self, index: slice) -> List[Record]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Record, List[Record]]:
        return self._items[index]

    def __contains__(self, value: object) -> bool:
        return any(r == value for r in self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RecordCollection):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return len(self._items) == len(other) and all(
                a == b for a, b in zip(self._items, other)
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class NodeCollection(RecordCollection):
    """Ordered collection of a graph's nodes."""

    record_type = Node


class EdgeCollection(RecordCollection):
    """Ordered collection of a graph's edges."""

    record_type = Edge
