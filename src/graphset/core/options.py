"""
Option records accepted by graph operations.

Options can be passed either as the dataclasses below or as plain mappings,
which are converted with ``from_value``. Unknown mapping keys are ignored.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union


@dataclass
class GroupOptions:
    """
    Configuration for N-ary graph operations.

    Attributes:
        same_fields: Project every graph onto the node/edge fields shared by all
            graphs before combining them
    """

    same_fields: bool = False

    @classmethod
    def from_value(
        cls, value: Optional[Union["GroupOptions", Mapping[str, Any]]] = None
    ) -> "GroupOptions":
        """Build options from ``None``, a mapping or an existing instance."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in value.items() if k in known})


@dataclass
class WriteOptions:
    """
    Configuration for writing graphs to files.

    Attributes:
        gephi: Emit GDF column types understood by Gephi (``BIGINT`` for large integers)
        encoding: Text encoding of the written file
        indent: Indentation used by structured dumps
    """

    gephi: bool = False
    encoding: str = "utf-8"
    indent: int = 2

    @classmethod
    def from_value(
        cls, value: Optional[Union["WriteOptions", Mapping[str, Any]]] = None
    ) -> "WriteOptions":
        """Build options from ``None``, a mapping or an existing instance."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in value.items() if k in known})
