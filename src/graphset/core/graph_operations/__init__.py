"""Operations combining several graphs."""

from .combinators import intersection, union, xor
from .fields import keep_only_same_fields

__all__ = ["intersection", "union", "xor", "keep_only_same_fields"]
