"""Type utilities: assignability, comparability, and formatting for messages.

Arrays are compatible structurally (element types must be compatible),
objects nominally (the destination class must be the source class or one
of its ancestors). Primitives are only compatible with themselves.
"""

from __future__ import annotations
from typing import Mapping

from ..ast_nodes import ArrayType, BoolType, IntType, ObjType


def format_type(t) -> str:
    """Format a type for error messages."""
    if t is None:
        return "<untyped>"
    if isinstance(t, IntType):
        return "int"
    if isinstance(t, BoolType):
        return "boolean"
    if isinstance(t, ArrayType):
        return f"{format_type(t.elem)}[]"
    if isinstance(t, ObjType):
        return t.name
    return repr(t)


def is_subclass(child: str, ancestor: str, class_table: Mapping) -> bool:
    """Check if ancestor appears on child's parent chain."""
    info = class_table.get(child)
    if info is None:
        return False
    return any(name == ancestor for name in info.ancestors())


def assignable(dst, src, class_table: Mapping) -> bool:
    """Check if a src value can be stored in a dst slot."""
    if isinstance(dst, IntType) and isinstance(src, IntType):
        return True
    if isinstance(dst, BoolType) and isinstance(src, BoolType):
        return True
    if isinstance(dst, ArrayType) and isinstance(src, ArrayType):
        return assignable(dst.elem, src.elem, class_table)
    if isinstance(dst, ObjType) and isinstance(src, ObjType):
        if dst.name == src.name:
            return True
        return is_subclass(src.name, dst.name, class_table)
    return False


def comparable(a, b, class_table: Mapping) -> bool:
    return assignable(a, b, class_table) or assignable(b, a, class_table)


class TypeUtilsMixin:

    def _format_type(self, t) -> str:
        return format_type(t)

    def _assignable(self, dst, src) -> bool:
        return assignable(dst, src, self.class_table)

    def _comparable(self, a, b) -> bool:
        return comparable(a, b, self.class_table)

    def _same_variant(self, a, b) -> bool:
        return a is not None and b is not None and type(a) is type(b)
