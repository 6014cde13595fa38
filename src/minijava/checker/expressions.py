"""Expression checking: infer a type for every expression node or fail."""

from __future__ import annotations

from ..ast_nodes import (
    ARITHMETIC_OPS, LOGICAL_OPS,
    ArrayElem, ArrayType, Binop, BoolLiteral, BoolType, Call, FieldAccess,
    Identifier, IntLiteral, IntType, NewArray, NewObject, ObjType,
    StringLiteral, This, Type, Unop,
)
from .core import ErrorKind


class ExpressionsMixin:

    def _check_expr(self, expr) -> Type | None:
        """Infer the type of expr. String literals have no type (None)."""
        if isinstance(expr, IntLiteral):
            return IntType()
        elif isinstance(expr, BoolLiteral):
            return BoolType()
        elif isinstance(expr, StringLiteral):
            return None
        elif isinstance(expr, Identifier):
            return self._check_identifier(expr)
        elif isinstance(expr, This):
            return self.current_class.type
        elif isinstance(expr, Binop):
            return self._check_binop(expr)
        elif isinstance(expr, Unop):
            return self._check_unop(expr)
        elif isinstance(expr, Call):
            return self._check_call(expr, "Call")
        elif isinstance(expr, NewArray):
            return self._check_new_array(expr)
        elif isinstance(expr, ArrayElem):
            return self._check_array_elem(expr)
        elif isinstance(expr, NewObject):
            if expr.name not in self.class_table:
                self._error(ErrorKind.UNKNOWN_CLASS, "NewObject",
                            f"Can't find class {expr.name}", expr)
            return ObjType(expr.name)
        elif isinstance(expr, FieldAccess):
            return self._check_field_access(expr)
        self._error(ErrorKind.UNRECOGNIZED_NODE, "Exp",
                    f"Exp node not recognized: {expr!r}", expr)

    def _lookup_variable(self, name: str) -> Type | None:
        """Resolve a param/local first, then a field of the current class chain."""
        if name in self.type_env:
            return self.type_env[name]
        fld = self.current_class.find_field(name)
        if fld is not None:
            return fld.type
        return None

    def _check_identifier(self, expr: Identifier) -> Type:
        t = self._lookup_variable(expr.name)
        if t is None:
            self._error(ErrorKind.UNKNOWN_NAME, "Identifier",
                        f"Can't find variable {expr.name}", expr)
        return t

    def _check_binop(self, expr: Binop) -> Type:
        left = self._check_expr(expr.left)
        right = self._check_expr(expr.right)
        if not self._comparable(left, right):
            self._error(ErrorKind.TYPE_MISMATCH, "Binop",
                        f"Operand types don't match: {self._format_type(left)} "
                        f"{expr.op} {self._format_type(right)}", expr)
        if expr.op in ARITHMETIC_OPS:
            if not isinstance(left, IntType):
                self._error(ErrorKind.TYPE_MISMATCH, "Binop",
                            f"Bad operand types for binary operator {expr.op}: "
                            f"{self._format_type(left)} and {self._format_type(right)}", expr)
            return IntType()
        if expr.op in LOGICAL_OPS and isinstance(left, IntType):
            self._error(ErrorKind.TYPE_MISMATCH, "Binop",
                        f"Bad operand types for binary operator {expr.op}: "
                        f"{self._format_type(left)} and {self._format_type(right)}", expr)
        return BoolType()

    def _check_unop(self, expr: Unop) -> Type:
        operand = self._check_expr(expr.operand)
        if expr.op == "-" and isinstance(operand, IntType):
            return IntType()
        if expr.op == "!" and isinstance(operand, BoolType):
            return BoolType()
        self._error(ErrorKind.TYPE_MISMATCH, "Unop",
                    f"Bad operand type: {expr.op} {self._format_type(operand)}", expr)

    def _resolve_receiver(self, obj, context: str):
        """Return the ClassInfo a call's receiver names."""
        if isinstance(obj, This):
            return self.current_class
        if not isinstance(obj, Identifier):
            self._error(ErrorKind.UNKNOWN_CLASS, context,
                        f"Can't resolve the class of receiver {obj!r}", obj)
        class_name = self.object_class_env.get(obj.name)
        if class_name is None or class_name not in self.class_table:
            self._error(ErrorKind.UNKNOWN_CLASS, context,
                        f"Class of {obj.name} does not exist", obj)
        return self.class_table[class_name]

    def _check_call(self, node, context: str) -> Type | None:
        """Resolve a method call; shared by Call expressions and CallStmt."""
        info = self._resolve_receiver(node.obj, context)
        method = info.find_method(node.name)
        if method is None:
            self._error(ErrorKind.UNKNOWN_METHOD, context,
                        f"Can't find method {node.name} in class {info.name}", node)
        if len(method.params) != len(node.args):
            self._error(ErrorKind.ARITY_MISMATCH, context,
                        f"Param and arg counts don't match: "
                        f"{len(method.params)} vs. {len(node.args)}", node)
        for param, arg in zip(method.params, node.args):
            arg_type = self._check_expr(arg)
            if isinstance(param.type, ObjType) and isinstance(arg_type, ObjType):
                for name in (param.type.name, arg_type.name):
                    if name not in self.class_table:
                        self._error(ErrorKind.UNKNOWN_CLASS, context,
                                    f"Can't find class {name}", arg)
            if not self._assignable(param.type, arg_type):
                self._error(ErrorKind.TYPE_MISMATCH, context,
                            f"Param and arg types don't match: "
                            f"{self._format_type(param.type)} vs. "
                            f"{self._format_type(arg_type)}", arg)
        return method.return_type

    def _check_new_array(self, expr: NewArray) -> Type:
        if not isinstance(expr.elem, (IntType, BoolType)):
            self._error(ErrorKind.TYPE_MISMATCH, "NewArray",
                        f"Array element type must be int or boolean, "
                        f"not {self._format_type(expr.elem)}", expr)
        if expr.length < 0:
            self._error(ErrorKind.NEGATIVE_ARRAY_LENGTH, "NewArray",
                        f"Array length cannot be negative: {expr.length}", expr)
        return ArrayType(expr.elem)

    def _check_array_elem(self, expr: ArrayElem) -> Type:
        if not isinstance(expr.array, Identifier):
            self._error(ErrorKind.TYPE_MISMATCH, "ArrayElem",
                        "Array expression must be a variable name", expr)
        name = expr.array.name
        array_type = self._lookup_variable(name)
        if array_type is None:
            self._error(ErrorKind.UNKNOWN_NAME, "ArrayElem",
                        f"Array does not exist: {name}", expr)
        if not isinstance(array_type, ArrayType):
            self._error(ErrorKind.TYPE_MISMATCH, "ArrayElem",
                        f"Object is not array: {name} is {self._format_type(array_type)}", expr)
        if not isinstance(expr.index, IntLiteral):
            index = self._check_expr(expr.index)
            if not isinstance(index, IntType):
                self._error(ErrorKind.INDEX_NOT_INTEGER, "ArrayElem",
                            f"Index is not integer: {self._format_type(index)}", expr.index)
        return array_type.elem

    def _check_field_access(self, expr: FieldAccess) -> Type:
        obj_type = self._check_expr(expr.obj)
        if not isinstance(obj_type, ObjType):
            self._error(ErrorKind.TYPE_MISMATCH, "FieldAccess",
                        f"Object is not of ObjType: {self._format_type(obj_type)}", expr)
        info = self.class_table.get(obj_type.name)
        if info is None:
            self._error(ErrorKind.UNKNOWN_CLASS, "FieldAccess",
                        f"Object class does not exist: {obj_type.name}", expr)
        fld = info.find_field(expr.name)
        if fld is None:
            self._error(ErrorKind.UNKNOWN_FIELD, "FieldAccess",
                        f"Can't find field {expr.name} in class {obj_type.name}", expr)
        return fld.type
