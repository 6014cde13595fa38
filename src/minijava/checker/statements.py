"""Statement checking and return-evidence recording."""

from ..ast_nodes import (
    Assign, Block, BoolType, CallStmt, If, IntType, Print, Return,
    StringLiteral, While,
)
from .core import ErrorKind
from .returns import Evidence, EvidenceKind


def _returns_directly(stmt) -> bool:
    """A return, or a block with a return among its own statements."""
    if isinstance(stmt, Return):
        return True
    if isinstance(stmt, Block):
        return any(isinstance(s, Return) for s in stmt.statements)
    return False


def _nests_if(stmt) -> bool:
    """An if statement, or a block with one among its own statements."""
    if isinstance(stmt, If):
        return True
    if isinstance(stmt, Block):
        return any(isinstance(s, If) for s in stmt.statements)
    return False


class StatementsMixin:

    def _check_stmt(self, stmt):
        if isinstance(stmt, Block):
            for s in stmt.statements:
                self._check_stmt(s)
        elif isinstance(stmt, Assign):
            self._check_assign(stmt)
        elif isinstance(stmt, CallStmt):
            self._check_call(stmt, "CallStmt")
        elif isinstance(stmt, If):
            self._check_if(stmt)
        elif isinstance(stmt, While):
            self._check_while(stmt)
        elif isinstance(stmt, Print):
            self._check_print(stmt)
        elif isinstance(stmt, Return):
            self._check_return(stmt)
        else:
            self._error(ErrorKind.UNRECOGNIZED_NODE, "Stmt",
                        f"Illegal Ast Stmt: {stmt!r}", stmt)

    def _check_assign(self, stmt: Assign):
        lhs = self._check_expr(stmt.lhs)
        rhs = self._check_expr(stmt.rhs)
        if rhs is None:
            return
        if not self._assignable(lhs, rhs):
            self._error(ErrorKind.TYPE_MISMATCH, "Assign",
                        f"lhs and rhs types don't match: {self._format_type(lhs)} "
                        f"<- {self._format_type(rhs)}", stmt)

    def _check_condition(self, cond, context: str):
        t = self._check_expr(cond)
        if not isinstance(t, BoolType):
            self._error(ErrorKind.CONDITION_NOT_BOOLEAN, context,
                        f"Cond exp type is not boolean: {self._format_type(t)}", cond)

    def _branch_evidence(self, branch, plain: EvidenceKind, nested: EvidenceKind) -> Evidence:
        if _returns_directly(branch):
            return Evidence.branch(plain, True)
        if _nests_if(branch):
            return Evidence.branch(nested)
        return Evidence.branch(plain, False)

    def _check_if(self, stmt: If):
        self._check_condition(stmt.cond, "If")
        self.return_evidence.append(
            self._branch_evidence(stmt.then_stmt, EvidenceKind.IF, EvidenceKind.NESTED_IF))
        self._check_stmt(stmt.then_stmt)
        if stmt.else_stmt is not None:
            self.return_evidence.append(
                self._branch_evidence(stmt.else_stmt, EvidenceKind.ELSE, EvidenceKind.NESTED_ELSE))
            self._check_stmt(stmt.else_stmt)

    def _check_while(self, stmt: While):
        self._check_condition(stmt.cond, "While")
        if _returns_directly(stmt.body):
            self.return_evidence.append(Evidence.loop(True))
        self._check_stmt(stmt.body)

    def _check_print(self, stmt: Print):
        if stmt.arg is None or isinstance(stmt.arg, StringLiteral):
            return
        t = self._check_expr(stmt.arg)
        if not isinstance(t, (IntType, BoolType)):
            self._error(ErrorKind.TYPE_MISMATCH, "Print",
                        f"Arg type is not int, boolean, or string: {self._format_type(t)}", stmt)

    def _check_return(self, stmt: Return):
        expected = self.current_method.return_type
        if stmt.value is None:
            if expected is not None:
                self._error(ErrorKind.MISSING_RETURN_VALUE, "Return",
                            f"Missing return value of type {self._format_type(expected)}", stmt)
            return
        if expected is None:
            self._error(ErrorKind.UNEXPECTED_RETURN_VALUE, "Return",
                        "Unexpected return value", stmt)
        actual = self._check_expr(stmt.value)
        if not self._same_variant(expected, actual):
            self._error(ErrorKind.TYPE_MISMATCH, "Return",
                        f"Return type mismatch: {self._format_type(expected)} "
                        f"<- {self._format_type(actual)}", stmt)
