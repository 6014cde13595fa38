"""Checker assembly: combines all checking mixins into the final Checker class."""

from ..ast_nodes import Program
from .core import CheckError, CheckerBase
from .class_table import ClassTableMixin
from .declarations import DeclarationsMixin
from .statements import StatementsMixin
from .expressions import ExpressionsMixin
from .type_utils import TypeUtilsMixin


class Checker(
    TypeUtilsMixin,
    ExpressionsMixin,
    StatementsMixin,
    DeclarationsMixin,
    ClassTableMixin,
    CheckerBase,
):
    """Semantic checker for miniJava programs."""
    pass


def check(program: Program) -> CheckError | None:
    """Check a program; return None on success or the first error found."""
    try:
        Checker().check(program)
    except CheckError as e:
        return e
    return None
