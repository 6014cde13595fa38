"""Semantic checker for miniJava."""

from .core import CheckError, CheckedProgram, ClassInfo, ErrorKind
from .checker import Checker, check
from .returns import Evidence, EvidenceKind, returns_on_all_paths
from .type_utils import assignable, comparable, format_type

__all__ = [
    "Checker", "CheckError", "CheckedProgram", "ClassInfo", "ErrorKind",
    "Evidence", "EvidenceKind", "returns_on_all_paths",
    "assignable", "comparable", "format_type", "check",
]
