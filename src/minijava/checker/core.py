"""Checker core: errors, class records, per-scope context, and orchestration."""

from __future__ import annotations
import enum
import logging
from dataclasses import dataclass, field

from ..ast_nodes import ClassDecl, MethodDecl, ObjType, Program, Type, VarDecl
from .returns import Evidence

logger = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    UNKNOWN_CLASS = "UnknownClass"
    UNKNOWN_FIELD = "UnknownField"
    UNKNOWN_METHOD = "UnknownMethod"
    UNKNOWN_NAME = "UnknownName"
    ARITY_MISMATCH = "ArityMismatch"
    TYPE_MISMATCH = "TypeMismatch"
    CONDITION_NOT_BOOLEAN = "ConditionNotBoolean"
    INDEX_NOT_INTEGER = "IndexNotInteger"
    NEGATIVE_ARRAY_LENGTH = "NegativeArrayLength"
    MISSING_RETURN = "MissingReturn"
    MISSING_RETURN_VALUE = "MissingReturnValue"
    UNEXPECTED_RETURN_VALUE = "UnexpectedReturnValue"
    CYCLIC_HIERARCHY = "CyclicHierarchy"
    UNRECOGNIZED_NODE = "UnrecognizedNode"


class CheckError(Exception):
    def __init__(self, kind: ErrorKind, context: str, message: str,
                 line: int = 0, col: int = 0):
        self.kind = kind
        self.context = context
        self.message = message
        self.line = line
        self.col = col
        text = f"(In {context}) {message}"
        if line:
            text += f" at {line}:{col}"
        super().__init__(text)


@dataclass
class ClassInfo:
    """One declared class, linked to its parent by name through the class table."""
    decl: ClassDecl
    parent: str | None = None
    table: dict[str, ClassInfo] = field(default=None, repr=False, compare=False)

    @property
    def name(self) -> str:
        return self.decl.name

    @property
    def type(self) -> ObjType:
        return ObjType(self.decl.name)

    def parent_info(self) -> ClassInfo | None:
        if self.parent is None:
            return None
        return self.table.get(self.parent)

    def find_method(self, name: str) -> MethodDecl | None:
        """Find a method here or in the nearest ancestor that declares it."""
        info = self
        while info is not None:
            for method in info.decl.methods:
                if method.name == name:
                    return method
            info = info.parent_info()
        return None

    def find_field(self, name: str) -> VarDecl | None:
        """Find a field here or in the nearest ancestor that declares it."""
        info = self
        while info is not None:
            for fld in info.decl.fields:
                if fld.name == name:
                    return fld
            info = info.parent_info()
        return None

    def ancestors(self):
        """Yield the names of the parent chain, nearest first."""
        info = self.parent_info()
        while info is not None:
            yield info.name
            info = info.parent_info()


@dataclass
class CheckedProgram:
    program: Program
    class_table: dict[str, ClassInfo]
    class_order: list[str] = field(default_factory=list)


class CheckerBase:
    def __init__(self):
        self.class_table: dict[str, ClassInfo] = {}
        self.type_env: dict[str, Type] = {}
        self.object_class_env: dict[str, str] = {}
        self.current_class: ClassInfo | None = None
        self.current_method: MethodDecl | None = None
        self.return_evidence: list[Evidence] = []

    def check(self, program: Program) -> CheckedProgram:
        """Check a whole program, raising CheckError on the first failure."""
        self.class_table = {}
        ordered = self._order_classes(program.classes)
        logger.debug("class order: %s", ", ".join(c.name for c in ordered))
        self._build_class_table(ordered)
        for decl in ordered:
            self._check_class(decl)
        logger.info("checked %d class(es): ok", len(ordered))
        return CheckedProgram(
            program=program,
            class_table=self.class_table,
            class_order=[c.name for c in ordered],
        )

    def _enter_class(self, info: ClassInfo):
        self.current_class = info
        self.current_method = None
        self.type_env.clear()
        self.object_class_env.clear()

    def _enter_method(self, method: MethodDecl):
        self.current_method = method
        self.type_env.clear()
        self.object_class_env.clear()
        self.return_evidence.clear()

    def _error(self, kind: ErrorKind, context: str, msg: str, node=None):
        line = getattr(node, 'line', 0) if node is not None else 0
        col = getattr(node, 'col', 0) if node is not None else 0
        raise CheckError(kind, context, msg, line, col)
