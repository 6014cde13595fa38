"""Class table construction: parent-first ordering and ClassInfo records."""

from ..ast_nodes import ClassDecl
from .core import ClassInfo, ErrorKind


class ClassTableMixin:

    def _order_classes(self, classes: list[ClassDecl]) -> list[ClassDecl]:
        """Order declarations so every class follows its parent.

        Rescans the remaining declarations until all are placed; a scan
        that places nothing means a missing parent or a cycle.
        """
        ordered: list[ClassDecl] = []
        placed: set[str] = set()
        remaining = list(classes)
        while remaining:
            progress = False
            for decl in list(remaining):
                if decl.parent is None or decl.parent in placed:
                    ordered.append(decl)
                    placed.add(decl.name)
                    remaining.remove(decl)
                    progress = True
            if not progress:
                self._stalled_hierarchy(remaining)
        return ordered

    def _stalled_hierarchy(self, remaining: list[ClassDecl]):
        declared = {c.name for c in remaining}
        for decl in remaining:
            if decl.parent not in declared:
                self._error(ErrorKind.UNKNOWN_CLASS, "ClassDecl",
                            f"Can't find parent class {decl.parent} of {decl.name}", decl)
        names = ", ".join(c.name for c in remaining)
        self._error(ErrorKind.CYCLIC_HIERARCHY, "ClassDecl",
                    f"Cyclic class hierarchy among: {names}", remaining[0])

    def _build_class_table(self, ordered: list[ClassDecl]):
        for decl in ordered:
            self.class_table[decl.name] = ClassInfo(decl, decl.parent, self.class_table)
