"""Definite-return analysis over the evidence collected while checking a method.

Evidence is recorded in program order as statements are checked:

- RETURN for each return statement directly in the method body,
- WHILE for a loop whose body holds a return,
- IF / ELSE for the branches of an if statement, flagged with whether
  the branch is a return or a block with a return among its statements,
- NESTED_IF / NESTED_ELSE instead, when the branch is itself an if
  statement or a block holding one (and no return).

The reduction is a linear scan, not a reachability analysis. A return
inside a loop body makes the verdict false, not true.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Iterable


class EvidenceKind(enum.Enum):
    RETURN = "return"
    WHILE = "while"
    IF = "if"
    ELSE = "else"
    NESTED_IF = "nested-if"
    NESTED_ELSE = "nested-else"


@dataclass(frozen=True)
class Evidence:
    kind: EvidenceKind
    has_return: bool = False

    @classmethod
    def ret(cls) -> Evidence:
        return cls(EvidenceKind.RETURN, True)

    @classmethod
    def loop(cls, body_has_return: bool) -> Evidence:
        return cls(EvidenceKind.WHILE, body_has_return)

    @classmethod
    def branch(cls, kind: EvidenceKind, has_return: bool = False) -> Evidence:
        return cls(kind, has_return)


def returns_on_all_paths(evidence: Iterable[Evidence]) -> bool:
    """Reduce an evidence list to the method's definite-return verdict."""
    success = False
    pending_if_return = False
    pending_nested_return = False
    for ev in evidence:
        if ev.kind is EvidenceKind.RETURN:
            success = True
        elif ev.kind is EvidenceKind.WHILE:
            success = not ev.has_return
        elif ev.kind in (EvidenceKind.NESTED_IF, EvidenceKind.NESTED_ELSE):
            pending_nested_return = True
        elif ev.kind is EvidenceKind.IF:
            if not ev.has_return:
                success = False
            elif pending_nested_return:
                pending_nested_return = True
            else:
                pending_if_return = True
        elif ev.kind is EvidenceKind.ELSE:
            if not ev.has_return:
                success = False
            elif pending_if_return:
                success = True
                pending_if_return = False
            elif pending_nested_return:
                pending_if_return = True
    return success
