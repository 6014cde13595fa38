"""Tests for return-evidence recording and reduction."""

import pytest

from minijava.ast_nodes import (
    Assign, Block, BoolLiteral, ClassDecl, Identifier, If, IntLiteral, IntType,
    MethodDecl, Print, Program, Return, VarDecl, While,
)
from minijava.checker import Checker, Evidence, EvidenceKind, returns_on_all_paths

RET = Evidence.ret()
IF_T = Evidence.branch(EvidenceKind.IF, True)
IF_F = Evidence.branch(EvidenceKind.IF, False)
ELSE_T = Evidence.branch(EvidenceKind.ELSE, True)
ELSE_F = Evidence.branch(EvidenceKind.ELSE, False)
NESTED_IF = Evidence.branch(EvidenceKind.NESTED_IF)
NESTED_ELSE = Evidence.branch(EvidenceKind.NESTED_ELSE)


class TestReduction:
    @pytest.mark.parametrize("evidence,expected", [
        ([], False),
        ([RET], True),
        ([IF_T], False),
        ([IF_T, ELSE_T], True),
        ([IF_F, ELSE_T], False),
        ([IF_T, ELSE_F], False),
        ([RET, IF_F], False),
        ([IF_T, ELSE_F, RET], True),
        ([Evidence.loop(True)], False),
        ([RET, Evidence.loop(True)], False),
        ([Evidence.loop(True), RET], True),
        ([Evidence.loop(False)], True),
        ([IF_T, NESTED_ELSE, IF_T, ELSE_T], True),
        ([IF_T, NESTED_ELSE, IF_T], False),
        ([NESTED_IF, IF_T, ELSE_T, ELSE_T], True),
    ])
    def test_verdict(self, evidence, expected):
        assert returns_on_all_paths(evidence) is expected


def checked_evidence(*body):
    """Check one int method and return the evidence it recorded."""
    method = MethodDecl(return_type=IntType(), name="m", statements=list(body),
                        locals=[VarDecl(IntType(), "x")])
    checker = Checker()
    checker.check(Program(classes=[ClassDecl(name="K", methods=[method])]))
    return list(checker.return_evidence)


T = BoolLiteral(True)


def one():
    return IntLiteral(1)


class TestRecording:
    def test_if_else(self):
        assert checked_evidence(If(T, Return(one()), Return(one()))) == [IF_T, ELSE_T]

    def test_top_level_return(self):
        assert checked_evidence(Print(one()), Return(one())) == [RET]

    def test_loop_without_return_records_nothing(self):
        body = Block([Assign(Identifier("x"), one())])
        assert checked_evidence(While(T, body), Return(one())) == [RET]

    def test_loop_with_return(self):
        ev = checked_evidence(While(T, Block([Return(one())])), Return(one()))
        assert ev == [Evidence.loop(True), RET]

    def test_else_if_branch(self):
        stmt = If(T, Return(one()), If(T, Return(one()), Return(one())))
        assert checked_evidence(stmt) == [IF_T, NESTED_ELSE, IF_T, ELSE_T]

    def test_block_with_nested_if(self):
        stmt = If(T, Block([If(T, Return(one()), Return(one()))]), Return(one()))
        assert checked_evidence(stmt) == [NESTED_IF, IF_T, ELSE_T, ELSE_T]

    def test_branch_return_wins_over_nested_if(self):
        stmt = If(T, Block([If(T, Print(one())), Return(one())]), Return(one()))
        assert checked_evidence(stmt) == [IF_T, IF_F, ELSE_T]
