"""Tests for type compatibility: assignable and comparable."""

import itertools

import pytest

from minijava.ast_nodes import ArrayType, BoolType, ClassDecl, IntType, ObjType, Program
from minijava.checker import Checker, assignable, comparable, format_type


@pytest.fixture(scope="module")
def class_table():
    program = Program(classes=[
        ClassDecl(name="C", parent="B"),
        ClassDecl(name="B", parent="A"),
        ClassDecl(name="A"),
        ClassDecl(name="D"),
    ])
    return Checker().check(program).class_table


INT = IntType()
BOOL = BoolType()
ALL_TYPES = [
    INT, BOOL,
    ArrayType(INT), ArrayType(BOOL), ArrayType(ArrayType(INT)),
    ObjType("A"), ObjType("B"), ObjType("C"), ObjType("D"),
]


class TestAssignable:
    @pytest.mark.parametrize("t", [INT, BOOL, ObjType("A"), ArrayType(INT)])
    def test_reflexive(self, t, class_table):
        assert assignable(t, t, class_table)

    def test_primitives_are_distinct_values(self, class_table):
        assert assignable(IntType(), IntType(), class_table)
        assert not assignable(INT, BOOL, class_table)

    def test_upcast_is_transitive(self, class_table):
        assert assignable(ObjType("A"), ObjType("C"), class_table)
        assert assignable(ObjType("B"), ObjType("C"), class_table)

    def test_no_downcast(self, class_table):
        assert not assignable(ObjType("C"), ObjType("A"), class_table)

    def test_unrelated_class(self, class_table):
        assert not assignable(ObjType("D"), ObjType("C"), class_table)
        assert not assignable(ObjType("A"), ObjType("D"), class_table)

    def test_arrays_structural(self, class_table):
        assert assignable(ArrayType(ArrayType(INT)), ArrayType(ArrayType(INT)), class_table)
        assert not assignable(ArrayType(BOOL), ArrayType(INT), class_table)
        assert not assignable(ArrayType(INT), ArrayType(ArrayType(INT)), class_table)

    @pytest.mark.parametrize("other", [INT, BOOL, ObjType("A")])
    def test_array_never_mixes_with_other_variants(self, other, class_table):
        assert not assignable(other, ArrayType(INT), class_table)
        assert not assignable(ArrayType(INT), other, class_table)

    def test_untyped_never_assignable(self, class_table):
        assert not assignable(INT, None, class_table)


class TestComparable:
    def test_symmetric(self, class_table):
        for a, b in itertools.product(ALL_TYPES, repeat=2):
            assert comparable(a, b, class_table) == comparable(b, a, class_table)

    def test_related_objects(self, class_table):
        assert comparable(ObjType("C"), ObjType("A"), class_table)
        assert not comparable(ObjType("C"), ObjType("D"), class_table)


class TestFormatType:
    def test_formats(self):
        assert format_type(INT) == "int"
        assert format_type(BOOL) == "boolean"
        assert format_type(ArrayType(ArrayType(BOOL))) == "boolean[][]"
        assert format_type(ObjType("Foo")) == "Foo"
        assert format_type(None) == "<untyped>"
