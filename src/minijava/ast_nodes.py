"""AST node definitions for the miniJava language.

The tree is produced by an external parser and only read by the checker.
Type nodes are frozen so they can be shared and compared as values.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Union


# --- Types ---

@dataclass(frozen=True)
class IntType:
    pass

@dataclass(frozen=True)
class BoolType:
    pass

@dataclass(frozen=True)
class ArrayType:
    elem: Type = None

@dataclass(frozen=True)
class ObjType:
    name: str = ""


# --- Declarations ---

@dataclass
class Program:
    classes: list[ClassDecl] = field(default_factory=list)

@dataclass
class ClassDecl:
    name: str = ""
    parent: Optional[str] = None
    fields: list[VarDecl] = field(default_factory=list)
    methods: list[MethodDecl] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class MethodDecl:
    return_type: Optional[Type] = None
    name: str = ""
    params: list[Param] = field(default_factory=list)
    locals: list[VarDecl] = field(default_factory=list)
    statements: list[stmt] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class Param:
    type: Type = None
    name: str = ""
    line: int = 0
    col: int = 0

@dataclass
class VarDecl:
    type: Type = None
    name: str = ""
    init: Optional[expr] = None
    line: int = 0
    col: int = 0


# --- Statements ---

@dataclass
class Block:
    statements: list[stmt] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class Assign:
    lhs: expr = None
    rhs: expr = None
    line: int = 0
    col: int = 0

@dataclass
class CallStmt:
    obj: expr = None
    name: str = ""
    args: list[expr] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class If:
    cond: expr = None
    then_stmt: stmt = None
    else_stmt: Optional[stmt] = None
    line: int = 0
    col: int = 0

@dataclass
class While:
    cond: expr = None
    body: stmt = None
    line: int = 0
    col: int = 0

@dataclass
class Print:
    arg: Optional[expr] = None
    line: int = 0
    col: int = 0

@dataclass
class Return:
    value: Optional[expr] = None
    line: int = 0
    col: int = 0


# --- Expressions ---

@dataclass
class Binop:
    op: str = ""  # "+" "-" "*" "/" "&&" "||" "==" "!=" "<" "<=" ">" ">="
    left: expr = None
    right: expr = None
    line: int = 0
    col: int = 0

@dataclass
class Unop:
    op: str = ""  # "-" or "!"
    operand: expr = None
    line: int = 0
    col: int = 0

@dataclass
class Call:
    obj: expr = None
    name: str = ""
    args: list[expr] = field(default_factory=list)
    line: int = 0
    col: int = 0

@dataclass
class NewArray:
    elem: Type = None
    length: int = 0
    line: int = 0
    col: int = 0

@dataclass
class ArrayElem:
    array: expr = None
    index: expr = None
    line: int = 0
    col: int = 0

@dataclass
class NewObject:
    name: str = ""
    line: int = 0
    col: int = 0

@dataclass
class FieldAccess:
    obj: expr = None
    name: str = ""
    line: int = 0
    col: int = 0

@dataclass
class Identifier:
    name: str = ""
    line: int = 0
    col: int = 0

@dataclass
class This:
    line: int = 0
    col: int = 0

@dataclass
class IntLiteral:
    value: int = 0
    line: int = 0
    col: int = 0

@dataclass
class BoolLiteral:
    value: bool = False
    line: int = 0
    col: int = 0

@dataclass
class StringLiteral:
    value: str = ""
    line: int = 0
    col: int = 0


# --- Sum types ---

Type = Union[IntType, BoolType, ArrayType, ObjType]

stmt = Union[Block, Assign, CallStmt, If, While, Print, Return]

expr = Union[
    Binop, Unop, Call, NewArray, ArrayElem, NewObject, FieldAccess,
    Identifier, This, IntLiteral, BoolLiteral, StringLiteral,
]

ARITHMETIC_OPS = frozenset({"+", "-", "*", "/"})
LOGICAL_OPS = frozenset({"&&", "||"})
