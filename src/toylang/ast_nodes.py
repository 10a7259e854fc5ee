"""AST node definitions for the toy language.

Nodes are frozen dataclasses, so ``==`` is structural: two nodes are equal
when they are the same class and every field is equal, recursively.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# ── Expressions ──────────────────────────────────────────────────


@dataclass(frozen=True)
class NumberLiteral:
    value: int


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class Not:
    term: Expr


@dataclass(frozen=True)
class Equal:
    left: Expr
    right: Expr


@dataclass(frozen=True)
class NotEqual:
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Add:
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Subtract:
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Multiply:
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Divide:
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Call:
    callee: str
    args: list[Expr]


BinaryOp = Union[Equal, NotEqual, Add, Subtract, Multiply, Divide]

Expr = Union[NumberLiteral, Identifier, Not, BinaryOp, Call]


# ── Statements ───────────────────────────────────────────────────


@dataclass(frozen=True)
class Return:
    term: Expr


@dataclass(frozen=True)
class Block:
    statements: list[Stmt]


@dataclass(frozen=True)
class If:
    conditional: Expr
    consequence: Stmt
    alternative: Stmt


@dataclass(frozen=True)
class FunctionDecl:
    name: str
    parameters: list[str]
    body: Block


@dataclass(frozen=True)
class VarDecl:
    name: str
    value: Expr


@dataclass(frozen=True)
class Assign:
    name: str
    value: Expr


@dataclass(frozen=True)
class While:
    conditional: Expr
    body: Stmt


Stmt = Union[Return, Block, If, FunctionDecl, VarDecl, Assign, While, Expr]

AST = Union[Expr, Stmt]
