"""Tests for AST node structural equality."""

from __future__ import annotations

import dataclasses

import pytest

from toylang.ast_nodes import (
    Add,
    Assign,
    Block,
    Call,
    FunctionDecl,
    Identifier,
    If,
    Multiply,
    Not,
    NumberLiteral,
    Return,
    Subtract,
    VarDecl,
    While,
)


class TestEquality:
    def test_reflexive(self):
        node = Multiply(Identifier("a"), NumberLiteral(2))
        assert node == node

    def test_fresh_node_with_same_shape_is_equal(self):
        assert Multiply(Identifier("a"), NumberLiteral(2)) == Multiply(
            Identifier("a"), NumberLiteral(2)
        )

    def test_swapped_operands_differ(self):
        assert Multiply(Identifier("a"), NumberLiteral(2)) != Multiply(
            NumberLiteral(2), Identifier("a")
        )

    def test_different_literal_differs(self):
        assert Multiply(Identifier("a"), NumberLiteral(2)) != Multiply(
            Identifier("a"), NumberLiteral(3)
        )

    def test_same_fields_different_variant_differ(self):
        assert Add(NumberLiteral(1), NumberLiteral(2)) != Subtract(
            NumberLiteral(1), NumberLiteral(2)
        )
        assert Return(Identifier("x")) != Not(Identifier("x"))
        assert VarDecl("x", NumberLiteral(1)) != Assign("x", NumberLiteral(1))

    def test_call_compares_callee_and_args(self):
        call = Call("f", [NumberLiteral(1), Identifier("x")])
        assert call == Call("f", [NumberLiteral(1), Identifier("x")])
        assert call != Call("g", [NumberLiteral(1), Identifier("x")])
        assert call != Call("f", [NumberLiteral(1)])

    def test_block_compares_statements_in_order(self):
        a = Return(NumberLiteral(1))
        b = Return(NumberLiteral(2))
        assert Block([a, b]) == Block([a, b])
        assert Block([a, b]) != Block([b, a])
        assert Block([]) == Block([])

    def test_function_compares_parameters(self):
        body = Block([Return(Identifier("a"))])
        assert FunctionDecl("f", ["a", "b"], body) == FunctionDecl("f", ["a", "b"], body)
        assert FunctionDecl("f", ["a", "b"], body) != FunctionDecl("f", ["b", "a"], body)
        assert FunctionDecl("f", ["a"], body) != FunctionDecl("g", ["a"], body)

    def test_if_compares_all_branches(self):
        node = If(Identifier("c"), Return(NumberLiteral(1)), Return(NumberLiteral(2)))
        assert node == If(Identifier("c"), Return(NumberLiteral(1)), Return(NumberLiteral(2)))
        assert node != If(Identifier("c"), Return(NumberLiteral(1)), Return(NumberLiteral(3)))

    def test_while_compares_body(self):
        node = While(Identifier("c"), Block([]))
        assert node == While(Identifier("c"), Block([]))
        assert node != While(Identifier("c"), Block([Return(NumberLiteral(0))]))

    def test_not_equal_to_other_types(self):
        assert NumberLiteral(1) != 1
        assert Identifier("x") != "x"


class TestImmutability:
    def test_fields_cannot_be_reassigned(self):
        node = Identifier("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.name = "y"  # type: ignore[misc]
