"""Grammar for the toy language.

Rules are module-level combinators built from the tokens in
:mod:`toylang.lexer`. ``expression`` and ``statement`` refer to each other,
so both start out as placeholders and get their real behavior installed
once every rule that uses them has been built.

Expression precedence, loosest first::

    comparison <- sum (("==" | "!=") sum)*
    sum        <- product (("+" | "-") product)*
    product    <- unary (("*" | "/") unary)*
    unary      <- "!"? atom
    atom       <- call | ID | INTEGER | "(" expression ")"
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Callable

from toylang.ast_nodes import (
    Add,
    Assign,
    Block,
    Call,
    Divide,
    Equal,
    Expr,
    FunctionDecl,
    Identifier,
    If,
    Multiply,
    Not,
    NotEqual,
    NumberLiteral,
    Return,
    Stmt,
    Subtract,
    VarDecl,
    While,
)
from toylang.combinators import Parser
from toylang.lexer import (
    ASSIGN,
    COMMA,
    ELSE,
    EQUAL,
    FUNCTION,
    ID,
    IF,
    INTEGER,
    LEFT_BRACE,
    LEFT_PAREN,
    MINUS,
    NOT,
    NOT_EQUAL,
    PLUS,
    RETURN,
    RIGHT_BRACE,
    RIGHT_PAREN,
    SEMICOLON,
    SLASH,
    STAR,
    VAR,
    WHILE,
    ignored,
)

logger = logging.getLogger(__name__)

constant = Parser.constant
zero_or_more = Parser.zero_or_more
maybe = Parser.maybe

BinaryFactory = Callable[[Expr, Expr], Expr]

expression: Parser[Expr] = Parser.error("expression rule used before it was defined")
statement: Parser[Stmt] = Parser.error("statement rule used before it was defined")


# ── Expressions ──────────────────────────────────────────────────


def comma_separated(item: Parser) -> Parser[list]:
    """Zero or more items separated by commas. Yields a new list each run."""
    items = item.bind(
        lambda first: zero_or_more(COMMA.and_(item)).map(lambda rest: [first, *rest])
    )
    return maybe(items).map(lambda found: found or [])


# args <- (expression ("," expression)*)?
args: Parser[list[Expr]] = comma_separated(expression)

# call <- ID "(" args ")"
call: Parser[Expr] = ID.bind(
    lambda callee: LEFT_PAREN.and_(args).bind(
        lambda arguments: RIGHT_PAREN.and_(constant(Call(callee, arguments)))
    )
)

# atom <- call | ID | INTEGER | "(" expression ")"
atom: Parser[Expr] = (
    call
    .or_(ID.map(Identifier))
    .or_(INTEGER.map(NumberLiteral))
    .or_(LEFT_PAREN.and_(expression).bind(lambda e: RIGHT_PAREN.and_(constant(e))))
)

# unary <- "!"? atom
unary: Parser[Expr] = maybe(NOT).bind(
    lambda bang: atom.map(lambda term: Not(term) if bang else term)
)


def infix(operator_parser: Parser[BinaryFactory], term_parser: Parser[Expr]) -> Parser[Expr]:
    """Left-associative chain of term_parser joined by operator_parser.

    operator_parser yields the node constructor for the operator it matched.
    """
    pair = operator_parser.bind(
        lambda make: term_parser.map(lambda right: (make, right))
    )
    return term_parser.bind(
        lambda first: zero_or_more(pair).map(
            lambda pairs: reduce(lambda left, op: op[0](left, op[1]), pairs, first)
        )
    )


# product <- unary (("*" | "/") unary)*
product = infix(STAR.map(lambda _: Multiply).or_(SLASH.map(lambda _: Divide)), unary)

# sum <- product (("+" | "-") product)*
sum_ = infix(PLUS.map(lambda _: Add).or_(MINUS.map(lambda _: Subtract)), product)

# comparison <- sum (("==" | "!=") sum)*
comparison = infix(EQUAL.map(lambda _: Equal).or_(NOT_EQUAL.map(lambda _: NotEqual)), sum_)

expression.parse = comparison.parse


# ── Statements ───────────────────────────────────────────────────

# return_statement <- RETURN expression ";"
return_statement: Parser[Stmt] = RETURN.and_(expression).bind(
    lambda term: SEMICOLON.and_(constant(Return(term)))
)

# expression_statement <- expression ";"
expression_statement: Parser[Stmt] = expression.bind(
    lambda term: SEMICOLON.and_(constant(term))
)

# if_statement <- IF "(" expression ")" statement ELSE statement
if_statement: Parser[Stmt] = IF.and_(LEFT_PAREN).and_(expression).bind(
    lambda conditional: RIGHT_PAREN.and_(statement).bind(
        lambda consequence: ELSE.and_(statement).bind(
            lambda alternative: constant(If(conditional, consequence, alternative))
        )
    )
)

# while_statement <- WHILE "(" expression ")" statement
while_statement: Parser[Stmt] = WHILE.and_(LEFT_PAREN).and_(expression).bind(
    lambda conditional: RIGHT_PAREN.and_(statement).bind(
        lambda body: constant(While(conditional, body))
    )
)

# var_statement <- VAR ID "=" expression ";"
var_statement: Parser[Stmt] = VAR.and_(ID).bind(
    lambda name: ASSIGN.and_(expression).bind(
        lambda value: SEMICOLON.and_(constant(VarDecl(name, value)))
    )
)

# assignment_statement <- ID "=" expression ";"
assignment_statement: Parser[Stmt] = ID.bind(
    lambda name: ASSIGN.and_(expression).bind(
        lambda value: SEMICOLON.and_(constant(Assign(name, value)))
    )
)

# block_statement <- "{" statement* "}"
block_statement: Parser[Block] = LEFT_BRACE.and_(zero_or_more(statement)).bind(
    lambda statements: RIGHT_BRACE.and_(constant(Block(statements)))
)

# parameters <- (ID ("," ID)*)?
parameters: Parser[list[str]] = comma_separated(ID)

# function_statement <- FUNCTION ID "(" parameters ")" block_statement
function_statement: Parser[Stmt] = FUNCTION.and_(ID).bind(
    lambda name: LEFT_PAREN.and_(parameters).bind(
        lambda params: RIGHT_PAREN.and_(block_statement).bind(
            lambda block: constant(FunctionDecl(name, params, block))
        )
    )
)

# Alternatives sharing an ID prefix (assignment, call, plain expression)
# depend on this order.
statement_parser: Parser[Stmt] = (
    return_statement
    .or_(function_statement)
    .or_(if_statement)
    .or_(while_statement)
    .or_(var_statement)
    .or_(assignment_statement)
    .or_(block_statement)
    .or_(expression_statement)
)

statement.parse = statement_parser.parse

# program <- trivia statement*
program: Parser[Block] = ignored.and_(zero_or_more(statement)).map(Block)


def parse(source: str, filename: str = "<stdin>") -> Block:
    """Parse a whole program. Raises ParseError if any of source is rejected."""
    logger.debug("parsing %s (%d chars)", filename, len(source))
    block = program.parse_string_to_completion(source, filename)
    logger.debug("parsed %s: %d top-level statements", filename, len(block.statements))
    return block


def parse_expression(source: str, filename: str = "<stdin>") -> Expr:
    """Parse a single expression, allowing surrounding trivia."""
    return ignored.and_(expression).parse_string_to_completion(source, filename)
