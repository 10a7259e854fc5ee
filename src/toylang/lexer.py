"""Token-level parsers for the toy language.

Each token consumes the trivia (whitespace and comments) that follows it,
so the grammar never has to mention trivia except once before the first
token of a program.
"""

from __future__ import annotations

import re

from toylang.combinators import Parser

KEYWORDS = frozenset({"function", "if", "while", "else", "return", "var"})

# ── Trivia ───────────────────────────────────────────────────────

whitespace = Parser.regexp(r"[ \t\r\n\f\v]+")
comments = Parser.regexp(r"//[^\n]*").or_(Parser.regexp(r"/\*.*?\*/", re.DOTALL))
ignored = Parser.zero_or_more(whitespace.or_(comments))


def token(pattern: str) -> Parser[str]:
    """Match pattern, then skip any trivia after it. Yields the matched text."""
    return Parser.regexp(pattern).bind(
        lambda value: ignored.and_(Parser.constant(value))
    )


# ── Keywords ─────────────────────────────────────────────────────

FUNCTION = token(r"function\b")
IF = token(r"if\b")
WHILE = token(r"while\b")
ELSE = token(r"else\b")
RETURN = token(r"return\b")
VAR = token(r"var\b")

# ── Punctuation ──────────────────────────────────────────────────

COMMA = token(r",")
SEMICOLON = token(r";")
LEFT_PAREN = token(r"\(")
RIGHT_PAREN = token(r"\)")
LEFT_BRACE = token(r"\{")
RIGHT_BRACE = token(r"\}")

# ── Operators ────────────────────────────────────────────────────

NOT = token(r"!(?!=)")
EQUAL = token(r"==")
NOT_EQUAL = token(r"!=")
PLUS = token(r"\+")
MINUS = token(r"-")
STAR = token(r"\*")
SLASH = token(r"/(?![/*])")
ASSIGN = token(r"=(?!=)")

# ── Literals and names ───────────────────────────────────────────

INTEGER = token(r"[0-9]+").map(int)

_RESERVED = "|".join(sorted(KEYWORDS))
ID = token(rf"(?!(?:{_RESERVED})\b)[a-zA-Z_][a-zA-Z0-9_]*")
