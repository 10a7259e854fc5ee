"""Parser combinators over :class:`~toylang.source.Position`.

A parser is a function from a position to either a ``ParseResult`` or
``None``. ``None`` means "no match" and is ordinary control flow: it is
what lets :meth:`Parser.or_` fall through to the next alternative.
Exceptions are reserved for grammar wiring defects (:class:`GrammarError`)
and for :meth:`Parser.parse_string_to_completion` rejecting its input.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Generic, TypeVar

from toylang.errors import GrammarError, IncompleteParseError, NoMatchError
from toylang.source import ParseResult, Position

T = TypeVar("T")
U = TypeVar("U")


class Parser(Generic[T]):
    """A parsing rule. ``parse`` may be reassigned to resolve a forward reference."""

    def __init__(self, parse: Callable[[Position], ParseResult[T] | None]) -> None:
        self.parse = parse

    # ── Primitives ───────────────────────────────────────────────

    @staticmethod
    def regexp(pattern: str | re.Pattern[str], flags: int = 0) -> Parser[str]:
        """Match pattern exactly at the current position."""
        compiled = re.compile(pattern, flags) if isinstance(pattern, str) else pattern
        return Parser(lambda position: position.match(compiled))

    @staticmethod
    def constant(value: U) -> Parser[U]:
        """Always succeed with value, consuming nothing."""
        return Parser(lambda position: ParseResult(value, position))

    @staticmethod
    def error(message: str) -> Parser[Any]:
        """A rule that raises GrammarError when run.

        Used as the initial value of a rule referenced before it is defined.
        """

        def parse(position: Position) -> ParseResult[Any] | None:
            raise GrammarError(message)

        return Parser(parse)

    # ── Derived combinators ──────────────────────────────────────

    def or_(self, other: Parser[T]) -> Parser[T]:
        """Prioritized choice: other runs only if self fails."""

        def parse(position: Position) -> ParseResult[T] | None:
            result = self.parse(position)
            if result is not None:
                return result
            return other.parse(position)

        return Parser(parse)

    __or__ = or_

    def bind(self, callback: Callable[[T], Parser[U]]) -> Parser[U]:
        """Run self, then the parser built from its value where self left off."""

        def parse(position: Position) -> ParseResult[U] | None:
            result = self.parse(position)
            if result is None:
                return None
            return callback(result.value).parse(result.next)

        return Parser(parse)

    def and_(self, other: Parser[U]) -> Parser[U]:
        """Sequence, keeping only other's value."""
        return self.bind(lambda _: other)

    def map(self, callback: Callable[[T], U]) -> Parser[U]:
        return self.bind(lambda value: Parser.constant(callback(value)))

    @staticmethod
    def zero_or_more(parser: Parser[U]) -> Parser[list[U]]:
        """Apply parser until it fails. Always succeeds.

        parser must consume input whenever it succeeds, or this never ends.
        """

        def parse(position: Position) -> ParseResult[list[U]] | None:
            results: list[U] = []
            while True:
                item = parser.parse(position)
                if item is None:
                    return ParseResult(results, position)
                results.append(item.value)
                position = item.next

        return Parser(parse)

    @staticmethod
    def maybe(parser: Parser[U]) -> Parser[U | None]:
        return parser.or_(Parser.constant(None))

    # ── Entry point ──────────────────────────────────────────────

    def parse_string_to_completion(self, text: str, filename: str = "<stdin>") -> T:
        """Parse all of text and return the value.

        Raises NoMatchError if nothing could be parsed and
        IncompleteParseError if text remains after the longest parse.
        """
        result = self.parse(Position(text, 0))
        if result is None or (result.next.offset == 0 and text):
            raise NoMatchError(filename)
        if not result.next.at_end:
            raise IncompleteParseError(result.next.offset, filename)
        return result.value
