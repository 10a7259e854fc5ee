"""Input positions and match outcomes threaded between parsers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """A recognized value and the position where parsing resumes."""

    value: T
    next: Position


@dataclass(frozen=True)
class Position:
    """Source text plus the offset the next parser starts from."""

    text: str
    offset: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.offset <= len(self.text):
            raise ValueError(
                f"offset {self.offset} outside text of length {len(self.text)}"
            )

    def match(self, pattern: str | re.Pattern[str]) -> ParseResult[str] | None:
        """Match pattern exactly at offset, returning the matched text.

        Matching is anchored: ``Pattern.match`` never scans ahead, so no
        text before or after the offset is skipped.
        """
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        m = pattern.match(self.text, self.offset)
        if m is None:
            return None
        value = m.group(0)
        return ParseResult(value, Position(self.text, self.offset + len(value)))

    @property
    def remaining(self) -> str:
        return self.text[self.offset :]

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)
