"""Diagnostics and the exceptions raised while building and running parsers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from toylang.source import Position


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


# ANSI color codes
_COLORS = {
    Severity.ERROR: "\033[1;31m",    # bold red
    Severity.WARNING: "\033[1;33m",  # bold yellow
    Severity.NOTE: "\033[1;36m",     # bold cyan
}
_BOLD = "\033[1m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"

_EXCERPT_WIDTH = 40


@dataclass(frozen=True)
class DiagnosticLabel:
    """Points at a character offset in the source text."""

    offset: int
    message: str
    file: str = "<stdin>"


@dataclass
class Diagnostic:
    """A single diagnostic message with optional labels and notes."""

    severity: Severity
    code: str
    message: str
    labels: list[DiagnosticLabel] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)


class DiagnosticRenderer:
    """Renders diagnostics with an excerpt of the text at each label."""

    def __init__(self, *, color: bool = True, sources: dict[str, str] | None = None) -> None:
        self.color = color
        self.sources: dict[str, str] = dict(sources or {})

    def _c(self, code: str) -> str:
        return code if self.color else ""

    def _excerpt(self, file: str, offset: int) -> str | None:
        """Return the rest of the line starting at offset, if the text is known."""
        text = self.sources.get(file)
        if text is None or not 0 <= offset <= len(text):
            return None
        rest = Position(text, offset).remaining.split("\n", 1)[0]
        if len(rest) > _EXCERPT_WIDTH:
            rest = rest[:_EXCERPT_WIDTH] + "..."
        return rest

    def render(self, diag: Diagnostic) -> str:
        lines: list[str] = []
        color = _COLORS[diag.severity]

        # Header: error[E100]: message
        lines.append(
            f"{self._c(color)}{diag.severity.value}[{diag.code}]{self._c(_RESET)}"
            f"{self._c(_BOLD)}: {diag.message}{self._c(_RESET)}"
        )

        for label in diag.labels:
            lines.append(
                f"  {self._c(_BLUE)}-->{self._c(_RESET)} {label.file}@{label.offset}"
            )
            excerpt = self._excerpt(label.file, label.offset)
            if excerpt is not None:
                lines.append(f"  {self._c(_BLUE)}   |{self._c(_RESET)} {excerpt}")
                lines.append(
                    f"  {self._c(_BLUE)}   |{self._c(_RESET)} "
                    f"{self._c(color)}^{self._c(_RESET)}"
                )
            if label.message:
                lines.append(
                    f"  {self._c(_BLUE)}   |{self._c(_RESET)}   "
                    f"{self._c(color)}{label.message}{self._c(_RESET)}"
                )

        for note in diag.notes:
            lines.append(f"  {self._c(_BLUE)}={self._c(_RESET)} note: {note}")

        return "\n".join(lines)


class CompileError(Exception):
    """Batch error carrying one or more diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [d.message for d in diagnostics]
        super().__init__(f"{len(diagnostics)} error(s): {'; '.join(messages)}")


class ParseError(CompileError):
    """Source text that the grammar rejects."""

    code = "E100"

    def __init__(self, message: str, offset: int, filename: str = "<stdin>") -> None:
        self.offset = offset
        self.filename = filename
        super().__init__([
            Diagnostic(
                severity=Severity.ERROR,
                code=self.code,
                message=message,
                labels=[DiagnosticLabel(offset=offset, message="", file=filename)],
            )
        ])


class NoMatchError(ParseError):
    """The parser made no progress at all."""

    code = "E100"

    def __init__(self, filename: str = "<stdin>") -> None:
        super().__init__("could not parse anything at all", 0, filename)


class IncompleteParseError(ParseError):
    """A prefix parsed, but input remains after it."""

    code = "E101"

    def __init__(self, offset: int, filename: str = "<stdin>") -> None:
        super().__init__(f"unexpected input at offset {offset}", offset, filename)


class GrammarError(Exception):
    """A grammar was wired incorrectly, e.g. a rule used before it was defined."""
