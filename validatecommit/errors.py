"""Error taxonomy for commit message validation.

Every fault is a ``CommitValidationError``. Format faults carry an optional
``Span`` so they can be rendered with a caret under the offending column::

    line 1: The column must be followed by a space
    feat:add commit message validation
         ^
"""
from enum import Enum
from typing import Optional

from .models import Span


class IOErrorKind(Enum):
    OPEN_FILE_FAILED = "Error while opening commit file"
    READ_FAILED = "Error while reading commit file"


class FormatErrorKind(Enum):
    CAPITALIZED_FIRST_LETTER = "First letter must not be capitalized"
    EMPTY_COMMIT_SUBJECT = "Empty commit subject"
    EMPTY_COMMIT_TYPE = "Empty commit type"
    INVALID_COMMIT_TYPE = "Invalid commit type"
    LINE_TOO_LONG = "Line must not be longer than {limit} characters"
    MISSING_PARENTHESIS = "Missing parenthesis"
    MISPLACED_WHITESPACE = "Misplaced whitespace"
    MISSING_WHITESPACE = "The column must be followed by a space"
    NO_COLUMN = "First line must contain a column"
    NON_EMPTY_SECOND_LINE = "Second line must be empty"


class CommitValidationError(Exception):
    """Base class for everything that makes a commit message unacceptable."""


class FormatError(CommitValidationError):
    """A commit message that does not follow the convention."""

    def __init__(self, kind: FormatErrorKind, span: Optional[Span] = None, limit: Optional[int] = None):
        self.kind = kind
        self.span = span
        self.limit = limit
        super().__init__(self.render())

    @classmethod
    def at(cls, kind: FormatErrorKind, line: str, column: int, line_number: Optional[int] = None,
           limit: Optional[int] = None) -> 'FormatError':
        return cls(kind, Span(line, column, line_number), limit)

    @property
    def message(self) -> str:
        return self.kind.value.format(limit=self.limit)

    def on_line(self, line_number: int) -> 'FormatError':
        """Return a copy of this fault attributed to ``line_number``.

        The column is kept as is; it was computed where the fault was detected.
        """
        if self.span is None:
            return self
        span = Span(self.span.line, self.span.column, line_number)
        return FormatError(self.kind, span, self.limit)

    def render(self) -> str:
        if self.span is None:
            return self.message
        if self.span.line_number is None:
            heading = self.message
        else:
            heading = f"line {self.span.line_number}: {self.message}"
        return f"{heading}\n{self.span.line}\n{' ' * self.span.column}^"

    def __str__(self) -> str:
        return self.render()


class CommitIOError(CommitValidationError):
    """The commit message file could not be opened or read."""

    def __init__(self, kind: IOErrorKind, path: str):
        self.kind = kind
        self.path = path
        super().__init__(f"{kind.value}: {path}")
