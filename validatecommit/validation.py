"""Commit message validation using Chain of Responsibility pattern."""
from abc import ABC, abstractmethod
from typing import List, Optional

from .errors import FormatError, FormatErrorKind
from .models import CommitHeader, CommitMessage
from .parse import parse_header, split_lines, strip_autosquash

MAX_LINE_LENGTH = 100
BYPASS_PREFIXES = ("Merge ", "WIP")


class ValidationContext:
    """State shared by the handlers of one validation run."""

    def __init__(self, lines: List[str]):
        self.lines = lines
        self.header: Optional[CommitHeader] = None

    @property
    def header_line(self) -> str:
        return self.lines[0] if self.lines else ""


class ValidationHandler(ABC):
    """Abstract base class for validation handlers."""

    def __init__(self, next_handler: Optional['ValidationHandler'] = None):
        self.next_handler = next_handler

    def handle(self, context: ValidationContext) -> None:
        """Validate and pass to the next handler; the first fault stops the chain."""
        self.validate(context)
        if self.next_handler:
            self.next_handler.handle(context)

    @abstractmethod
    def validate(self, context: ValidationContext) -> None:
        """Raise ``FormatError`` if the message breaks this handler's rule."""
        pass


class BypassHandler(ValidationHandler):
    """Accepts merge and work-in-progress messages without further checks."""

    def handle(self, context: ValidationContext) -> None:
        if is_bypassed(context.header_line):
            return
        super().handle(context)

    def validate(self, context: ValidationContext) -> None:
        pass


class BlankSecondLineHandler(ValidationHandler):
    """Validates blank line after the header."""

    def validate(self, context: ValidationContext) -> None:
        if len(context.lines) > 1 and context.lines[1]:
            raise FormatError.at(FormatErrorKind.NON_EMPTY_SECOND_LINE, context.lines[1], 0, 2)


class HeaderHandler(ValidationHandler):
    """Parses the header line and stores it on the context."""

    def validate(self, context: ValidationContext) -> None:
        try:
            context.header = parse_header(context.header_line)
        except FormatError as e:
            raise e.on_line(1) from None


class LineLengthHandler(ValidationHandler):
    """Validates the length of every line, header included."""

    def __init__(self, max_length: int = MAX_LINE_LENGTH, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.max_length = max_length

    def validate(self, context: ValidationContext) -> None:
        for line_number, line in enumerate(context.lines, start=1):
            if len(line) > self.max_length:
                raise FormatError.at(
                    FormatErrorKind.LINE_TOO_LONG, line, self.max_length, line_number,
                    limit=self.max_length,
                )


class CapitalizationHandler(ValidationHandler):
    """Validates that the subject does not start with an uppercase letter."""

    def validate(self, context: ValidationContext) -> None:
        header = context.header
        if header is not None and header.subject[0].isupper():
            raise FormatError.at(
                FormatErrorKind.CAPITALIZED_FIRST_LETTER,
                strip_autosquash(context.header_line),
                header.subject_offset,
                1,
            )


def is_bypassed(first_line: str) -> bool:
    return first_line.startswith(BYPASS_PREFIXES)


def create_validation_chain(max_line_length: int = MAX_LINE_LENGTH) -> ValidationHandler:
    """Create the default validation chain."""
    capitalization = CapitalizationHandler()
    line_length = LineLengthHandler(max_line_length, capitalization)
    header = HeaderHandler(line_length)
    blank_line = BlankSecondLineHandler(header)
    return BypassHandler(blank_line)


def validate_message(text: str) -> Optional[CommitMessage]:
    """Validate a raw commit message.

    Returns:
        The parsed message, or None when the message is exempt
        (``Merge ...``/``WIP...``).

    Raises:
        FormatError: the first rule the message breaks
    """
    context = ValidationContext(split_lines(text))
    create_validation_chain().handle(context)
    if context.header is None:
        return None
    return CommitMessage(header=context.header, lines=context.lines)
