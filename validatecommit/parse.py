"""Commit header parsing."""
from typing import List, Optional, Tuple

from .errors import FormatError, FormatErrorKind
from .models import CommitHeader, CommitType

AUTOSQUASH_PREFIXES = ("fixup! ", "squash! ")
SCISSORS_LINE = "# ------------------------ >8 ------------------------"


def split_lines(text: str) -> List[str]:
    """Split a raw message into the lines that rules are evaluated against.

    Comment lines are dropped and everything below git's scissors line
    (``git commit --verbose``) is ignored, so line numbers count surviving
    lines only.
    """
    raw_lines = text.split("\n")
    if raw_lines[-1] == "":
        raw_lines.pop()

    lines = []
    for line in raw_lines:
        if line.endswith("\r"):
            line = line[:-1]
        if line == SCISSORS_LINE:
            break
        if line.startswith("#"):
            continue
        lines.append(line)
    return lines


def strip_autosquash(line: str) -> str:
    for prefix in AUTOSQUASH_PREFIXES:
        if line.startswith(prefix):
            return line[len(prefix):]
    return line


def parse_header(line: str) -> CommitHeader:
    """Parse a ``type(scope): subject`` header line.

    A leading ``fixup! `` or ``squash! `` is dropped first and every column
    reported in a ``FormatError`` is relative to the stripped line.

    Raises:
        FormatError: the line does not follow the convention
    """
    line = strip_autosquash(line)

    column_pos = line.find(":")
    if column_pos == -1:
        raise FormatError.at(FormatErrorKind.NO_COLUMN, line, len(line))

    type_text, scope = parse_type_and_scope(line, line[:column_pos])
    try:
        commit_type = CommitType(type_text)
    except ValueError:
        raise FormatError.at(FormatErrorKind.INVALID_COMMIT_TYPE, line, 0) from None

    if line[column_pos + 1:column_pos + 2] != " ":
        raise FormatError.at(FormatErrorKind.MISSING_WHITESPACE, line, column_pos + 1)

    subject_pos = column_pos + 2
    subject = line[subject_pos:]
    if not subject:
        raise FormatError.at(FormatErrorKind.EMPTY_COMMIT_SUBJECT, line, subject_pos)

    if subject != subject.strip():
        if subject[0].isspace():
            pos = subject_pos
        else:
            pos = subject_pos + len(subject.rstrip())
        raise FormatError.at(FormatErrorKind.MISPLACED_WHITESPACE, line, pos)

    return CommitHeader(commit_type=commit_type, scope=scope, subject=subject)


def parse_type_and_scope(line: str, type_and_scope: str) -> Tuple[str, Optional[str]]:
    """Split the text before the colon into the type and the optional scope."""
    if not type_and_scope:
        raise FormatError.at(FormatErrorKind.EMPTY_COMMIT_TYPE, line, 0)

    if type_and_scope[0].isspace():
        raise FormatError.at(FormatErrorKind.MISPLACED_WHITESPACE, line, 0)

    last = len(type_and_scope) - 1
    if type_and_scope[last].isspace():
        raise FormatError.at(FormatErrorKind.MISPLACED_WHITESPACE, line, last)

    if type_and_scope.endswith(")"):
        opening_parenthesis = type_and_scope.find("(")
        if opening_parenthesis == -1:
            raise FormatError.at(FormatErrorKind.MISSING_PARENTHESIS, line, last)
        return type_and_scope[:opening_parenthesis], type_and_scope[opening_parenthesis + 1:last]

    return type_and_scope, None
