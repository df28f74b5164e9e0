"""Conventional commit message validation."""

__version__ = "0.3.0"

from .errors import CommitIOError, CommitValidationError, FormatError, FormatErrorKind, IOErrorKind
from .models import CommitHeader, CommitMessage, CommitType, Span
from .parse import parse_header
from .validation import validate_message
from .validator import CommitMessageValidator, validate_commit_file

__all__ = [
    'CommitHeader',
    'CommitIOError',
    'CommitMessage',
    'CommitMessageValidator',
    'CommitType',
    'CommitValidationError',
    'FormatError',
    'FormatErrorKind',
    'IOErrorKind',
    'Span',
    'parse_header',
    'validate_commit_file',
    'validate_message',
]
