"""Commit message validation."""
from typing import List, Optional, Tuple

from .errors import CommitIOError, CommitValidationError, IOErrorKind
from .models import CommitMessage
from .observers import ValidationObserver
from .parse import split_lines
from .validation import validate_message


def read_commit_file(path: str) -> str:
    """Read a commit message file.

    Raises:
        CommitIOError: the file cannot be opened or decoded
    """
    try:
        f = open(path, encoding="utf-8")
    except OSError as e:
        raise CommitIOError(IOErrorKind.OPEN_FILE_FAILED, str(path)) from e
    with f:
        try:
            return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CommitIOError(IOErrorKind.READ_FAILED, str(path)) from e


def validate_commit_file(path: str) -> Optional[CommitMessage]:
    return validate_message(read_commit_file(path))


class CommitMessageValidator:
    """Validates commit messages and reports outcomes to observers."""

    def __init__(self, observers: Optional[List[ValidationObserver]] = None):
        self.observers: List[ValidationObserver] = list(observers or [])

    def add_observer(self, observer: ValidationObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: ValidationObserver) -> None:
        self.observers.remove(observer)

    def check(self, text: str) -> Optional[CommitMessage]:
        """Validate ``text`` and notify observers of the outcome.

        Raises:
            FormatError: the message breaks a rule
        """
        try:
            message = validate_message(text)
        except CommitValidationError as e:
            self._notify_rejected(e)
            raise
        if message is None:
            lines = split_lines(text)
            for observer in self.observers:
                observer.on_message_skipped(lines[0])
        else:
            for observer in self.observers:
                observer.on_message_accepted(message)
        return message

    def check_file(self, path: str) -> Optional[CommitMessage]:
        try:
            text = read_commit_file(path)
        except CommitIOError as e:
            self._notify_rejected(e)
            raise
        return self.check(text)

    def validate(self, message: str) -> Tuple[bool, str]:
        """Validate a commit message, returning ``(is_valid, rendered_error)``."""
        try:
            self.check(message)
        except CommitValidationError as e:
            return False, str(e)
        return True, ""

    def _notify_rejected(self, error: CommitValidationError) -> None:
        for observer in self.observers:
            observer.on_message_rejected(error)
