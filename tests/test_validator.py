"""Tests for the validator facade, file access and observers."""
import io

import pytest
from rich.console import Console

from validatecommit.errors import CommitIOError, FormatError, IOErrorKind
from validatecommit.observers import ConsoleLogObserver, FileLogObserver, ValidationObserver
from validatecommit.validator import CommitMessageValidator, validate_commit_file


class RecordingObserver(ValidationObserver):
    def __init__(self):
        self.events = []

    def on_message_accepted(self, message):
        self.events.append(("accepted", str(message.header)))

    def on_message_skipped(self, first_line):
        self.events.append(("skipped", first_line))

    def on_message_rejected(self, error):
        self.events.append(("rejected", type(error).__name__))


def test_validate_returns_tuple():
    validator = CommitMessageValidator()

    is_valid, msg = validator.validate("feat: add feature")
    assert is_valid
    assert msg == ""

    is_valid, msg = validator.validate("feat:add feature")
    assert not is_valid
    assert msg == "line 1: The column must be followed by a space\nfeat:add feature\n     ^"


def test_observers_are_notified():
    observer = RecordingObserver()
    validator = CommitMessageValidator([observer])

    validator.check("feat: add feature")
    validator.check("Merge branch develop")
    with pytest.raises(FormatError):
        validator.check("feet: add feature")

    assert observer.events == [
        ("accepted", "feat: add feature"),
        ("skipped", "Merge branch develop"),
        ("rejected", "FormatError"),
    ]


def test_remove_observer():
    observer = RecordingObserver()
    validator = CommitMessageValidator()
    validator.add_observer(observer)
    validator.remove_observer(observer)
    validator.check("feat: add feature")
    assert observer.events == []


def test_validate_commit_file(commit_file):
    path = commit_file("feat: add feature\n\n# Please enter the commit message\n")
    message = validate_commit_file(str(path))
    assert message.header.subject == "add feature"


def test_missing_file(tmp_path):
    observer = RecordingObserver()
    validator = CommitMessageValidator([observer])
    with pytest.raises(CommitIOError) as exc_info:
        validator.check_file(str(tmp_path / "missing"))
    assert exc_info.value.kind == IOErrorKind.OPEN_FILE_FAILED
    assert isinstance(exc_info.value.__cause__, OSError)
    assert observer.events == [("rejected", "CommitIOError")]


def test_undecodable_file(tmp_path):
    path = tmp_path / "COMMIT_EDITMSG"
    path.write_bytes(b"feat: add \xff\xfe feature\n")
    with pytest.raises(CommitIOError) as exc_info:
        validate_commit_file(str(path))
    assert exc_info.value.kind == IOErrorKind.READ_FAILED


def test_console_observer_renders_caret():
    output = io.StringIO()
    observer = ConsoleLogObserver(Console(file=output, width=40, color_system=None))
    validator = CommitMessageValidator([observer])

    validator.validate("feat: Add commit message validation that is longer than the console")

    lines = output.getvalue().split("\n")
    assert lines[0] == "error: line 1: First letter must not be capitalized"
    assert lines[1] == "feat: Add commit message validation that is longer than the console"
    assert lines[2] == "      ^"


def test_console_observer_verbosity():
    output = io.StringIO()
    observer = ConsoleLogObserver(Console(file=output, color_system=None))
    CommitMessageValidator([observer]).check("feat: add feature")
    assert output.getvalue() == ""

    observer.verbose = True
    CommitMessageValidator([observer]).check("feat: add feature")
    assert output.getvalue() == "ok: feat: add feature\n"


def test_file_log_observer(tmp_path):
    log_file = tmp_path / "logs" / "validate.log"
    validator = CommitMessageValidator([FileLogObserver(str(log_file))])

    validator.validate("feat(lib): add feature")
    validator.validate("WIP")
    validator.validate("feet: add feature")

    lines = log_file.read_text().splitlines()
    assert len(lines) == 3
    assert lines[0].endswith(" - Accepted commit message: feat(lib): add feature")
    assert lines[1].endswith(" - Skipped commit message: WIP")
    assert lines[2].endswith(" - Rejected commit message: line 1: Invalid commit type")
