"""Observer pattern for validation outcomes."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .errors import CommitValidationError
from .models import CommitMessage


class ValidationObserver(ABC):
    """Abstract base class for validation observers."""

    @abstractmethod
    def on_message_accepted(self, message: CommitMessage) -> None:
        """Called when a message passes every rule."""
        pass

    @abstractmethod
    def on_message_skipped(self, first_line: str) -> None:
        """Called when a merge or work-in-progress message is exempted."""
        pass

    @abstractmethod
    def on_message_rejected(self, error: CommitValidationError) -> None:
        """Called when a message breaks a rule or cannot be read."""
        pass


class ConsoleLogObserver(ValidationObserver):
    """Observer that reports validation outcomes on the console."""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console or Console(stderr=True)
        self.verbose = verbose

    def on_message_accepted(self, message: CommitMessage) -> None:
        if self.verbose:
            self.console.print(f"[green]ok:[/green] {escape(str(message.header))}")

    def on_message_skipped(self, first_line: str) -> None:
        if self.verbose:
            self.console.print(f"[yellow]skipped:[/yellow] {escape(first_line)}")

    def on_message_rejected(self, error: CommitValidationError) -> None:
        self.console.print(f"[bold red]error:[/bold red] {escape(str(error))}", highlight=False, soft_wrap=True)


class FileLogObserver(ValidationObserver):
    """Observer that logs validation outcomes to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_message_accepted(self, message: CommitMessage) -> None:
        self._log(f"Accepted commit message: {message.header}")

    def on_message_skipped(self, first_line: str) -> None:
        self._log(f"Skipped commit message: {first_line}")

    def on_message_rejected(self, error: CommitValidationError) -> None:
        summary = str(error).split("\n")[0]
        self._log(f"Rejected commit message: {summary}")
