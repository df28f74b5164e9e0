#!/usr/bin/env python3
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from .config import COLOR_CHOICES, Config
from .errors import CommitValidationError
from .observers import ConsoleLogObserver, FileLogObserver
from .repository import (
    RepositoryError,
    find_commit_message_file,
    find_repo_root,
    install_hook,
    iter_commit_messages,
)
from .validator import CommitMessageValidator


def make_console(color: str) -> Console:
    """Create the error-stream console for the given color choice."""
    if color == "always":
        return Console(stderr=True, force_terminal=True)
    if color == "never":
        return Console(stderr=True, color_system=None)
    return Console(stderr=True)


def check_range(validator: CommitMessageValidator, console: Console, repo_path: Path, rev_range: str) -> int:
    """Validate every commit in ``rev_range`` and return the number of failures."""
    failures = 0
    for hexsha, message in iter_commit_messages(repo_path, rev_range):
        try:
            validator.check(message)
        except CommitValidationError as e:
            failures += 1
            console.print(f"[bold red]error:[/bold red] {hexsha[:8]}: {escape(str(e))}", highlight=False, soft_wrap=True)
    return failures


@click.command()
@click.argument(
    "commit_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-r",
    "--rev",
    "rev_range",
    help="Validate the messages of every commit in a revision range (e.g. origin/main..HEAD)",
)
@click.option(
    "--install-hook",
    "install",
    is_flag=True,
    help="Install a commit-msg hook running validate-commit in the current repository",
)
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite an existing commit-msg hook when installing",
)
@click.option(
    "--color",
    type=click.Choice(COLOR_CHOICES, case_sensitive=False),
    help="When to colorize diagnostics (overrides config setting)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Also report accepted and skipped messages (overrides config setting)",
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log validation outcomes (overrides config setting)",
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    commit_file: Optional[Path],
    rev_range: Optional[str],
    install: bool,
    force: bool,
    color: Optional[str],
    verbose: bool,
    log_file: Optional[Path],
    version: bool,
):
    """
    Validate a commit message against the conventional commit format.

    COMMIT_FILE is the file git passes to the commit-msg hook. Without it,
    the repository's COMMIT_EDITMSG is checked.

    Configuration can be set in .validatecommit.toml in the repository root.
    Command line options override configuration file settings.
    """
    if version:
        from .version import display_version_info

        display_version_info()
        return

    repo_path = Path.cwd()

    config = Config.load(find_repo_root(repo_path))
    if color is not None:
        config.color = color.lower()
    if verbose:
        config.verbose = True
    if log_file is not None:
        config.log_file = str(log_file)

    console = make_console(config.color)

    try:
        if install:
            hook_path = install_hook(repo_path, force=force)
            console.print(f"[green]Installed commit-msg hook:[/green] {hook_path}")
            return

        validator = CommitMessageValidator()
        log_file_path = log_file or config.get_log_file()
        if log_file_path:
            validator.add_observer(FileLogObserver(str(log_file_path)))

        if rev_range:
            failures = check_range(validator, console, repo_path, rev_range)
            if failures:
                sys.exit(1)
            if config.verbose:
                console.print("[green]All commit messages are valid[/green]")
            return

        validator.add_observer(ConsoleLogObserver(console, verbose=config.verbose))
        if commit_file is None:
            commit_file = find_commit_message_file(repo_path)
        validator.check_file(str(commit_file))
    except CommitValidationError:
        # Already reported by the observers
        sys.exit(1)
    except RepositoryError as e:
        console.print(f"[bold red]error:[/bold red] {escape(str(e))}", highlight=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
