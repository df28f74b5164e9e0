"""Git repository integration."""
import os
import stat
from pathlib import Path
from typing import Iterator, Tuple

import git
from git import Repo

HOOK_MARKER = "# installed by validate-commit"
HOOK_SCRIPT = f"""#!/bin/sh
{HOOK_MARKER}
exec validate-commit "$1"
"""


class RepositoryError(Exception):
    """Raised when a path is not inside a usable git repository."""


def open_repo(path: Path) -> Repo:
    try:
        return Repo(str(path), search_parent_directories=True)
    except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
        raise RepositoryError(f"Not a git repository: {path}") from e


def find_repo_root(path: Path) -> Path:
    """Return the working tree root containing ``path``, or ``path`` itself outside a repository."""
    try:
        repo = open_repo(path)
    except RepositoryError:
        return path
    if repo.working_tree_dir is None:
        return path
    return Path(repo.working_tree_dir)


def find_commit_message_file(path: Path) -> Path:
    """Return the COMMIT_EDITMSG file of the repository containing ``path``."""
    repo = open_repo(path)
    return Path(repo.git_dir) / "COMMIT_EDITMSG"


def iter_commit_messages(path: Path, rev_range: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(hexsha, message)`` for every commit in ``rev_range``."""
    repo = open_repo(path)
    try:
        for commit in repo.iter_commits(rev_range):
            message = commit.message
            if isinstance(message, bytes):
                message = message.decode("utf-8", errors="replace")
            yield commit.hexsha, message
    except git.GitCommandError as e:
        raise RepositoryError(f"Invalid revision range: {rev_range}") from e


def install_hook(path: Path, force: bool = False) -> Path:
    """Install a commit-msg hook that runs validate-commit.

    An existing hook that was not installed by validate-commit is only
    replaced when ``force`` is set.
    """
    repo = open_repo(path)
    hooks_dir = Path(repo.git_dir) / "hooks"
    hooks_dir.mkdir(parents=True, exist_ok=True)
    hook_path = hooks_dir / "commit-msg"

    if hook_path.exists() and not force:
        if HOOK_MARKER not in hook_path.read_text(errors="replace"):
            raise RepositoryError(f"A commit-msg hook already exists: {hook_path}")

    hook_path.write_text(HOOK_SCRIPT)
    mode = os.stat(hook_path).st_mode
    os.chmod(hook_path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return hook_path
