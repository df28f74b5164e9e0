"""Tests for git repository integration."""
import os
from pathlib import Path

import pytest
from git import Repo

from validatecommit.repository import (
    HOOK_MARKER,
    RepositoryError,
    find_commit_message_file,
    find_repo_root,
    install_hook,
    iter_commit_messages,
)


def test_find_commit_message_file(temp_git_repo):
    path = find_commit_message_file(temp_git_repo)
    assert path == Path(Repo(temp_git_repo).git_dir) / "COMMIT_EDITMSG"


def test_find_commit_message_file_from_subdirectory(temp_git_repo):
    subdir = Path(temp_git_repo) / "src"
    subdir.mkdir()
    path = find_commit_message_file(subdir)
    assert path.name == "COMMIT_EDITMSG"
    assert path.parent == Path(Repo(temp_git_repo).git_dir)


def test_not_a_repository(tmp_path):
    with pytest.raises(RepositoryError):
        find_commit_message_file(tmp_path / "missing")


def test_iter_commit_messages(temp_git_repo):
    repo = Repo(temp_git_repo)
    (Path(temp_git_repo) / "test.txt").write_text("Changed content")
    repo.index.add(["test.txt"])
    repo.index.commit("feat: change content")

    messages = [message for _, message in iter_commit_messages(temp_git_repo, "HEAD")]
    assert messages == ["feat: change content", "chore: initial commit"]

    messages = list(iter_commit_messages(temp_git_repo, "HEAD~1..HEAD"))
    assert len(messages) == 1
    assert len(messages[0][0]) == 40


def test_iter_commit_messages_invalid_range(temp_git_repo):
    with pytest.raises(RepositoryError):
        list(iter_commit_messages(temp_git_repo, "no-such-branch..HEAD"))


def test_install_hook(temp_git_repo):
    hook_path = install_hook(temp_git_repo)

    assert hook_path == Path(Repo(temp_git_repo).git_dir) / "hooks" / "commit-msg"
    assert HOOK_MARKER in hook_path.read_text()
    assert 'validate-commit "$1"' in hook_path.read_text()
    assert os.access(hook_path, os.X_OK)

    # Reinstalling over our own hook is fine
    assert install_hook(temp_git_repo) == hook_path


def test_install_hook_keeps_foreign_hook(temp_git_repo):
    hooks_dir = Path(Repo(temp_git_repo).git_dir) / "hooks"
    hooks_dir.mkdir(exist_ok=True)
    hook_path = hooks_dir / "commit-msg"
    hook_path.write_text("#!/bin/sh\nexit 0\n")

    with pytest.raises(RepositoryError):
        install_hook(temp_git_repo)
    assert hook_path.read_text() == "#!/bin/sh\nexit 0\n"

    install_hook(temp_git_repo, force=True)
    assert HOOK_MARKER in hook_path.read_text()


def test_find_repo_root(temp_git_repo, tmp_path_factory):
    subdir = Path(temp_git_repo) / "src"
    subdir.mkdir()
    assert find_repo_root(subdir).resolve() == Path(temp_git_repo).resolve()

    outside = tmp_path_factory.mktemp("outside")
    assert find_repo_root(outside) == outside
