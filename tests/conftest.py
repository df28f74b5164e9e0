import pytest
from pathlib import Path
from git import Repo


@pytest.fixture
def temp_git_repo(tmp_path):
    """Create a temporary git repository with one valid commit."""
    repo = Repo.init(tmp_path)

    test_file = Path(tmp_path) / "test.txt"
    test_file.write_text("Initial content")

    repo.index.add(["test.txt"])
    repo.index.commit("chore: initial commit")

    return tmp_path


@pytest.fixture
def commit_file(tmp_path):
    """Write a commit message file the way git hands it to a commit-msg hook."""
    def _write(message: str, name: str = "COMMIT_EDITMSG") -> Path:
        path = tmp_path / name
        path.write_text(message, encoding="utf-8")
        return path

    return _write
