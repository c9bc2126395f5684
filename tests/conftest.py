import pytest
import tempfile
from pathlib import Path
from git import Repo


def commit_file(repo: Repo, tmp_dir: str, message: str, day: int, name: str = "test.txt"):
    """Write a file and commit it with a fixed, increasing commit date."""
    test_file = Path(tmp_dir) / name
    test_file.write_text(f"{message}\n")
    repo.index.add([name])
    date = f"2024-01-{day:02d}T12:00:00"
    return repo.index.commit(message, author_date=date, commit_date=date)


@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository with a linear four-commit history on main."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)
        repo.git.symbolic_ref("HEAD", "refs/heads/main")
        with repo.config_writer() as writer:
            writer.set_value("user", "name", "Test User")
            writer.set_value("user", "email", "test@example.com")

        commit_file(repo, tmp_dir, "🎉 Add initial content", 1)
        commit_file(repo, tmp_dir, "🐛 Fix the greeting", 2)
        commit_file(repo, tmp_dir, "🔥 Tidy up the greeting", 3)
        commit_file(repo, tmp_dir, "🌹 Update readme", 4)

        yield tmp_dir


@pytest.fixture
def temp_git_repo_with_branch():
    """Create a temporary git repository where `feature` forks from main after one commit."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)
        repo.git.symbolic_ref("HEAD", "refs/heads/main")

        base = commit_file(repo, tmp_dir, "🎉 Add base", 1)
        commit_file(repo, tmp_dir, "🐛 Fix on main", 2)

        feature = repo.create_head("feature", base)
        repo.head.reference = feature
        repo.head.reset(index=True, working_tree=True)
        commit_file(repo, tmp_dir, "Added feature work.", 3, name="feature.txt")
        commit_file(repo, tmp_dir, "🎉 Add more feature work", 4, name="feature.txt")
        yield tmp_dir
