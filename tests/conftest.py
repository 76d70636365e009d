"""Pytest fixtures for pullem tests"""
import io
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest
from rich.console import Console

from pullem.services.display_service import DisplayService
from pullem.services.git_service import GitService


def configure_user(repo):
    """Configure git user for commits."""
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")


def commit_file(repo, filename, content, message):
    """Write a file into the working tree and commit it."""
    path = Path(repo.working_dir) / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    repo.index.add([filename])
    repo.index.commit(message)


def push_upstream_commit(origin_path, clone_path, filename="upstream.txt"):
    """Clone origin elsewhere, commit on main and push, so main can fast-forward."""
    clone = git.Repo.clone_from(str(origin_path), str(clone_path), branch="main")
    configure_user(clone)
    commit_file(clone, filename, "upstream change\n", f"Add {filename}")
    clone.git.push("origin", "main")
    clone.close()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'prune': False,
        'protected_branches': ['master'],
        'remote_name': 'origin',
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def workspace(temp_dir):
    """Directory the updater walks."""
    path = temp_dir / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def origin_path(temp_dir):
    """Create a bare repository to act as origin."""
    path = temp_dir / "origin.git"
    repo = git.Repo.init(path, bare=True)
    repo.close()
    return path


@pytest.fixture
def git_repo(workspace, origin_path):
    """Create a real Git repository on main that tracks origin/main."""
    repo_path = workspace / "project"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    configure_user(repo)
    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    repo.create_remote('origin', str(origin_path))
    repo.git.push('-u', 'origin', 'main')

    yield repo

    repo.close()


@pytest.fixture
def display():
    """DisplayService writing to an in-memory, colourless console."""
    console = Console(file=io.StringIO(), width=200, color_system=None, highlight=False)
    return DisplayService(console)


@pytest.fixture
def output(display):
    """Return everything printed through the display fixture so far."""
    return lambda: display.console.file.getvalue()


@pytest.fixture
def mock_git_service():
    """Create a mock GitService for a clean repository on main."""
    service = Mock(spec=GitService)
    service.default_branch.return_value = "main"
    service.current_ref.return_value = "refs/heads/main"
    service.is_clean.return_value = True
    service.pull.return_value = True
    service.list_branches.return_value = []
    return service


@pytest.fixture
def upstream_commit(origin_path, temp_dir):
    """Return a function that pushes a new commit on origin/main."""
    counter = {"clones": 0}

    def _push(filename="upstream.txt"):
        counter["clones"] += 1
        push_upstream_commit(origin_path, temp_dir / f"clone-{counter['clones']}", filename)

    return _push


@pytest.fixture
def make_commit():
    """Return commit_file for tests that need extra commits."""
    return commit_file
