"""Real git repositories for end-to-end tests."""

from pathlib import Path
from typing import Callable

import pytest
from git import Repo


def configure_identity(repo: Repo) -> None:
    with repo.config_writer() as config:
        config.set_value("user", "name", "Autopush Test")
        config.set_value("user", "email", "autopush@example.com")
        config.set_value("commit", "gpgsign", "false")
        # Keep pushes without an upstream failing regardless of global config
        config.set_value("push", "default", "simple")
        config.set_value("push", "autoSetupRemote", "false")


def commit_file(repo: Repo, name: str, content: str, message: str) -> None:
    path = Path(repo.working_tree_dir) / name
    path.write_text(content, encoding="utf-8")
    repo.git.add(name)
    repo.git.commit("-m", message)


@pytest.fixture
def remote_path(tmp_path) -> Path:
    """Path of an empty bare repository acting as the remote."""
    path = tmp_path / "remote.git"
    Repo.init(str(path), bare=True)
    return path


@pytest.fixture
def work_repo(tmp_path, remote_path) -> Repo:
    """Repository with one commit and an 'origin' remote but no upstream."""
    repo = Repo.init(str(tmp_path / "work"))
    configure_identity(repo)
    commit_file(repo, "README.md", "# work\n", "Initial commit")
    repo.create_remote("origin", str(remote_path))
    return repo


@pytest.fixture
def tracked_repo(work_repo) -> Repo:
    """work_repo with its branch pushed and tracking origin."""
    work_repo.git.push("-u", "origin", work_repo.active_branch.name)
    return work_repo


@pytest.fixture
def other_clone(tmp_path, remote_path) -> Callable[[], Repo]:
    """Factory for a second clone of the remote."""

    def _clone() -> Repo:
        repo = Repo.clone_from(str(remote_path), str(tmp_path / "other"))
        configure_identity(repo)
        return repo

    return _clone


@pytest.fixture
def make_repo(tmp_path) -> Callable[[str], Repo]:
    """Factory for freshly initialised, configured repositories."""

    def _make(name: str) -> Repo:
        repo = Repo.init(str(tmp_path / name))
        configure_identity(repo)
        return repo

    return _make


@pytest.fixture
def commit() -> Callable[[Repo, str, str, str], None]:
    """Write, stage and commit a single file."""
    return commit_file
