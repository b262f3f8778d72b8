"""Shared fixtures: a scripted git session and mock presentation objects."""

from pathlib import Path
from typing import List, Optional, Sequence
from unittest.mock import Mock

import pytest

from autopush.presentation import ConsolePrompter, ConsoleReporter
from autopush.schemas import BranchSet, ChangedFile
from autopush.services.git_session import GitSessionError


class FakeGitSession:
    """In-memory GitSessionProtocol that records every call.

    push_errors and pull_errors are consumed one entry per call; an entry of
    None means that call succeeds, a string is raised as GitSessionError.
    Calls beyond the end of the list succeed.
    """

    def __init__(
        self,
        files: Optional[Sequence[ChangedFile]] = None,
        remotes: Optional[Sequence[str]] = None,
        branch: str = "main",
        branches: Optional[Sequence[str]] = None,
        push_errors: Optional[Sequence[Optional[str]]] = None,
        pull_errors: Optional[Sequence[Optional[str]]] = None,
        add_remote_error: Optional[str] = None,
        fail_paths: Sequence[str] = (),
        is_repo: bool = True,
    ):
        self.repo_path = Path(".")
        self.calls: List[tuple] = []
        self.files = list(files or [])
        self.remotes = list(remotes or [])
        self.branch = branch
        self.branches = list(branches if branches is not None else [branch])
        self.push_errors = list(push_errors or [])
        self.pull_errors = list(pull_errors or [])
        self.add_remote_error = add_remote_error
        self.fail_paths = set(fail_paths)
        self.is_repo = is_repo
        self.staged: List[str] = []

    def calls_named(self, name: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == name]

    def _consume(self, queue: list) -> None:
        if queue:
            error = queue.pop(0)
            if error:
                raise GitSessionError(error)

    def is_repository(self) -> bool:
        self.calls.append(("is_repository",))
        return self.is_repo

    def get_status(self) -> List[ChangedFile]:
        self.calls.append(("get_status",))
        return list(self.files)

    def stage(self, path: str) -> None:
        self.calls.append(("stage", path))
        if path in self.fail_paths:
            raise GitSessionError(f"fatal: pathspec '{path}' did not match any files")
        self.staged.append(path)

    def commit(self, message: str) -> None:
        self.calls.append(("commit", message))
        if not self.staged:
            raise GitSessionError("nothing to commit, working tree clean")
        committed = set(self.staged)
        self.staged = []
        self.files = [f for f in self.files if f.path not in committed]

    def push(self, remote=None, branch=None, set_upstream=False) -> None:
        self.calls.append(("push", remote, branch, set_upstream))
        self._consume(self.push_errors)

    def pull(
        self, remote, branch, allow_unrelated_histories=False, rebase=False
    ) -> None:
        self.calls.append(("pull", remote, branch, allow_unrelated_histories, rebase))
        self._consume(self.pull_errors)

    def get_remotes(self) -> List[str]:
        self.calls.append(("get_remotes",))
        return list(self.remotes)

    def add_remote(self, name: str, url: str) -> None:
        self.calls.append(("add_remote", name, url))
        if self.add_remote_error:
            raise GitSessionError(self.add_remote_error)
        self.remotes.append(name)

    def list_local_branches(self) -> BranchSet:
        self.calls.append(("list_local_branches",))
        return BranchSet(all=list(self.branches), current=self.branch)

    def checkout(self, branch: str) -> None:
        self.calls.append(("checkout", branch))
        if branch not in self.branches:
            raise GitSessionError(
                f"error: pathspec '{branch}' did not match any file(s) known to git"
            )
        self.branch = branch

    def current_branch(self) -> str:
        self.calls.append(("current_branch",))
        return self.branch


def make_files(count: int, prefix: str = "file") -> List[ChangedFile]:
    return [ChangedFile(path=f"{prefix}{i}.txt", status="??") for i in range(count)]


@pytest.fixture
def fake_session():
    """Factory for FakeGitSession instances."""
    return FakeGitSession


@pytest.fixture
def changed_files():
    """Factory for lists of untracked ChangedFile entries."""
    return make_files


@pytest.fixture
def reporter() -> Mock:
    return Mock(spec=ConsoleReporter)


@pytest.fixture
def prompter() -> Mock:
    return Mock(spec=ConsolePrompter)
