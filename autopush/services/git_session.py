"""GitPython-backed session bound to one working directory."""

from pathlib import Path
from typing import List, Optional

from git import Repo
from git.exc import CommandError, InvalidGitRepositoryError, NoSuchPathError

from ..schemas import BranchSet, ChangedFile, SyncFailure

NO_UPSTREAM_MARKERS = ("no configured push destination", "no upstream branch")
REMOTE_AHEAD_MARKERS = ("fetch first", "rejected", "divergent branches")
NON_FAST_FORWARD_MARKERS = ("non-fast-forward",)


def classify_failure(message: str) -> SyncFailure:
    """Map git's human readable error text onto a SyncFailure tag."""
    text = message.lower()
    if any(marker in text for marker in NO_UPSTREAM_MARKERS):
        return SyncFailure.NO_UPSTREAM
    if any(marker in text for marker in REMOTE_AHEAD_MARKERS):
        return SyncFailure.REMOTE_AHEAD
    if any(marker in text for marker in NON_FAST_FORWARD_MARKERS):
        return SyncFailure.NON_FAST_FORWARD
    return SyncFailure.OTHER


def command_output(error: CommandError) -> str:
    """Text git printed for a failed command, without the command line.

    GitPython keeps stderr and stdout wrapped as `stderr: '...'`. When
    both are empty (e.g. the git binary is missing) only the status is used.
    """
    for label in ("stderr", "stdout"):
        text = (getattr(error, label, "") or "").strip()
        prefix = f"{label}: '"
        if text.startswith(prefix) and text.endswith("'"):
            text = text[len(prefix) : -1].strip()
        if text:
            return text
    return f"git command failed: {error.status}"


class GitSessionError(RuntimeError):
    """Raised when a git operation fails."""

    def __init__(self, message: str, command: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.command = command

    @property
    def failure(self) -> SyncFailure:
        return classify_failure(self.message)


def parse_porcelain(output: str) -> List[ChangedFile]:
    """Parse `git status --porcelain=v1 -z` output."""
    entries = output.split("\0")
    files = []
    i = 0
    while i < len(entries):
        entry = entries[i]
        i += 1
        if len(entry) < 4:
            continue
        status, path = entry[:2], entry[3:]
        if status[0] in ("R", "C"):
            # The source path of a rename or copy follows as its own entry
            i += 1
        files.append(ChangedFile(path=path, status=status))
    return files


class GitSession:
    """Runs git operations for the working directory autopush watches."""

    def __init__(self, repo_path: str = "."):
        self.repo_path = Path(repo_path)
        self.repo: Optional[Repo] = None

    def _get_repo(self) -> Repo:
        if self.repo is None:
            try:
                self.repo = Repo(self.repo_path, search_parent_directories=True)
            except (InvalidGitRepositoryError, NoSuchPathError) as e:
                raise GitSessionError(
                    f"Not a git repository: {self.repo_path}"
                ) from e
        return self.repo

    def _git(self, command: str, *args: str) -> str:
        repo = self._get_repo()
        try:
            return getattr(repo.git, command)(*args)
        except CommandError as e:
            raise GitSessionError(command_output(e), command=command) from e

    def is_repository(self) -> bool:
        try:
            self._get_repo()
        except GitSessionError:
            return False
        return True

    def get_status(self) -> List[ChangedFile]:
        output = self._git("status", "--porcelain=v1", "-z", "--untracked-files=all")
        return parse_porcelain(output)

    def stage(self, path: str) -> None:
        self._git("add", "--all", "--", path)

    def commit(self, message: str) -> None:
        self._git("commit", "-m", message)

    def push(
        self,
        remote: Optional[str] = None,
        branch: Optional[str] = None,
        set_upstream: bool = False,
    ) -> None:
        args = ["-u"] if set_upstream else []
        args.extend(part for part in (remote, branch) if part)
        self._git("push", *args)

    def pull(
        self,
        remote: str,
        branch: str,
        allow_unrelated_histories: bool = False,
        rebase: bool = False,
    ) -> None:
        if rebase:
            options = ["--rebase"]
        else:
            options = ["--no-rebase", "--no-edit"]
        if allow_unrelated_histories:
            options.append("--allow-unrelated-histories")
        self._git("pull", *options, remote, branch)

    def get_remotes(self) -> List[str]:
        return [remote.name for remote in self._get_repo().remotes]

    def add_remote(self, name: str, url: str) -> None:
        self._git("remote", "add", name, url)

    def list_local_branches(self) -> BranchSet:
        repo = self._get_repo()
        try:
            current = repo.active_branch.name
        except TypeError as e:
            # Detached HEAD
            raise GitSessionError(f"No branch checked out: {e}") from e
        return BranchSet(all=[head.name for head in repo.heads], current=current)

    def checkout(self, branch: str) -> None:
        self._git("checkout", branch)

    def current_branch(self) -> str:
        return self._git("rev-parse", "--abbrev-ref", "HEAD").strip()
