"""Git session protocol interface."""

from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable

from ..schemas import BranchSet, ChangedFile


@runtime_checkable
class GitSessionProtocol(Protocol):
    """Protocol for the git operations autopush relies on.

    Implementations raise GitSessionError for every failure of the
    underlying tool.
    """

    @property
    def repo_path(self) -> Path:
        """Working directory the session is bound to."""
        ...

    def is_repository(self) -> bool:
        """Return True if the working directory is inside a git repository."""
        ...

    def get_status(self) -> List[ChangedFile]:
        """List changed and untracked paths."""
        ...

    def stage(self, path: str) -> None:
        """Stage a single path, including deletions."""
        ...

    def commit(self, message: str) -> None:
        """Commit whatever is staged."""
        ...

    def push(
        self,
        remote: Optional[str] = None,
        branch: Optional[str] = None,
        set_upstream: bool = False,
    ) -> None:
        """Push, either plainly or to an explicit remote and branch."""
        ...

    def pull(
        self,
        remote: str,
        branch: str,
        allow_unrelated_histories: bool = False,
        rebase: bool = False,
    ) -> None:
        """Pull a remote branch, merging or rebasing."""
        ...

    def get_remotes(self) -> List[str]:
        """Names of the configured remotes."""
        ...

    def add_remote(self, name: str, url: str) -> None:
        """Register a new remote."""
        ...

    def list_local_branches(self) -> BranchSet:
        """Local branch names and the current branch."""
        ...

    def checkout(self, branch: str) -> None:
        """Switch the working tree to another branch."""
        ...

    def current_branch(self) -> str:
        """Name of the checked out branch."""
        ...
