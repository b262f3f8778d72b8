"""Lets the operator pick the branch autopush works on."""

from typing import Optional

from ..protocols import GitSessionProtocol, PrompterProtocol, ReporterProtocol
from ..schemas import BranchSet
from .git_session import GitSessionError


class BranchSelector:
    """Lists local branches and switches to the one the operator picks."""

    def __init__(
        self,
        session: GitSessionProtocol,
        prompter: PrompterProtocol,
        reporter: ReporterProtocol,
    ):
        self.session = session
        self.prompter = prompter
        self.reporter = reporter

    def list_branches(self) -> Optional[BranchSet]:
        try:
            return self.session.list_local_branches()
        except GitSessionError as e:
            self.reporter.error(f"Error getting branches: {e}")
            return None

    def switch_branch(self, name: str) -> bool:
        """Check out `name`. On failure stay on the current branch."""
        spinner = self.reporter.spinner(f"Switching to branch {name}...")
        try:
            self.session.checkout(name)
        except GitSessionError as e:
            spinner.fail(f"Failed to switch branch: {e}")
            self.reporter.warning("Continuing on current branch...")
            return False
        spinner.succeed(f"Switched to branch {name}")
        return True

    def select_branch(self) -> Optional[str]:
        """Prompt for a branch, defaulting to the current one.

        Returns the branch the working tree ends up on, or None when the
        branches could not be listed.
        """
        branches = self.list_branches()
        if branches is None:
            return None
        if not branches.all:
            # Unborn branch, nothing to choose from yet
            self.reporter.success(f"Staying on current branch: {branches.current}")
            return branches.current

        choice = self.prompter.choose(
            "Select the branch to work on",
            branches.all,
            default=branches.current,
        )
        if choice != branches.current:
            if self.switch_branch(choice):
                return choice
            return branches.current

        self.reporter.success(f"Staying on current branch: {branches.current}")
        return branches.current
