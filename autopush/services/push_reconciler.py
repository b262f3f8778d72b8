"""Pushes the current branch, recovering from the usual rejection cases.

A plain push is tried first. When git refuses it, the error is classified
and one of the recovery paths below is taken:

* no upstream and a remote named origin exists: push with ``-u``
* no upstream and no remote: ask the operator for a URL, add it as
  origin and push with ``-u``
* the ``-u`` push is rejected because the remote has history: pull with
  unrelated histories allowed, then fall back to ``pull --rebase``
* a plain push is rejected because the remote is ahead: ``pull --rebase``
  and push again

Every path ends in a reported PushResult. Nothing is raised to the caller.
"""

from typing import Optional

from ..protocols import (
    GitSessionProtocol,
    PrompterProtocol,
    ReporterProtocol,
    SpinnerProtocol,
)
from ..schemas import PushOutcome, PushResult, SyncFailure
from .git_session import GitSessionError

RECONCILABLE_FAILURES = (SyncFailure.REMOTE_AHEAD, SyncFailure.NON_FAST_FORWARD)


class PushReconciler:
    """Runs the push and its fallback strategies."""

    def __init__(
        self,
        session: GitSessionProtocol,
        prompter: PrompterProtocol,
        reporter: ReporterProtocol,
        remote_name: str = "origin",
    ):
        self.session = session
        self.prompter = prompter
        self.reporter = reporter
        self.remote_name = remote_name

    def _finish(
        self,
        spinner: SpinnerProtocol,
        outcome: PushOutcome,
        message: str,
        strategy: str,
    ) -> PushResult:
        if outcome == PushOutcome.SUCCESS:
            spinner.succeed(message)
        else:
            spinner.fail(message)
        return PushResult(outcome=outcome, message=message, strategy=strategy)

    def push_changes(self) -> PushResult:
        """Push the current branch and reconcile with the remote if needed."""
        spinner = self.reporter.spinner("Pushing changes...")
        try:
            self.session.push()
        except GitSessionError as e:
            failure = e.failure
            if failure == SyncFailure.NO_UPSTREAM:
                spinner.fail("No remote/upstream configured.")
                return self._handle_no_upstream()
            if failure == SyncFailure.REMOTE_AHEAD:
                return self._pull_rebase_and_push(spinner)
            return self._finish(
                spinner, PushOutcome.FATAL, f"Failed to push changes: {e}", "push"
            )

        return self._finish(
            spinner, PushOutcome.SUCCESS, "Changes pushed to remote.", "push"
        )

    def _handle_no_upstream(self) -> PushResult:
        try:
            remotes = self.session.get_remotes()
        except GitSessionError as e:
            message = f"Failed to list remotes: {e}"
            self.reporter.error(message)
            return PushResult(
                outcome=PushOutcome.FATAL, message=message, strategy="list_remotes"
            )

        if self.remote_name in remotes:
            return self._link_upstream()
        return self._prompt_for_remote()

    def _link_upstream(self) -> PushResult:
        spinner = self.reporter.spinner(
            f'Remote "{self.remote_name}" found. Attempting to link upstream...'
        )
        branch: Optional[str] = None
        try:
            branch = self.session.current_branch()
            self.session.push(self.remote_name, branch, set_upstream=True)
        except GitSessionError as e:
            spinner.fail(f"Failed to link upstream: {e}")
            # The remote already exists, so syncing needs no URL
            return self._sync_with_remote(branch)

        return self._finish(
            spinner,
            PushOutcome.SUCCESS,
            "Upstream linked and changes pushed!",
            "link_upstream",
        )

    def _prompt_for_remote(self) -> PushResult:
        self.reporter.warning(
            "It looks like this repository is not connected to a remote server."
        )
        remote_url = self.prompter.ask(
            "Enter the GitHub/Remote URL to connect to (or leave empty to skip)"
        ).strip()
        if not remote_url:
            message = "No remote URL given, skipping push."
            self.reporter.warning(message)
            return PushResult(
                outcome=PushOutcome.NO_REMOTE_CONFIGURED,
                message=message,
                strategy="prompt_for_remote",
            )

        try:
            self.session.add_remote(self.remote_name, remote_url)
        except GitSessionError:
            self.reporter.warning(
                f'Remote "{self.remote_name}" might already exist, proceeding...'
            )
        return self._sync_with_remote()

    def _sync_with_remote(self, branch: Optional[str] = None) -> PushResult:
        spinner = self.reporter.spinner("Syncing with remote...")
        if branch is None:
            try:
                branch = self.session.current_branch()
            except GitSessionError as e:
                return self._finish(
                    spinner,
                    PushOutcome.FATAL,
                    f"Failed to read current branch: {e}",
                    "sync_with_remote",
                )

        try:
            self.session.push(self.remote_name, branch, set_upstream=True)
        except GitSessionError as e:
            if e.failure in RECONCILABLE_FAILURES:
                return self._reconcile(spinner, branch)
            return self._finish(
                spinner, PushOutcome.FATAL, f"Failed to push: {e}", "sync_with_remote"
            )

        return self._finish(
            spinner,
            PushOutcome.SUCCESS,
            "Remote configured and changes pushed!",
            "sync_with_remote",
        )

    def _reconcile(self, spinner: SpinnerProtocol, branch: str) -> PushResult:
        spinner.update("Remote contains changes. Reconciling...")
        try:
            self.session.pull(self.remote_name, branch, allow_unrelated_histories=True)
            self.session.push(self.remote_name, branch, set_upstream=True)
        except GitSessionError:
            return self._rebase_reconcile(spinner, branch)

        return self._finish(
            spinner, PushOutcome.SUCCESS, "Reconciled and pushed!", "reconcile"
        )

    def _rebase_reconcile(self, spinner: SpinnerProtocol, branch: str) -> PushResult:
        spinner.update("Trying rebase...")
        try:
            self.session.pull(self.remote_name, branch, rebase=True)
            self.session.push(self.remote_name, branch, set_upstream=True)
        except GitSessionError as e:
            return self._finish(
                spinner,
                PushOutcome.FATAL,
                f"Critical failure syncing with remote: {e}",
                "rebase_reconcile",
            )

        return self._finish(
            spinner, PushOutcome.SUCCESS, "Rebased and pushed!", "rebase_reconcile"
        )

    def _pull_rebase_and_push(self, spinner: SpinnerProtocol) -> PushResult:
        spinner.update("Remote is ahead. Pulling changes...")
        try:
            branch = self.session.current_branch()
            self.session.pull(self.remote_name, branch, rebase=True)
            self.session.push()
        except GitSessionError:
            return self._finish(
                spinner,
                PushOutcome.REMOTE_AHEAD,
                "Failed to auto-sync. Please pull manually to resolve conflicts.",
                "pull_rebase",
            )

        return self._finish(
            spinner,
            PushOutcome.SUCCESS,
            "Pulled remote changes and pushed.",
            "pull_rebase",
        )
