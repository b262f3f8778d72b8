"""Coordinates the commit-and-push cycle."""

import asyncio
from typing import List, Optional, Tuple

from ..protocols import GitSessionProtocol, PrompterProtocol, ReporterProtocol
from ..schemas import BatchResult, ChangedFile, PushResult
from .batch_committer import BatchCommitter
from .branch_selector import BranchSelector
from .push_reconciler import PushReconciler
from .status_reader import StatusReader
from .threshold_waiter import ThresholdWaiter


class SyncCoordinator:
    """Runs branch selection once, then commits and pushes batches forever."""

    def __init__(
        self,
        session: GitSessionProtocol,
        prompter: PrompterProtocol,
        reporter: ReporterProtocol,
        threshold: int = 5,
        batch_limit: int = 5,
        poll_interval: float = 5.0,
        retry_interval: float = 5.0,
        remote_name: str = "origin",
    ):
        self.session = session
        self.reporter = reporter
        self.threshold = threshold
        self.batch_limit = batch_limit
        self.retry_interval = retry_interval

        self.status_reader = StatusReader(session, reporter)
        self.committer = BatchCommitter(session, reporter)
        self.reconciler = PushReconciler(session, prompter, reporter, remote_name)
        self.waiter = ThresholdWaiter(self.status_reader, reporter, poll_interval)
        self.branch_selector = BranchSelector(session, prompter, reporter)

    async def select_branch(self) -> Optional[str]:
        return await asyncio.to_thread(self.branch_selector.select_branch)

    async def commit_and_push(
        self, files: List[ChangedFile]
    ) -> Tuple[BatchResult, PushResult]:
        batch = await asyncio.to_thread(
            self.committer.commit_batch, files, self.batch_limit
        )
        push = await asyncio.to_thread(self.reconciler.push_changes)
        self.reporter.info("\nWaiting for next batch...")
        return batch, push

    async def run_cycle(self) -> bool:
        """
        Run one read/wait/commit/push cycle.

        Returns False when the status could not be read and the cycle was
        skipped after the retry delay, True otherwise.
        """
        files = await asyncio.to_thread(self.status_reader.read)
        if files is None:
            self.reporter.error(
                f"Error reading git status. Retrying in {self.retry_interval:g}s..."
            )
            await asyncio.sleep(self.retry_interval)
            return False

        if len(files) < self.threshold:
            self.reporter.warning(
                f"\nOnly {len(files)} changed files found "
                f"(Threshold: {self.threshold})."
            )
            files = await self.waiter.wait(self.threshold)

        await self.commit_and_push(files)
        return True

    async def run_forever(self) -> None:
        """Select a branch, then cycle until the process is interrupted."""
        await self.select_branch()
        while True:
            await self.run_cycle()
