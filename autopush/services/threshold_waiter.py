"""Polls the working tree until enough files have changed."""

import asyncio
from typing import List

from ..protocols import ReporterProtocol
from ..schemas import ChangedFile
from .status_reader import StatusReader

DEFAULT_POLL_INTERVAL = 5.0


class ThresholdWaiter:
    """Suspends until the changed-file count reaches a threshold."""

    def __init__(
        self,
        status_reader: StatusReader,
        reporter: ReporterProtocol,
        interval: float = DEFAULT_POLL_INTERVAL,
    ):
        self.status_reader = status_reader
        self.reporter = reporter
        self.interval = interval

    async def wait(self, threshold: int = 5) -> List[ChangedFile]:
        """Poll every `interval` seconds and return the first list that is
        at least `threshold` long. An unreadable status counts as zero."""
        label = f"Waiting for {threshold} unstaged files..."
        spinner = self.reporter.spinner(label)
        while True:
            await asyncio.sleep(self.interval)
            files = await asyncio.to_thread(self.status_reader.read)
            count = len(files) if files else 0
            spinner.update(f"{label} (Current: {count})")
            if count >= threshold:
                spinner.succeed(f"Threshold reached! Found {count} files.")
                return files or []
