"""Stages and commits changed files one at a time."""

from datetime import datetime, timezone
from typing import Optional, Sequence

from ..protocols import GitSessionProtocol, ReporterProtocol
from ..schemas import BatchResult, ChangedFile
from .git_session import GitSessionError

DEFAULT_BATCH_LIMIT = 5


def build_commit_message(path: str, when: Optional[datetime] = None) -> str:
    """Commit message for a single automatically synced path."""
    timestamp = (when or datetime.now(timezone.utc)).isoformat()
    return f"Update {path}: Automated sync {timestamp}"


class BatchCommitter:
    """Commits a prefix of the changed-file list, one commit per file."""

    def __init__(self, session: GitSessionProtocol, reporter: ReporterProtocol):
        self.session = session
        self.reporter = reporter

    def commit_batch(
        self, files: Sequence[ChangedFile], limit: Optional[int] = DEFAULT_BATCH_LIMIT
    ) -> BatchResult:
        """
        Stage and commit each of the first `limit` files.

        A failure on one file is reported and the remaining files are still
        processed. A falsy limit processes every file.
        """
        result = BatchResult()
        if not files:
            self.reporter.warning("No files to process.")
            return result

        selected = list(files[:limit]) if limit else list(files)
        self.reporter.success(f"Processing {len(selected)} files...")

        seen = set()
        for changed in selected:
            if changed.path in seen:
                continue
            seen.add(changed.path)

            spinner = self.reporter.spinner(f"Processing {changed.path}...")
            try:
                self.session.stage(changed.path)
                self.session.commit(build_commit_message(changed.path))
            except GitSessionError as e:
                spinner.fail(f"Failed to commit {changed.path}: {e}")
                result.failed.append(changed.path)
                continue
            spinner.succeed(f"Committed: {changed.path}")
            result.committed.append(changed.path)

        return result
