"""Reads the changed paths of the working tree."""

from typing import List, Optional

from ..protocols import GitSessionProtocol, ReporterProtocol
from ..schemas import ChangedFile
from .git_session import GitSessionError


class StatusReader:
    """Queries git for the current list of changed files."""

    def __init__(self, session: GitSessionProtocol, reporter: ReporterProtocol):
        self.session = session
        self.reporter = reporter

    def read(self) -> Optional[List[ChangedFile]]:
        """Return changed files, or None when the status cannot be read."""
        try:
            if not self.session.is_repository():
                self.reporter.error("Current directory is not a git repository.")
                return None
            return self.session.get_status()
        except GitSessionError as e:
            self.reporter.error(f"Error checking git status: {e}")
            return None
