"""Services for the application."""

from .batch_committer import BatchCommitter, build_commit_message
from .branch_selector import BranchSelector
from .git_session import GitSession, GitSessionError, classify_failure
from .git_session_factory import (
    create_git_session,
    create_git_session_from_settings,
)
from .push_reconciler import PushReconciler
from .status_reader import StatusReader
from .sync_coordinator import SyncCoordinator
from .threshold_waiter import ThresholdWaiter

__all__ = [
    "BatchCommitter",
    "BranchSelector",
    "GitSession",
    "GitSessionError",
    "PushReconciler",
    "StatusReader",
    "SyncCoordinator",
    "ThresholdWaiter",
    "build_commit_message",
    "classify_failure",
    "create_git_session",
    "create_git_session_from_settings",
]
