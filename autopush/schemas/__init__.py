"""Schemas for the application."""

from .git import (
    BatchResult,
    BranchSet,
    ChangedFile,
    PushOutcome,
    PushResult,
    SyncFailure,
)

__all__ = [
    "BatchResult",
    "BranchSet",
    "ChangedFile",
    "PushOutcome",
    "PushResult",
    "SyncFailure",
]
