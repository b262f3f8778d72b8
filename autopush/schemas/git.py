from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SyncFailure(str, Enum):
    """Categories of push/pull failures the reconciler acts on."""

    NO_UPSTREAM = "no_upstream"
    REMOTE_AHEAD = "remote_ahead"
    NON_FAST_FORWARD = "non_fast_forward"
    OTHER = "other"


class PushOutcome(str, Enum):
    """Terminal states of a push attempt."""

    SUCCESS = "success"
    NO_REMOTE_CONFIGURED = "no_remote_configured"
    REMOTE_AHEAD = "remote_ahead"
    FATAL = "fatal"


class ChangedFile(BaseModel):
    """A working tree path reported by git status."""

    path: str
    status: str  # Porcelain XY code, e.g. ' M', 'A ', '??', 'R '


class BranchSet(BaseModel):
    """Local branches and the one currently checked out."""

    all: List[str] = Field(default_factory=list)
    current: str


class BatchResult(BaseModel):
    """Paths committed and paths that failed during one batch."""

    committed: List[str] = Field(default_factory=list)
    failed: List[str] = Field(default_factory=list)


class PushResult(BaseModel):
    """Result of a push reconciliation run."""

    outcome: PushOutcome
    message: str
    strategy: Optional[str] = None  # Step that produced the outcome

    @property
    def ok(self) -> bool:
        return self.outcome == PushOutcome.SUCCESS
