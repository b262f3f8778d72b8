"""Interfaces for operator-facing output and prompts."""

from typing import Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class SpinnerProtocol(Protocol):
    """A running progress indicator."""

    def update(self, text: str) -> None: ...

    def succeed(self, text: str) -> None: ...

    def fail(self, text: str) -> None: ...


@runtime_checkable
class ReporterProtocol(Protocol):
    """Reports progress and results to the operator."""

    def spinner(self, label: str) -> SpinnerProtocol:
        """Start a spinner labelled with label."""
        ...

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


@runtime_checkable
class PrompterProtocol(Protocol):
    """Asks the operator for input."""

    def choose(
        self, message: str, choices: Sequence[str], default: Optional[str] = None
    ) -> str:
        """Single choice from a list."""
        ...

    def ask(self, message: str) -> str:
        """Free text answer, empty string when skipped."""
        ...
