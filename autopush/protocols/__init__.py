"""Protocols for the application."""

from .git_session_protocol import GitSessionProtocol
from .presentation_protocol import (
    PrompterProtocol,
    ReporterProtocol,
    SpinnerProtocol,
)

__all__ = [
    "GitSessionProtocol",
    "PrompterProtocol",
    "ReporterProtocol",
    "SpinnerProtocol",
]
