"""Factory for creating git sessions."""

from ..config.settings import Settings
from ..protocols.git_session_protocol import GitSessionProtocol
from .git_session import GitSession


def create_git_session(repo_path: str = ".") -> GitSessionProtocol:
    """
    Create a GitSession bound to a working directory.

    Args:
        repo_path: Directory inside the repository to watch

    Returns:
        GitSessionProtocol implementation
    """
    return GitSession(repo_path)


def create_git_session_from_settings(settings: Settings) -> GitSessionProtocol:
    """
    Create a GitSession using application settings.

    Args:
        settings: Application settings

    Returns:
        GitSessionProtocol implementation
    """
    return create_git_session(repo_path=settings.AUTOPUSH_REPO_PATH)
