from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values can also be placed in a .env file in the directory autopush is
    started from. Command line options override whatever is loaded here.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Repository watched and pushed
    AUTOPUSH_REPO_PATH: str = "."
    AUTOPUSH_REMOTE_NAME: str = "origin"

    # Batching: files required before a batch runs, files committed per
    # batch (0 means all)
    AUTOPUSH_THRESHOLD: int = Field(default=5, ge=1)
    AUTOPUSH_BATCH_LIMIT: int = Field(default=5, ge=0)

    # Polling, in seconds
    AUTOPUSH_POLL_INTERVAL: float = Field(default=5.0, ge=0)
    AUTOPUSH_RETRY_INTERVAL: float = Field(default=5.0, ge=0)


@lru_cache
def get_settings() -> Settings:
    return Settings()
