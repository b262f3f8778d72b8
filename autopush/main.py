import asyncio
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .config.settings import Settings, get_settings
from .presentation import ConsolePrompter, ConsoleReporter
from .services import SyncCoordinator, create_git_session_from_settings

console = Console()


def build_coordinator(settings: Settings) -> SyncCoordinator:
    """Wire a SyncCoordinator from settings and terminal collaborators."""
    return SyncCoordinator(
        session=create_git_session_from_settings(settings),
        prompter=ConsolePrompter(console),
        reporter=ConsoleReporter(console),
        threshold=settings.AUTOPUSH_THRESHOLD,
        batch_limit=settings.AUTOPUSH_BATCH_LIMIT,
        poll_interval=settings.AUTOPUSH_POLL_INTERVAL,
        retry_interval=settings.AUTOPUSH_RETRY_INTERVAL,
        remote_name=settings.AUTOPUSH_REMOTE_NAME,
    )


@click.command()
@click.option(
    "--path",
    "repo_path",
    type=click.Path(file_okay=False),
    default=None,
    help="Working directory to watch (default: AUTOPUSH_REPO_PATH or '.').",
)
@click.option(
    "--threshold",
    type=click.IntRange(min=1),
    default=None,
    help="Changed files required before a batch is committed.",
)
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=None,
    help="Files committed per batch, 0 for all.",
)
@click.option(
    "--interval",
    type=click.FloatRange(min=0),
    default=None,
    help="Seconds between status polls.",
)
@click.version_option(__version__, prog_name="autopush")
def cli(
    repo_path: Optional[str],
    threshold: Optional[int],
    limit: Optional[int],
    interval: Optional[float],
) -> None:
    """Automatically commit changed files in batches and push them."""
    overrides = {
        "AUTOPUSH_REPO_PATH": repo_path,
        "AUTOPUSH_THRESHOLD": threshold,
        "AUTOPUSH_BATCH_LIMIT": limit,
        "AUTOPUSH_POLL_INTERVAL": interval,
    }
    settings = get_settings().model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )

    console.print("[blue]Running autopush in continuous mode...[/blue]")
    console.print("[dim]Press Ctrl+C to stop.[/dim]")

    coordinator = build_coordinator(settings)
    try:
        asyncio.run(coordinator.run_forever())
    except KeyboardInterrupt:
        console.print("\n[yellow]Stopped.[/yellow]")


if __name__ == "__main__":
    cli()
