"""Terminal output and prompts built on rich."""

from typing import Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt


class Spinner:
    """A rich status spinner that ends with a success or failure line."""

    def __init__(self, console: Console, label: str):
        self.console = console
        self.text = label
        self._status = console.status(label)
        self._running = False

    def start(self) -> "Spinner":
        self._status.start()
        self._running = True
        return self

    def update(self, text: str) -> None:
        self.text = text
        self._status.update(text)

    def _stop(self) -> None:
        if self._running:
            self._status.stop()
            self._running = False

    def succeed(self, text: str) -> None:
        self._stop()
        self.console.print(f"[green]✔[/green] {text}")

    def fail(self, text: str) -> None:
        self._stop()
        self.console.print(f"[red]✖[/red] {text}")


class ConsoleReporter:
    """Prints progress and results to the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def spinner(self, label: str) -> Spinner:
        return Spinner(self.console, label).start()

    def info(self, message: str) -> None:
        self.console.print(f"[blue]{message}[/blue]")

    def success(self, message: str) -> None:
        self.console.print(f"[green]{message}[/green]")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]{message}[/yellow]")

    def error(self, message: str) -> None:
        self.console.print(f"[red]{message}[/red]")


class ConsolePrompter:
    """Asks the operator questions on the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def choose(
        self, message: str, choices: Sequence[str], default: Optional[str] = None
    ) -> str:
        if default is None:
            return Prompt.ask(message, choices=list(choices), console=self.console)
        return Prompt.ask(
            message, choices=list(choices), default=default, console=self.console
        )

    def ask(self, message: str) -> str:
        answer = Prompt.ask(
            message, default="", show_default=False, console=self.console
        )
        return answer.strip()
