from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional, Type, TypeVar

import click
from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner as RichSpinner
from rich.text import Text


class LogLevel(Enum):
    SUCCESS = click.style("✓ ", fg="green", bold=True)
    ERROR = "❌"


T = TypeVar("T", bound="ConsoleLogger")


class ConsoleLogger:
    """Singleton wrapper around click and rich for the `skyapi` terminal output."""

    _instance: Optional["ConsoleLogger"] = None

    def __new__(cls: Type[T]) -> T:
        if cls._instance is None:
            cls._instance = super(ConsoleLogger, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance  # type: ignore

    def __init__(self):
        if not getattr(self, "_initialized", False):
            self._console = Console(stderr=True)
            self._spinner_live: Optional[Live] = None
            self._spinner = RichSpinner("dots")
            self._initialized = True

    def _stop_spinner_if_active(self) -> None:
        if self._spinner_live and self._spinner_live.is_started:
            self._spinner_live.stop()
            self._spinner_live = None

    def log(self, message: str, level: LogLevel, fg: Optional[str] = None) -> None:
        """Log a message with the specified level and optional color.

        Errors go to stderr so the JSON printed by `skyapi invoke` stays parseable.
        """
        self._stop_spinner_if_active()

        if fg:
            formatted_message = f"{level.value} {click.style(message, fg=fg)}"
        else:
            formatted_message = f"{level.value} {message}"

        click.echo(formatted_message, err=level == LogLevel.ERROR)

    def success(self, message: str) -> None:
        self.log(message, LogLevel.SUCCESS)

    def error(self, message: str) -> None:
        """Log an error message and exit the current command with status 1."""
        self.log(message, LogLevel.ERROR, "red")
        click.get_current_context().exit(1)

    @contextmanager
    def spinner(self, message: str = "") -> Iterator[None]:
        """Show a spinner on stderr while the block runs."""
        try:
            self._stop_spinner_if_active()

            self._spinner.text = Text(message)
            self._spinner_live = Live(
                self._spinner,
                console=self._console,
                refresh_per_second=10,
                transient=True,
                auto_refresh=True,
            )
            self._spinner_live.start()
            yield
        finally:
            self._stop_spinner_if_active()
