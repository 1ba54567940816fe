"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Supports verbosity levels and the --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner

from .models import RunSummary


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Templates created")
        >>> with handler.spinner("Creating media..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner while a step runs.

        Args:
            message: Message to display with spinner

        Example:
            >>> with handler.spinner("Creating templates..."):
            ...     pass
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10):
            yield

    def print_summary(self, summary: RunSummary) -> None:
        """Display provisioning summary with color coding.

        Args:
            summary: Result of the provisioning run
        """
        self.console.print("\n[bold]Provisioning Summary:[/bold]")

        for step in summary.completed:
            self.console.print(f"  [green]✓[/green] {step}")

        if summary.failed:
            self.console.print(f"  [red]✗[/red] {summary.failed}")

        if summary.failed:
            self.console.print(f"\n[red]Provisioning stopped at '{summary.failed}'[/red]")
        elif not summary.completed:
            self.console.print("\n[yellow]No steps were run[/yellow]")
        else:
            self.console.print(
                f"\n[green]Provisioning completed: {len(summary.completed)} step(s)[/green]"
            )
