"""Output formatting for the starter CLI."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape


@dataclass
class OutputContext:
    """Context for user-facing progress output."""

    console: Console
    quiet: bool = False

    def info(self, message: str) -> None:
        """Print a progress message unless quiet."""
        if not self.quiet:
            self.console.print(message)

    def warning(self, message: str) -> None:
        """Print a warning. Warnings are shown even in quiet mode."""
        self.console.print(f"[yellow]Warning: {escape(message)}[/yellow]")

    def error(self, message: str) -> None:
        """Print an error."""
        self.console.print(f"[red]Error: {escape(message)}[/red]")

    def success(self, message: str) -> None:
        """Print a success message unless quiet."""
        if not self.quiet:
            self.console.print(f"[bold green]{message}[/bold green]")

    @contextmanager
    def spin(self, message: str) -> Iterator[None]:
        """Show a spinner while a blocking operation runs."""
        if self.quiet or not self.console.is_terminal:
            self.info(message)
            yield
            return
        with self.console.status(message):
            yield


# Global output context (set by cli.py main callback)
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context.

    Returns a default OutputContext if not yet initialized by CLI.
    """
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext) -> None:
    """Set the global output context. Called by CLI main callback."""
    global _ctx
    _ctx = ctx
