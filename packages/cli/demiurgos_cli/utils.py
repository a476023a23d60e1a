"""Shared console output helpers for CLI commands."""
import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from demiurgos_common import DemiurgosError

console = Console()


def success(message: str) -> None:
    console.print(f"[bold green]✓[/bold green] {message}")


def error(message: str) -> None:
    console.print(f"[bold red]✗[/bold red] {message}")


def info(message: str) -> None:
    console.print(f"[cyan]ℹ[/cyan] {message}")


def warning(message: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {message}")


def confirm_action(message: str, default: bool = False) -> bool:
    """Ask a yes/no question on the console."""
    return Confirm.ask(message, default=default, console=console)


def handle_error(e: Exception, verbose: bool = False) -> None:
    """
    Report an exception and exit with status 1.

    Demiurgos errors print their message and code; anything else is shown as
    unexpected. With ``verbose`` the traceback is printed too.
    """
    if isinstance(e, DemiurgosError):
        error(f"{escape(e.message)} [dim]({e.code})[/dim]")
    else:
        error(f"Unexpected error: {escape(str(e))}")
    if verbose:
        console.print_exception()
    raise typer.Exit(1)
