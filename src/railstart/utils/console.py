"""Console output helpers built on Rich."""

from rich.console import Console
from rich.panel import Panel

from railstart.config.messages import BANNER

_console: Console | None = None


def get_console() -> Console:
    """Get the shared console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def print_banner() -> None:
    """Print the railstart banner."""
    get_console().print(f"[cyan]{BANNER}[/cyan]")


def print_header(title: str) -> None:
    """Print a section header."""
    get_console().print(f"\n[bold cyan]{title}[/bold cyan]\n")


def print_panel(content: str, title: str | None = None, style: str = "cyan") -> None:
    """Print content inside a bordered panel."""
    get_console().print(Panel(content, title=title, border_style=style))


def print_error(message: str) -> None:
    get_console().print(f"[red]✗ {message}[/red]")


def print_warning(message: str) -> None:
    get_console().print(f"[yellow]! {message}[/yellow]")


def print_info(message: str) -> None:
    get_console().print(message)
