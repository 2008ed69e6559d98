"""Console output helpers for the CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

theme = Theme(
    {
        "info": "blue",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "heading": "bold cyan",
        "muted": "grey50",
    }
)

console = Console(theme=theme, highlight=False)
err_console = Console(theme=theme, highlight=False, stderr=True)

RULE_WIDTH = 50


def info(message: str) -> None:
    console.print(f"[info]ℹ[/info] {escape(message)}")


def success(message: str) -> None:
    console.print(f"[success]✓[/success] {escape(message)}")


def warning(message: str) -> None:
    console.print(f"[warning]⚠[/warning] {escape(message)}")


def error(message: str) -> None:
    err_console.print(f"[error]✗[/error] {escape(message)}")


def header(message: str) -> None:
    console.print()
    console.print("═" * RULE_WIDTH, style="heading")
    console.print(f"  {escape(message)}", style="heading")
    console.print("═" * RULE_WIDTH, style="heading")
    console.print()


def category(name: str, count: int, installed: bool = False) -> None:
    """Print a category line: name, installed mark and skill count."""
    mark = " [success]✓[/success]" if installed else ""
    console.print(f"  📁 [bold]{escape(name)}[/bold]{mark} [muted]({count} skills)[/muted]")


def item(name: str, description: str = "") -> None:
    """Print a nested item line, with its description when known."""
    line = f"     └─ {escape(name)}"
    if description:
        line += f" - {escape(description)}"
    console.print(line, style="muted")


def bullet(name: str, icon: str = "-") -> None:
    console.print(f"     {icon} {escape(name)}")


def blank() -> None:
    console.print()


def line(message: str) -> None:
    console.print(escape(message))
