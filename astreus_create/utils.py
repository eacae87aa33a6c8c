"""Shared console helpers for create-astreus-agent.

Provides Rich-based status output (banner, success/error/warning lines,
summary tables, spinner progress, next-steps panel) and project-name
validation used by the answer collector.
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from astreus_create.scaffolder.models import PROJECT_NAME_PATTERN

console = Console()

_BANNER = """
  ██
 ████
██  ██
"""


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_project_name(value: str) -> str | None:
    """Return a user-facing error for an invalid project name, else ``None``.

    Examples::

        validate_project_name("my-agent")  -> None
        validate_project_name("")          -> "Project name is required"
        validate_project_name("my agent")  -> "Project name can only contain ..."
    """
    if not value:
        return "Project name is required"
    if not re.match(PROJECT_NAME_PATTERN, value):
        return "Project name can only contain letters, numbers, dashes and underscores"
    return None


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str) -> None:
    """Print the logo and an intro badge with *title*."""
    console.print(f"[cyan]{_BANNER}[/cyan]", highlight=False)
    console.print(f"[black on cyan] {title} [/black on cyan]")
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_next_steps(commands: list[str], title: str = "Next steps") -> None:
    """Print shell commands the user should run next, boxed."""
    console.print(Panel("\n".join(commands), title=title, expand=False, style="cyan"))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def create_progress() -> Progress:
    """Create a Rich spinner for the project creation step.

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
