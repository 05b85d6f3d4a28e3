"""Shared console helpers for vibekit.

All user-facing output goes through a Rich ``Console``.  The module-level
``console`` is the default; every helper accepts an explicit console so the
questionnaire can be pointed at a buffer in tests.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, subtitle: str = "", out: Console | None = None) -> None:
    """Print a banner panel with an optional dim subtitle line."""
    out = out or console
    body = f"[bold]{title}[/bold]"
    if subtitle:
        body += f"\n[dim]{subtitle}[/dim]"
    out.print(Panel(body, style="cyan"))


def print_section(title: str, out: Console | None = None) -> None:
    """Print a questionnaire section heading."""
    out = out or console
    out.print()
    out.print(f"[bold cyan]{title}[/bold cyan]")


def print_summary_table(
    data: dict[str, str], title: str = "Summary", out: Console | None = None
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        out: Target console (defaults to the module console).
    """
    out = out or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    out.print(table)
    out.print()


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{message}[/bold green]")


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]{message}[/bold red]")


def print_notice(message: str, out: Console | None = None) -> None:
    """Print a yellow informational notice (used for lenient input fallbacks)."""
    (out or console).print(f"[yellow]{message}[/yellow]")
