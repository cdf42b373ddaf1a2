import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

_console = Console()
_err_console = Console(stderr=True)


def print_step(title: str) -> None:
    """Print a step header."""
    _console.rule(f"[bold blue]{escape(title)}[/]")


def print_success(message: str) -> None:
    """Print a success message."""
    _console.print(f"[bold green]SUCCESS:[/] {escape(message)}", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message to stderr."""
    _err_console.print(f"[bold yellow]WARNING:[/] {escape(message)}", highlight=False, soft_wrap=True)


def print_error(message: str, exit_code: Optional[int] = None) -> None:
    """Print an error message to stderr and optionally exit."""
    _err_console.print(f"[bold red]ERROR:[/] {escape(message)}", highlight=False, soft_wrap=True)

    if exit_code is not None:
        sys.exit(exit_code)


def print_table(title: str, columns: List[str], rows: List[List[str]]) -> None:
    """Print a table with optional title."""
    table = Table(title=title)
    for col in columns:
        table.add_column(col)
    for row in rows:
        table.add_row(*row)
    _console.print(table)
    if not rows:
        _console.print("(No data)")
