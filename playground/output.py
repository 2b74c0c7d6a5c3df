"""
Console Output

Tagged status lines and result tables on a shared rich console.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def info(message: str, out: Optional[Console] = None) -> None:
    (out or console).print(f"[cyan]\\[INFO][/cyan] {escape(message)}")


def warn(message: str, out: Optional[Console] = None) -> None:
    (out or console).print(f"[yellow]\\[WARN][/yellow] {escape(message)}")


def error(message: str, out: Optional[Console] = None) -> None:
    (out or console).print(f"[red]\\[ERROR][/red] {escape(message)}")


def show_results(result, out: Optional[Console] = None) -> None:
    """Render a PreflightResult as a table."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Details")

    for check in result.checks:
        if check.passed and check.severity.value == "warning":
            status = "[yellow]WARN[/yellow]"
        elif check.passed:
            status = "[green]PASS[/green]"
        else:
            status = "[red]FAIL[/red]"
        table.add_row(check.name, status, escape(check.message))

    (out or console).print(table)
