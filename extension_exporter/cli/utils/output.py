# extension_exporter/cli/utils/output.py
"""Output formatting utilities"""

from pathlib import Path
from typing import Dict, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...constants import EMOJI_SUCCESS, EMOJI_ERROR, EMOJI_WARNING
from ...models import ExportResult
from ...utils import format_size

console = Console()


def format_export_result(result: ExportResult) -> None:
    """Format and display export operation result"""
    if result.is_success:
        lines = [
            f"[green]{EMOJI_SUCCESS}[/green] Package created successfully!",
            f"",
            f"[bold]Extension:[/bold] {result.extension_type} {result.extension_name}",
            f"[bold]Package:[/bold] {result.package_name}",
            f"[bold]Archive:[/bold] {result.archive_path}",
            f"[bold]Files:[/bold] {result.file_count}",
        ]

        if result.archive_size is not None:
            lines.append(f"[bold]Size:[/bold] {format_size(result.archive_size)}")

        if result.staging_path:
            lines.append(f"[bold]Staging:[/bold] {result.staging_path}")

        panel = Panel(
            "\n".join(lines),
            title="Export Result",
            border_style="green"
        )
        console.print(panel)

        if result.warnings:
            console.print("\n[bold yellow]Warnings:[/bold yellow]")
            for warning in result.warnings:
                console.print(f"  {EMOJI_WARNING} {warning}")

    else:
        lines = [f"[red]{EMOJI_ERROR} Export failed:[/red] {result.message}"]
        for error in result.errors:
            if error.code:
                lines.append(f"[dim]{error.code}[/dim]")

        panel = Panel(
            "\n".join(lines),
            title="Export Error",
            border_style="red"
        )
        console.print(panel)


def format_paths_table(paths: Dict[str, Path], title: Optional[str] = None) -> Table:
    """Create a table of resolved paths

    Args:
        paths: Mapping of label to path
        title: Optional table title

    Returns:
        Rich Table object
    """
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Path Type", style="cyan")
    table.add_column("Absolute Path", style="green")
    table.add_column("Exists", justify="center")

    for label, path in paths.items():
        exists = f"[green]{EMOJI_SUCCESS}[/green]" if Path(path).exists() else "[dim]-[/dim]"
        table.add_row(label.title(), str(path), exists)

    return table


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]Warning:[/yellow] {message}")
