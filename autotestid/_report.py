"""Wspólne elementy wyjścia w terminalu (tabele podsumowań, komunikaty)."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from autotestid._processing import BatchSummary

PREVIEW_CHARS = 500


def print_dry_run_notice(console: Console) -> None:
    console.print("[yellow]Tryb --dry-run: żaden plik nie zostanie zmodyfikowany[/yellow]")


def print_errors(console: Console, errors: list[str]) -> None:
    if not errors:
        return
    console.print(f"[red]Błędy przy przetwarzaniu {len(errors)} plików:[/red]")
    for err in errors:
        console.print(f"  [red]•[/red] {escape(err)}")
    console.print()


def preview(text: str) -> str:
    return text if len(text) <= PREVIEW_CHARS else text[:PREVIEW_CHARS] + "..."


def status_table(summary: BatchSummary) -> Table:
    """Tabela Status / Liczba dla pojedynczego batcha."""
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("STATUS")
    table.add_column("LICZBA", justify="right")
    table.add_row("[green]Zaktualizowane[/green]", str(summary.updated))
    table.add_row("[dim]Pominięte[/dim]", str(summary.skipped))
    if summary.errors:
        table.add_row("[red]Błędy[/red]", str(len(summary.errors)))
    table.add_row("[bold]Razem[/bold]", str(summary.total))
    return table


def _count(n: int, style: str) -> str:
    return f"[{style}]{n}[/{style}]" if n else "[dim]0[/dim]"


def projects_table(summaries: list[BatchSummary]) -> Table:
    """Tabela per projekt z wierszem sumy."""
    table = Table(box=box.ROUNDED, header_style="bold white", show_header=True)
    table.add_column("PROJEKT", style="cyan", no_wrap=True)
    table.add_column("ZAKT.", justify="center")
    table.add_column("POMIN.", justify="center")
    table.add_column("BŁĘDY", justify="center")
    table.add_column("RAZEM", justify="center")

    for s in summaries:
        table.add_row(
            escape(s.name),
            _count(s.updated, "green"),
            _count(s.skipped, "dim"),
            _count(len(s.errors), "red"),
            str(s.total),
        )

    updated = sum(s.updated for s in summaries)
    skipped = sum(s.skipped for s in summaries)
    errors  = sum(len(s.errors) for s in summaries)
    total   = sum(s.total for s in summaries)

    table.add_section()
    table.add_row(
        "[bold]Razem[/bold]",
        _count(updated, "bold green"),
        _count(skipped, "bold dim"),
        _count(errors, "bold red"),
        f"[bold]{total}[/bold]",
    )
    return table
