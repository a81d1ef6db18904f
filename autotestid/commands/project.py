"""Komenda: autotestid project — przetwarzanie plików komponentów projektu .csproj."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from autotestid._config import default_pattern, extra_excludes
from autotestid._processing import BatchSummary, Outcome, process_file
from autotestid._report import print_dry_run_notice, print_errors
from workspace import ALWAYS_EXCLUDED, find_files

console = Console()


def _display_path(path: Path) -> str:
    """Ścieżka względem bieżącego katalogu (gdy się da)."""
    try:
        return os.path.relpath(path)
    except ValueError:
        return str(path)


def _process(files: list[Path], project_name: str, dry_run: bool) -> BatchSummary:
    summary = BatchSummary(name=project_name)

    with console.status(f"Przetwarzanie {escape(project_name)}…", spinner="star") as status:
        for path in files:
            shown = _display_path(path)
            status.update(f"Przetwarzanie {escape(shown)}")
            result = process_file(path, dry_run=dry_run)
            summary.add(result, shown)
            if result.outcome is Outcome.UPDATED:
                console.print(f"[green]✓[/green] {escape(shown)}")

    return summary


def run(args: argparse.Namespace) -> None:
    project_path = Path(args.project)
    if not project_path.is_file():
        console.print(f"[red]Plik projektu nie istnieje:[/red] {escape(str(project_path))}")
        raise SystemExit(1)
    if project_path.suffix.lower() != ".csproj":
        console.print(f"[red]Oczekiwano pliku .csproj, otrzymano:[/red] {escape(str(project_path))}")
        raise SystemExit(1)

    project_dir = project_path.parent
    project_name = project_path.stem
    console.print(f"Projekt: [cyan]{escape(project_name)}[/cyan]")

    exclude = [*ALWAYS_EXCLUDED, *(args.exclude or []), *extra_excludes()]
    files = find_files(project_dir, default_pattern(), recursive=True, exclude=exclude)

    if not files:
        console.print(f"[yellow]Brak plików komponentów w projekcie {escape(project_name)}[/yellow]")
        return

    console.print(f"Znaleziono [cyan]{len(files)}[/cyan] plików komponentów")
    if args.dry_run:
        print_dry_run_notice(console)

    summary = _process(files, project_name, args.dry_run)

    console.print()
    print_errors(console, summary.errors)
    console.print(Rule(f"[bold]Podsumowanie: {escape(project_name)}[/bold]", align="left"))
    console.print(f"[green]Zaktualizowane:[/green] {summary.updated}")
    console.print(f"[dim]Pominięte:[/dim] {summary.skipped}")
    if summary.errors:
        console.print(f"[red]Błędy:[/red] {len(summary.errors)}")
    console.print(f"[bold]Razem:[/bold] {summary.total}")

    if summary.errors:
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "project",
        help="Przetwarza pliki komponentów projektu (.csproj).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Przetwarza wszystkie pliki komponentów w katalogu projektu (rekurencyjnie).
Katalogi bin, obj, node_modules, .git i .vs są pomijane zawsze.

Przykłady:
  autotestid project MyApp.csproj
  autotestid project MyApp.csproj --exclude wwwroot
  autotestid project MyApp.csproj --dry-run
        """,
    )
    p.add_argument(
        "project",
        metavar="PROJEKT.csproj",
        help="Ścieżka do pliku .csproj.",
    )
    p.add_argument(
        "--exclude", "-e",
        metavar="KATALOG",
        action="append",
        default=[],
        help="Dodatkowy katalog do pominięcia (można podać wielokrotnie).",
    )
    p.add_argument(
        "--dry-run", "-d",
        action="store_true",
        help="Tylko policz zmiany, nie zapisuj plików.",
    )
    p.set_defaults(func=run)
