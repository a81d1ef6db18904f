"""Komenda: autotestid solution — przetwarzanie wszystkich projektów solucji .sln."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from autotestid._config import default_pattern, extra_excludes
from autotestid._processing import BatchSummary, Outcome, process_file
from autotestid._report import print_dry_run_notice, projects_table
from workspace import ALWAYS_EXCLUDED, ProjectRef, filter_projects, find_files, parse_solution

console = Console()


# ---------------------------------------------------------------------------
# Przetwarzanie jednego projektu
# ---------------------------------------------------------------------------

def _process_project(project: ProjectRef, solution_dir: Path, dry_run: bool) -> BatchSummary:
    summary = BatchSummary(name=project.name)

    project_path = project.resolve(solution_dir)
    if not project_path.is_file():
        console.print(f"[red]Plik projektu nie istnieje:[/red] {escape(str(project_path))}")
        summary.errors.append(f"{project_path}: brak pliku projektu")
        return summary

    project_dir = project_path.parent
    exclude = [*ALWAYS_EXCLUDED, *extra_excludes()]
    files = find_files(project_dir, default_pattern(), recursive=True, exclude=exclude)

    if not files:
        console.print("[dim]Brak plików komponentów[/dim]")
        return summary

    for path in files:
        rel = str(path.relative_to(project_dir))
        result = process_file(path, dry_run=dry_run)
        summary.add(result, rel)
        if result.outcome is Outcome.UPDATED:
            console.print(f"  [green]✓[/green] {escape(rel)}")
        elif result.outcome is Outcome.ERROR:
            console.print(f"  [red]✗[/red] {escape(rel)}: {escape(result.error or '')}")

    return summary


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    sln_path = Path(args.solution)
    if not sln_path.is_file():
        console.print(f"[red]Plik solucji nie istnieje:[/red] {escape(str(sln_path))}")
        raise SystemExit(1)
    if sln_path.suffix.lower() != ".sln":
        console.print(f"[red]Oczekiwano pliku .sln, otrzymano:[/red] {escape(str(sln_path))}")
        raise SystemExit(1)

    console.print(f"Solucja: [cyan]{escape(sln_path.stem)}[/cyan]")

    try:
        projects = parse_solution(sln_path)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Błąd odczytu solucji:[/red] {escape(str(e))}")
        raise SystemExit(1)

    projects = filter_projects(
        projects,
        include=args.include_project,
        exclude=args.exclude_project,
        include_tests=args.include_tests,
    )

    if not projects:
        console.print("[yellow]Brak projektów do przetworzenia[/yellow]")
        return

    console.print(f"Znaleziono [cyan]{len(projects)}[/cyan] projektów do przetworzenia")
    if args.dry_run:
        print_dry_run_notice(console)

    summaries: list[BatchSummary] = []
    for project in projects:
        console.print()
        console.print(Rule(f"[bold cyan]{escape(project.name)}[/bold cyan]"))
        summaries.append(_process_project(project, sln_path.parent, args.dry_run))

    console.print()
    console.print(Rule("[bold]Podsumowanie solucji[/bold]"))
    console.print(projects_table(summaries))

    if any(s.errors for s in summaries):
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "solution",
        help="Przetwarza pliki komponentów wszystkich projektów solucji (.sln).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Odczytuje projekty .csproj z pliku solucji i przetwarza pliki komponentów
każdego z nich. Projekty z "test" w nazwie są domyślnie pomijane.

Przykłady:
  autotestid solution MyApp.sln
  autotestid solution MyApp.sln --exclude-project Legacy
  autotestid solution MyApp.sln --include-project Web --include-project Shared
  autotestid solution MyApp.sln --include-tests --dry-run
        """,
    )
    p.add_argument(
        "solution",
        metavar="SOLUCJA.sln",
        help="Ścieżka do pliku .sln.",
    )
    p.add_argument(
        "--include-project", "-i",
        metavar="NAZWA",
        action="append",
        default=[],
        help="Przetwarzaj tylko projekty zawierające NAZWA (można podać wielokrotnie).",
    )
    p.add_argument(
        "--exclude-project", "-e",
        metavar="NAZWA",
        action="append",
        default=[],
        help="Pomiń projekty zawierające NAZWA (można podać wielokrotnie).",
    )
    p.add_argument(
        "--include-tests", "-t",
        action="store_true",
        help="Nie pomijaj projektów testowych.",
    )
    p.add_argument(
        "--dry-run", "-d",
        action="store_true",
        help="Tylko policz zmiany, nie zapisuj plików.",
    )
    p.set_defaults(func=run)
