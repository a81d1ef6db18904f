"""Komenda: autotestid folder — przetwarzanie wszystkich plików w katalogu."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

from autotestid._config import default_pattern, extra_excludes
from autotestid._processing import BatchSummary, Outcome, process_file
from autotestid._report import print_dry_run_notice, status_table
from workspace import find_files

console = Console()


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def _process(files: list[Path], root: Path, dry_run: bool) -> BatchSummary:
    summary = BatchSummary(name=root.name or str(root))

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        SpinnerColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("[green]Przetwarzanie plików[/green]", total=len(files))

        for path in files:
            progress.update(task, description=f"Przetwarzanie {escape(path.name)}")
            result = process_file(path, dry_run=dry_run)
            summary.add(result, str(path.relative_to(root)))
            if result.outcome is Outcome.ERROR:
                progress.console.print(
                    f"[red]Błąd przetwarzania {escape(str(path))}:[/red] {escape(result.error or '')}"
                )
            progress.advance(task)

    return summary


def run(args: argparse.Namespace) -> None:
    root = Path(args.folder)
    if not root.is_dir():
        console.print(f"[red]Katalog nie istnieje:[/red] {escape(str(root))}")
        raise SystemExit(1)

    pattern = args.pattern or default_pattern()
    exclude = [*(args.exclude or []), *extra_excludes()]
    files = find_files(root, pattern, recursive=args.recursive, exclude=exclude)

    if not files:
        console.print(f"[yellow]Brak plików {escape(pattern)} w {escape(str(root))}[/yellow]")
        return

    console.print(f"Znaleziono [cyan]{len(files)}[/cyan] plików do przetworzenia")
    if args.dry_run:
        print_dry_run_notice(console)

    summary = _process(files, root, args.dry_run)

    console.print()
    console.print(status_table(summary))

    if summary.errors:
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "folder",
        help="Przetwarza wszystkie pliki komponentów w katalogu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyszukuje pliki komponentów w katalogu (domyślnie rekurencyjnie) i dodaje
data-testid do tagów root-level. Wartość atrybutu = nazwa pliku bez rozszerzenia.
Błąd jednego pliku nie przerywa przetwarzania pozostałych.

Przykłady:
  autotestid folder ./src
  autotestid folder ./src --no-recursive
  autotestid folder ./src --exclude bin --exclude obj
  autotestid folder ./src --pattern "*.cshtml" --dry-run
        """,
    )
    p.add_argument(
        "folder",
        metavar="KATALOG",
        help="Katalog z plikami komponentów.",
    )
    p.add_argument(
        "--recursive", "-r",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Przeszukuj podkatalogi (domyślnie: tak).",
    )
    p.add_argument(
        "--pattern", "-p",
        metavar="WZORZEC",
        default=None,
        help="Wzorzec nazw plików (domyślnie: *.razor lub *$AUTOTESTID_EXTENSION).",
    )
    p.add_argument(
        "--exclude", "-e",
        metavar="KATALOG",
        action="append",
        default=[],
        help="Katalog do pominięcia (można podać wielokrotnie).",
    )
    p.add_argument(
        "--dry-run", "-d",
        action="store_true",
        help="Tylko policz zmiany, nie zapisuj plików.",
    )
    p.set_defaults(func=run)
