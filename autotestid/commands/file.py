"""Komenda: autotestid file — przetwarzanie pojedynczego pliku komponentu."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from autotestid._config import file_extension
from autotestid._processing import Outcome, process_file
from autotestid._report import preview

console = Console()


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    path = Path(args.file)
    ext = file_extension()

    if not path.is_file():
        console.print(f"[red]Plik nie istnieje:[/red] {escape(str(path))}")
        raise SystemExit(1)
    if path.suffix.lower() != ext.lower():
        console.print(
            f"[yellow]Plik {escape(str(path))} nie jest plikiem {ext}[/yellow]"
        )
        raise SystemExit(1)

    if args.test_id and '"' in args.test_id:
        # wartość trafia do atrybutu bez escapowania
        console.print(
            "[yellow]Uwaga: --test-id zawiera cudzysłów — atrybut może być niepoprawny.[/yellow]"
        )

    result = process_file(path, label=args.test_id, dry_run=args.dry_run)

    if result.outcome is Outcome.ERROR:
        console.print(f"[red]Błąd przetwarzania {escape(str(path))}:[/red] {escape(result.error or '')}")
        raise SystemExit(1)

    if result.outcome is Outcome.SKIPPED:
        console.print(f"[dim]Brak zmian dla[/dim] {escape(str(path))}")
        return

    if args.dry_run:
        console.print(f"[yellow]Zostałby zaktualizowany:[/yellow] {escape(str(path))}")
        console.print(Panel(
            Text(preview(result.new_content or "")),
            title="Podgląd",
            title_align="left",
            box=box.ROUNDED,
        ))
    else:
        console.print(
            f"[green]✓[/green] Zaktualizowano {escape(str(path))} "
            f"(data-testid=[cyan]{escape(result.label)}[/cyan])"
        )


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "file",
        help="Przetwarza pojedynczy plik komponentu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dodaje (lub podmienia) atrybut data-testid na tagach root-level jednego pliku.
Plik jest zapisywany tylko wtedy, gdy jego treść się zmienia.

Przykłady:
  autotestid file Component.razor
  autotestid file Component.razor --test-id MyCustomId
  autotestid file Component.razor --dry-run
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Ścieżka do pliku komponentu.",
    )
    p.add_argument(
        "--test-id", "-t",
        metavar="ID",
        default=None,
        help="Wartość data-testid (domyślnie: nazwa pliku bez rozszerzenia).",
    )
    p.add_argument(
        "--dry-run", "-d",
        action="store_true",
        help="Tylko pokaż podgląd zmian, nie zapisuj pliku.",
    )
    p.set_defaults(func=run)
