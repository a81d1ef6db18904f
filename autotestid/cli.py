"""
autotestid — narzędzie CLI dodające atrybut data-testid do komponentów.

Użycie:
  autotestid <komenda> [opcje]

Komendy:
  file       Przetwarza pojedynczy plik komponentu.
  folder     Przetwarza wszystkie pliki komponentów w katalogu.
  project    Przetwarza pliki komponentów projektu (.csproj).
  solution   Przetwarza pliki komponentów wszystkich projektów solucji (.sln).

Atrybut data-testid dostają tagi root-level (nie zagnieżdżone w innym
elemencie). Wartość to nazwa pliku bez rozszerzenia (komenda file pozwala
podać własną przez --test-id).
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8 (znaki ✓ / ✗ i polskie litery).
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rich.console import Console
from rich.rule import Rule

from autotestid import __version__
from autotestid._config import load_env
from autotestid.commands import file as cmd_file
from autotestid.commands import folder as cmd_folder
from autotestid.commands import project as cmd_project
from autotestid.commands import solution as cmd_solution

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autotestid",
        description="autotestid — automatyczne atrybuty data-testid w komponentach.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"autotestid {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_file.add_parser(subparsers)
    cmd_folder.add_parser(subparsers)
    cmd_project.add_parser(subparsers)
    cmd_solution.add_parser(subparsers)

    return parser


def _print_header() -> None:
    console.print(Rule("[bold cyan]AutoTestId[/bold cyan]", align="left", style="cyan"))
    console.print("[dim]Automatyczne atrybuty data-testid w komponentach Razor[/dim]")
    console.print()


def main(argv: list[str] | None = None) -> None:
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)
    _print_header()
    args.func(args)


if __name__ == "__main__":
    main()
