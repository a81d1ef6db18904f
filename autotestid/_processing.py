"""
autotestid/_processing.py — przetwarzanie pojedynczego pliku i liczniki batcha.

process_file() nigdy nie rzuca przy błędach I/O: błąd trafia do FileResult,
dzięki czemu batch (folder / projekt / solucja) przetwarza dalej pozostałe pliki.
Plik jest zapisywany wyłącznie wtedy, gdy treść się zmieniła (bez zbędnej
zmiany znacznika czasu).
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from markup import inject_test_id


class Outcome(StrEnum):
    UPDATED = "updated"
    SKIPPED = "skipped"
    ERROR   = "error"


@dataclass(slots=True)
class FileResult:
    """
    Wynik przetworzenia jednego pliku.

    - new_content: nowa treść (tylko dla UPDATED; w dry-run niezapisana)
    - error:       komunikat błędu (tylko dla ERROR)
    """

    path: Path
    label: str
    outcome: Outcome
    new_content: str | None = None
    error: str | None = None


@dataclass(slots=True)
class BatchSummary:
    """Liczniki dla jednego batcha (folder, projekt)."""

    name: str
    updated: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.updated + self.skipped + len(self.errors)

    def add(self, result: FileResult, display_path: str | None = None) -> None:
        if result.outcome is Outcome.UPDATED:
            self.updated += 1
        elif result.outcome is Outcome.SKIPPED:
            self.skipped += 1
        else:
            self.errors.append(f"{display_path or result.path}: {result.error}")


# ---------------------------------------------------------------------------
# Odczyt / zapis
# ---------------------------------------------------------------------------

def read_document(path: Path) -> tuple[str, bool]:
    """Czyta plik UTF-8 bez tłumaczenia końców linii. Zwraca (tekst, czy_był_BOM)."""
    raw = path.read_bytes()
    bom = raw.startswith(codecs.BOM_UTF8)
    if bom:
        raw = raw[len(codecs.BOM_UTF8):]
    return raw.decode("utf-8"), bom


def write_document(path: Path, text: str, bom: bool = False) -> None:
    data = text.encode("utf-8")
    path.write_bytes(codecs.BOM_UTF8 + data if bom else data)


def label_for(path: Path, override: str | None = None) -> str:
    """Wartość data-testid: jawnie podana lub nazwa pliku bez rozszerzenia."""
    return override if override else path.stem


# ---------------------------------------------------------------------------
# Przetwarzanie
# ---------------------------------------------------------------------------

def process_file(path: Path, label: str | None = None, dry_run: bool = False) -> FileResult:
    test_id = label_for(path, label)
    try:
        content, bom = read_document(path)
        new_content = inject_test_id(content, test_id)
        if new_content == content:
            return FileResult(path=path, label=test_id, outcome=Outcome.SKIPPED)
        if not dry_run:
            write_document(path, new_content, bom)
    except (OSError, UnicodeDecodeError) as e:
        return FileResult(path=path, label=test_id, outcome=Outcome.ERROR, error=str(e))

    return FileResult(path=path, label=test_id, outcome=Outcome.UPDATED, new_content=new_content)
