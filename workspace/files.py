"""
workspace/files.py — wyszukiwanie plików komponentów na dysku.

Wykluczenia działają na nazwach katalogów: wzorzec "bin" wyklucza każdy plik,
którego ścieżka względem katalogu startowego zawiera segment "/bin/"
(bez rozróżniania wielkości liter).
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

# Katalogi buildów / VCS / IDE pomijane zawsze przy projektach i solucjach.
ALWAYS_EXCLUDED: tuple[str, ...] = ("bin", "obj", "node_modules", ".git", ".vs")


def is_excluded(path: Path, root: Path, patterns: Iterable[str]) -> bool:
    """True gdy któryś katalog na ścieżce `path` (względem `root`) pasuje do wzorca."""
    try:
        rel = path.resolve().relative_to(root.resolve())
    except ValueError:
        rel = path
    normalized = "/" + rel.as_posix().lower()
    return any(f"/{p.strip('/').lower()}/" in normalized for p in patterns if p)


def find_files(
    root: Path,
    pattern: str,
    recursive: bool = True,
    exclude: Iterable[str] = (),
) -> list[Path]:
    """
    Zwraca posortowaną listę plików pasujących do `pattern` (glob, np. "*.razor").

    recursive=False ogranicza wyszukiwanie do samego katalogu `root`.
    """
    exclude = [e for e in exclude if e]
    candidates = root.rglob(pattern) if recursive else root.glob(pattern)
    return sorted(
        p for p in candidates
        if p.is_file() and not is_excluded(p, root, exclude)
    )
