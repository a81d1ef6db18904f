"""Konfiguracja autotestid — zmienne środowiskowe, opcjonalnie z pliku .env.

Zmienne:
  AUTOTESTID_EXTENSION   rozszerzenie plików komponentów (domyślnie: .razor)
  AUTOTESTID_EXCLUDE     dodatkowe katalogi do pominięcia, po przecinku
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_EXTENSION = ".razor"


def load_env(env_file: Path | None = None) -> None:
    """Wczytuje .env z bieżącego katalogu; zmienne z powłoki mają pierwszeństwo."""
    load_dotenv(env_file or Path.cwd() / ".env", override=False)


def file_extension() -> str:
    ext = os.getenv("AUTOTESTID_EXTENSION", DEFAULT_EXTENSION).strip() or DEFAULT_EXTENSION
    return ext if ext.startswith(".") else f".{ext}"


def default_pattern() -> str:
    return f"*{file_extension()}"


def extra_excludes() -> list[str]:
    raw = os.getenv("AUTOTESTID_EXCLUDE", "")
    return [part.strip() for part in raw.split(",") if part.strip()]
