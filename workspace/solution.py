"""
workspace/solution.py — odczyt projektów z pliku solucji (.sln).

Wpis projektu w .sln wygląda tak:
  Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "App", "src\\App\\App.csproj", "{...}"

Brane są tylko wpisy wskazujące na .csproj (foldery solucji są pomijane).
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

_PROJECT_RE = re.compile(
    r'Project\("\{[A-F0-9\-]+\}"\)\s*=\s*"([^"]+)",\s*"([^"]+)"',
    re.MULTILINE | re.IGNORECASE,
)

_TEST_MARKER = "test"


@dataclass(frozen=True, slots=True)
class ProjectRef:
    name: str            # nazwa projektu z .sln
    path: str            # ścieżka względem katalogu solucji, separator '/'

    def resolve(self, solution_dir: Path) -> Path:
        return solution_dir / self.path


ProjectRefs: TypeAlias = list[ProjectRef]


def parse_solution_text(text: str) -> ProjectRefs:
    """Wyciąga projekty .csproj z treści pliku .sln (w kolejności wystąpienia)."""
    projects: ProjectRefs = []
    for m in _PROJECT_RE.finditer(text):
        name, path = m.group(1), m.group(2).replace("\\", "/")
        if path.lower().endswith(".csproj"):
            projects.append(ProjectRef(name=name, path=path))
    return projects


def parse_solution(path: Path) -> ProjectRefs:
    return parse_solution_text(path.read_text(encoding="utf-8-sig"))


def _contains_any(name: str, terms: Iterable[str]) -> bool:
    lowered = name.lower()
    return any(t.lower() in lowered for t in terms if t)


def filter_projects(
    projects: ProjectRefs,
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
    include_tests: bool = False,
) -> ProjectRefs:
    """
    Filtruje projekty po fragmentach nazwy (bez rozróżniania wielkości liter).

    - include:       zostają tylko projekty zawierające któryś z fragmentów
    - exclude:       odpadają projekty zawierające któryś z fragmentów
    - include_tests: False → odpadają projekty z "test" w nazwie
    """
    include = [i for i in include if i]
    exclude = [e for e in exclude if e]

    filtered = list(projects)
    if include:
        filtered = [p for p in filtered if _contains_any(p.name, include)]
    if exclude:
        filtered = [p for p in filtered if not _contains_any(p.name, exclude)]
    if not include_tests:
        filtered = [p for p in filtered if _TEST_MARKER not in p.name.lower()]
    return filtered
