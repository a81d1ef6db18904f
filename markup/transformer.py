"""
markup/transformer.py — wstrzykiwanie atrybutu data-testid do tagów root-level.

Algorytm (świadome przybliżenie, bez budowania DOM):
  1. Kandydaci: tagi otwierające na początku linii (opcjonalnie po wcięciu).
  2. Klasyfikacja: kandydat jest root-level, gdy stos tagów zbudowany
     z całego tekstu PRZED nim (linia po linii) kończy się pusty.
  3. Podmiana: od ostatniego kandydata do pierwszego, żeby offsety
     wcześniejszych dopasowań pozostały ważne.

Znane ograniczenia:
  - tagi rozbite na kilka linii są niewidoczne dla skanu stosu,
  - komentarze, bloki kodu (@code { ... }) i wartości atrybutów z '<' / '>'
    nie są rozumiane; np. List<string> w kodzie wygląda jak tag,
  - elementy void bez '/>' (<br>, <input ...>) trafiają na stos,
  - zamykający tag zdejmuje ze stosu tylko wtedy, gdy pasuje do wierzchołka.

Publiczne API:
  inject_test_id(document, label) -> str
  find_candidates(document)       -> list[TagMatch]
  is_root_level(document, offset) -> bool
  apply_test_id(attributes, label) -> str
"""

from __future__ import annotations

import re

from .types import TagMatch, TagMatches

ATTRIBUTE = "data-testid"

# Tag otwierający zakotwiczony na początku linii; wcięcie tylko z tej linii.
_CANDIDATE_RE = re.compile(r"^([^\S\n]*)<([a-zA-Z0-9]+)([^>]*)>", re.MULTILINE)

# Dowolny tag (otwierający lub zamykający) w obrębie jednej linii.
_ANY_TAG_RE = re.compile(r"<(/?)([a-zA-Z0-9]+)([^>]*)>")

# Istniejące przypisanie data-testid, w cudzysłowie lub apostrofie.
_EXISTING_RE = re.compile(r"data-testid\s*=\s*[\"'][^\"']*[\"']", re.IGNORECASE)


def find_candidates(document: str) -> TagMatches:
    """Zwraca tagi otwierające zaczynające się linię, w kolejności dokumentu."""
    return [
        TagMatch(
            whitespace=m.group(1),
            name=m.group(2),
            attributes=m.group(3),
            start=m.start(),
            end=m.end(),
        )
        for m in _CANDIDATE_RE.finditer(document)
    ]


def is_root_level(document: str, offset: int) -> bool:
    """
    True gdy żaden element nie jest otwarty przed pozycją `offset`.

    Stos budowany jest od zera przy każdym wywołaniu z tekstu document[:offset].
    Zamykający tag zdejmuje wierzchołek tylko przy zgodnej nazwie; tagi
    samozamykające ('/>') nie zmieniają stosu.
    """
    stack: list[str] = []

    for line in document[:offset].split("\n"):
        for m in _ANY_TAG_RE.finditer(line):
            closing, name = m.group(1) == "/", m.group(2)
            if closing:
                if stack and stack[-1] == name:
                    stack.pop()
            elif not m.group(0).endswith("/>"):
                stack.append(name)

    return not stack


def apply_test_id(attributes: str, label: str) -> str:
    """
    Zwraca tekst atrybutów z data-testid ustawionym na `label`.

    Istniejące przypisanie jest podmieniane w miejscu (reszta atrybutów bez
    zmian), w przeciwnym razie nowy atrybut trafia zaraz po nazwie tagu.
    """
    replacement = f'{ATTRIBUTE}="{label}"'
    if _EXISTING_RE.search(attributes):
        # funkcja zamiast stringa: label może zawierać '\'
        return _EXISTING_RE.sub(lambda _m: replacement, attributes)
    return f" {replacement}{attributes}"


def inject_test_id(document: str, label: str) -> str:
    """
    Ustawia data-testid="<label>" na każdym tagu root-level dokumentu.

    Tekst poza podmienianymi tagami pozostaje identyczny. Gdy dokument nie
    zawiera tagów root-level, zwracany jest ten sam tekst (sygnał "bez zmian").
    Funkcja jest czysta i nigdy nie rzuca wyjątków.
    """
    roots = [c for c in find_candidates(document) if is_root_level(document, c.start)]

    for tag in reversed(roots):
        new_tag = tag.render(apply_test_id(tag.attributes, label))
        document = document[:tag.start] + new_tag + document[tag.end:]

    return document
