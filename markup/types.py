"""
markup/types.py — typy danych transformera tagów.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class TagMatch:
    """Otwierający tag znaleziony na początku linii: <name attributes>."""
    whitespace: str      # wcięcie od początku linii do '<'
    name: str            # nazwa tagu (litery i cyfry ASCII)
    attributes: str      # surowy tekst między nazwą a '>'
    start: int           # offset w dokumencie (włącznie)
    end: int             # offset w dokumencie (wyłącznie)

    @property
    def length(self) -> int:
        return self.end - self.start

    def render(self, attributes: str | None = None) -> str:
        """Odtwarza tekst tagu, opcjonalnie z podmienionymi atrybutami."""
        attrs = self.attributes if attributes is None else attributes
        return f"{self.whitespace}<{self.name}{attrs}>"


# Kandydaci w kolejności dokumentu.
TagMatches: TypeAlias = list[TagMatch]
