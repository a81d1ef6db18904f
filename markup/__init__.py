"""
markup — wstrzykiwanie atrybutu data-testid do szablonów komponentów.

Interfejs publiczny:
    inject_test_id   — główna transformacja dokumentu
    find_candidates  — tagi otwierające na początku linii
    is_root_level    — klasyfikacja kandydata (stos tagów)
    apply_test_id    — dodanie / podmiana data-testid w tekście atrybutów
    TagMatch         — dopasowany tag

Typowe użycie:
    from markup import inject_test_id

    new_text = inject_test_id(text, "Counter")
    if new_text != text:
        path.write_text(new_text)
"""

from .transformer import (
    ATTRIBUTE,
    apply_test_id,
    find_candidates,
    inject_test_id,
    is_root_level,
)
from .types import TagMatch, TagMatches

__all__ = [
    "ATTRIBUTE",
    "apply_test_id",
    "find_candidates",
    "inject_test_id",
    "is_root_level",
    "TagMatch",
    "TagMatches",
]
