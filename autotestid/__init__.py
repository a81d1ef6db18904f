"""
autotestid — CLI wstrzykujące data-testid do tagów root-level plików komponentów.

Transformacja tekstu: pakiet markup. Wyszukiwanie plików i projektów: workspace.
"""

__version__ = "0.1.0"
