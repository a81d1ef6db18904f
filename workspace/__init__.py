"""
workspace — pliki, projekty i solucje do przetworzenia.

Publiczne API:
  find_files(root, pattern, recursive, exclude)   → list[Path]
  is_excluded(path, root, patterns)               → bool
  parse_solution(path)                            → list[ProjectRef]
  filter_projects(projects, include, exclude, include_tests)
  ALWAYS_EXCLUDED                                 katalogi buildów / VCS
"""

from .files    import ALWAYS_EXCLUDED, find_files, is_excluded
from .solution import (
    ProjectRef,
    ProjectRefs,
    filter_projects,
    parse_solution,
    parse_solution_text,
)

__all__ = [
    "ALWAYS_EXCLUDED",
    "find_files",
    "is_excluded",
    "ProjectRef",
    "ProjectRefs",
    "filter_projects",
    "parse_solution",
    "parse_solution_text",
]
