"""Infrastructure layer — external system integration.

This layer wraps all interaction with git, the operating system and the
filesystem.  Every raw exception must be caught here and re-raised as a
:class:`~latest_change.exceptions.LatestChangeError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from latest_change.infra.deps_file import load_dependency_file, parse_dependency_file
from latest_change.infra.filesystem import missing_paths, resolve_target
from latest_change.infra.git_detector import GitDetection, detect_git, require_git
from latest_change.infra.git_provider import GitCliProvider

__all__: list[str] = [
    "GitCliProvider",
    "GitDetection",
    "detect_git",
    "load_dependency_file",
    "missing_paths",
    "parse_dependency_file",
    "require_git",
    "resolve_target",
]
