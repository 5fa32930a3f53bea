"""Infrastructure: reading the ``.deps.toml`` dependency file.

The file maps file names to the other files whose history counts
toward them::

    ["report.tex"]
    dependencies = ["chapters/intro.tex", "../shared/macros.tex"]

Relative dependency paths resolve against the directory holding the
dependency file.  Unknown keys inside an entry are ignored.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from latest_change.core.models import DependencyEntry, DependencyFile
from latest_change.exceptions import DependencyFileError

log = logging.getLogger(__name__)


def load_dependency_file(path: Path) -> DependencyFile | None:
    """Read and parse the dependency file at *path*.

    Returns ``None`` when *path* does not exist.

    Raises
    ------
    DependencyFileError
        If the file cannot be read, is not valid TOML, or does not
        follow the expected layout.
    """
    if not path.exists():
        log.debug("No dependency file at %s", path)
        return None

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DependencyFileError(
            f"Failed to read {path.name}: {exc}",
        ) from exc

    dependency_file = parse_dependency_file(content, path)
    log.debug(
        "Found %d dependency entries in %s: %s",
        len(dependency_file),
        path,
        dependency_file.entries,
    )
    return dependency_file


def parse_dependency_file(content: str, path: Path) -> DependencyFile:
    """Parse TOML *content* that was read from *path*."""
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise DependencyFileError(
            f"Failed to parse {path.name}: {exc}",
            hint="Each entry must be a table with an optional dependencies array.",
        ) from exc

    base = path.parent
    entries = tuple(
        _parse_entry(filename, raw, base, path)
        for filename, raw in data.items()
    )
    return DependencyFile(path=path, entries=entries)


def _parse_entry(
    filename: str,
    raw: Any,
    base: Path,
    path: Path,
) -> DependencyEntry:
    """Convert one top-level TOML value into a :class:`DependencyEntry`."""
    if not isinstance(raw, dict):
        raise DependencyFileError(
            f"Failed to parse {path.name}: entry {filename!r} must be a table.",
        )

    raw_deps = raw.get("dependencies")
    if raw_deps is None:
        return DependencyEntry(filename=filename, dependencies=())

    if not isinstance(raw_deps, list) or not all(isinstance(d, str) for d in raw_deps):
        raise DependencyFileError(
            f"Failed to parse {path.name}: "
            f"'dependencies' of {filename!r} must be an array of strings.",
        )

    return DependencyEntry(
        filename=filename,
        dependencies=tuple((base / dep).resolve() for dep in raw_deps),
    )
