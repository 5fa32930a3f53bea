"""Pure query-set resolution.

Decides which paths the history query covers for a target file:

1. **No dependency file** — the target's containing directory.
2. **No entry for the target** — the containing directory, with a warning.
3. **Entry present** — the target followed by its declared dependencies,
   in declaration order, duplicates removed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from latest_change.core.models import DependencyFile, QueryPlan, QueryScope

log = logging.getLogger(__name__)


def _unique(paths: Iterable[Path]) -> tuple[Path, ...]:
    """Drop repeated paths, keeping the first occurrence."""
    seen: set[Path] = set()
    result: list[Path] = []
    for path in paths:
        if path not in seen:
            seen.add(path)
            result.append(path)
    return tuple(result)


def directory_plan(target: Path) -> QueryPlan:
    """Query everything below the target's directory."""
    return QueryPlan(
        target=target,
        scope=QueryScope.DIRECTORY,
        paths=(target.parent,),
    )


def build_query_plan(
    target: Path,
    dependency_file: DependencyFile | None,
) -> QueryPlan:
    """Resolve the set of paths whose history decides *target*'s latest change.

    *target* must already be absolute; dependency paths inside
    *dependency_file* are expected to be resolved by the loader.
    """
    if dependency_file is None:
        return directory_plan(target)

    entry = dependency_file.get(target.name)
    if entry is None:
        log.warning(
            "No dependencies entry found for file %s. Monitoring base directory.",
            target.name,
        )
        return directory_plan(target)

    return QueryPlan(
        target=target,
        scope=QueryScope.DEPENDENCIES,
        paths=_unique((target, *entry.dependencies)),
    )
