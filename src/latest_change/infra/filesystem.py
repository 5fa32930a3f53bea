"""Infrastructure: target path resolution and existence checks."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from latest_change.exceptions import TargetNotFoundError


def resolve_target(raw: str) -> Path:
    """Return the absolute, symlink-free path of *raw*.

    Raises
    ------
    TargetNotFoundError
        If *raw* does not exist.
    """
    try:
        return Path(raw).resolve(strict=True)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise TargetNotFoundError(f"{raw} does not exist") from exc
    except (OSError, RuntimeError) as exc:
        raise TargetNotFoundError(f"Unable to resolve {raw}: {exc}") from exc


def missing_paths(paths: Iterable[Path]) -> list[Path]:
    """Return the entries of *paths* that do not exist on disk."""
    return [path for path in paths if not path.exists()]
