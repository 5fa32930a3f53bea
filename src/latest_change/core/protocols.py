"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class VcsProvider(Protocol):
    """Contract for version-control backends.

    Any object implementing these three methods satisfies the protocol
    structurally (no explicit inheritance required).  Implementations
    must map backend-specific failures to
    :class:`~latest_change.exceptions.LatestChangeError` subclasses.
    """

    def is_inside_work_tree(self) -> bool:
        """Return ``True`` when the provider's directory is in a work tree."""
        ...  # pragma: no cover

    def latest_commit(self, paths: Sequence[Path], pretty: str) -> str | None:
        """Return the latest commit touching *paths*, formatted by *pretty*.

        Parameters
        ----------
        paths:
            Files or directories restricting the history query.
        pretty:
            A ``--pretty=format:`` placeholder string (e.g. ``"%H"``).

        Returns
        -------
        str | None
            Formatted output (possibly empty when nothing matched), or
            ``None`` when the backend reported a failure.
        """
        ...  # pragma: no cover

    def status(self, paths: Sequence[Path]) -> str:
        """Return machine-readable working-tree status for *paths*.

        Empty output means the paths are clean.

        Raises
        ------
        GitCommandError
            When the status query fails.
        """
        ...  # pragma: no cover
