"""Core change service — finds the latest commit for a query plan.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~latest_change.core.protocols.VcsProvider`
injected at construction time, keeping the core free of any
``subprocess`` imports.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* Only :class:`~latest_change.exceptions.LatestChangeError` subclasses escape.
* The dirty marker is only evaluated in :attr:`ReportMode.COMMIT` mode.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from latest_change.core.models import LatestChange, QueryPlan, ReportMode
from latest_change.core.protocols import VcsProvider
from latest_change.exceptions import (
    GitCommandError,
    LatestChangeError,
    NoCommitsFoundError,
    NotAGitRepositoryError,
)

log = logging.getLogger(__name__)

_T = TypeVar("_T")


class LatestChangeService:
    """Stateless service that answers "what changed last?" for a plan.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`VcsProvider` protocol.
    """

    def __init__(self, provider: VcsProvider) -> None:
        self._provider: VcsProvider = provider

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def ensure_repository(self) -> None:
        """Raise :class:`NotAGitRepositoryError` outside a work tree."""
        if not self._call(self._provider.is_inside_work_tree):
            raise NotAGitRepositoryError(
                "Not a git repository (or any of the parent directories): .git",
                hint="Run inside a git work tree, or `git init` first.",
            )

    def latest_change(self, plan: QueryPlan, mode: ReportMode) -> LatestChange:
        """Return the latest commit (or its date) affecting *plan*.

        Raises
        ------
        NotAGitRepositoryError
            If the provider is not inside a work tree.
        NoCommitsFoundError
            If no commit touches any path in the plan.
        GitCommandError
            If the backend fails unexpectedly.
        """
        self.ensure_repository()

        output = self._call(
            lambda: self._provider.latest_commit(plan.paths, mode.value),
        )
        value = output.strip() if output is not None else ""
        if not value:
            raise NoCommitsFoundError("No commits found.")

        dirty = False
        if mode is ReportMode.COMMIT:
            dirty = self.is_dirty(plan)

        log.debug("Latest change for %s: %s (dirty=%s)", plan.target, value, dirty)
        return LatestChange(value=value, mode=mode, dirty=dirty)

    def is_dirty(self, plan: QueryPlan) -> bool:
        """Return ``True`` when the working tree reports anything for *plan*."""
        status = self._call(lambda: self._provider.status(plan.paths))
        return bool(status.strip())

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    def _call(func: Callable[[], _T]) -> _T:
        """Call the provider and ensure only our exceptions escape."""
        try:
            return func()
        except LatestChangeError:
            raise
        except Exception as exc:
            raise GitCommandError(
                f"Unexpected provider error: {exc}",
            ) from exc
