"""git CLI backed implementation of :class:`~latest_change.core.protocols.VcsProvider`.

This module is the **only** place in the codebase that runs ``git``.
``subprocess`` failures are caught here and re-raised as typed
:class:`~latest_change.exceptions.LatestChangeError` subclasses.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from latest_change.exceptions import GitCommandError, GitNotFoundError

log = logging.getLogger(__name__)


class GitCliProvider:
    """Concrete :class:`VcsProvider` that shells out to the git CLI.

    Usage::

        provider = GitCliProvider(cwd=Path("docs"))
        provider.latest_commit([Path("docs/report.tex")], "%H")

    Parameters
    ----------
    cwd:
        Directory every git command runs in.
    git:
        The git executable, ``"git"`` (resolved via PATH) by default.
    """

    def __init__(self, cwd: Path, git: str | Path = "git") -> None:
        self._cwd: Path = cwd
        self._git: str = str(git)

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def is_inside_work_tree(self) -> bool:
        """Run ``git rev-parse --is-inside-work-tree``."""
        result = self._run(["rev-parse", "--is-inside-work-tree"])
        return result.returncode == 0 and result.stdout.strip() == "true"

    def latest_commit(self, paths: Sequence[Path], pretty: str) -> str | None:
        """Run ``git log -1`` restricted to *paths*.

        Returns ``None`` when git exits non-zero (e.g. a repository
        without any commits yet).
        """
        result = self._run(
            ["log", "-1", f"--pretty=format:{pretty}", "--", *map(str, paths)],
        )
        if result.returncode != 0:
            log.warning("git log failed: %s", result.stderr.strip())
            return None
        return result.stdout.strip()

    def status(self, paths: Sequence[Path]) -> str:
        """Run ``git status --porcelain=v2`` restricted to *paths*.

        Raises
        ------
        GitCommandError
            When git exits non-zero.
        """
        result = self._run(["status", "--porcelain=v2", "--", *map(str, paths)])
        if result.returncode != 0:
            raise GitCommandError(
                f"git status failed: {result.stderr.strip()}",
            )
        return result.stdout

    # ------------------------------------------------------------------
    # Process invocation
    # ------------------------------------------------------------------

    def _run(self, args: list[str]) -> subprocess.CompletedProcess[str]:
        """Run git with *args* in the configured directory.

        Pathspecs are taken literally, so ``[``, ``*`` and ``?`` in file names
        never act as wildcards.
        """
        command = [self._git, "--literal-pathspecs", *args]
        log.debug("Running %s in %s", " ".join(command), self._cwd)
        try:
            return subprocess.run(
                command,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise GitNotFoundError(
                f"Unable to execute {self._git}.",
                hint="Make sure git is installed and on PATH.",
            ) from exc
        except OSError as exc:
            raise GitCommandError(f"Failed to execute git command: {exc}") from exc
