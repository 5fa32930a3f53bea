"""Custom exception hierarchy for latest-change.

All exceptions that cross layer boundaries must inherit from
:class:`LatestChangeError`.  Raw exceptions from ``subprocess``,
``tomllib`` or the filesystem must NEVER propagate beyond the
infrastructure layer — they are caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
LatestChangeError
├── UsageError
├── TargetNotFoundError
├── DependencyFileError
├── EnvironmentError
│   └── GitNotFoundError
├── NotAGitRepositoryError
├── GitCommandError
└── NoCommitsFoundError
"""

from __future__ import annotations


class LatestChangeError(Exception):
    """Base exception for all latest-change errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class UsageError(LatestChangeError):
    """Raised when the command line is missing or has invalid arguments."""


class TargetNotFoundError(LatestChangeError):
    """Raised when the target file does not exist."""


# --- Dependency file -------------------------------------------------------

class DependencyFileError(LatestChangeError):
    """Raised when the dependency file cannot be read or parsed."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(LatestChangeError):
    """Raised when a required runtime dependency is not available."""


class GitNotFoundError(EnvironmentError):
    """Raised when git cannot be located on the system PATH."""


# --- Version control -------------------------------------------------------

class NotAGitRepositoryError(LatestChangeError):
    """Raised when the target does not live inside a git work tree."""


class GitCommandError(LatestChangeError):
    """Raised when a git invocation fails unexpectedly."""


class NoCommitsFoundError(LatestChangeError):
    """Raised when no commit touches any of the queried paths."""
