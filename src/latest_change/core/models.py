"""Domain models for latest-change.

All models are **frozen** dataclasses — immutable value objects that
live for a single invocation.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from latest_change.utils import DIRTY_MARKER


# ---------------------------------------------------------------------------
# Dependency declarations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DependencyEntry:
    """A single ``.deps.toml`` entry."""

    filename: str
    """File name the entry is keyed by (e.g. ``report.tex``)."""

    dependencies: tuple[Path, ...]
    """Absolute paths whose changes count toward *filename*.  May be empty."""


@dataclass(frozen=True, slots=True)
class DependencyFile:
    """Parsed contents of a dependency file."""

    path: Path
    """Location the entries were read from."""

    entries: tuple[DependencyEntry, ...]

    def get(self, filename: str) -> DependencyEntry | None:
        """Return the entry keyed by *filename*, or ``None``."""
        for entry in self.entries:
            if entry.filename == filename:
                return entry
        return None

    def __len__(self) -> int:
        return len(self.entries)


# ---------------------------------------------------------------------------
# Query plan
# ---------------------------------------------------------------------------

class QueryScope(enum.Enum):
    """How the set of queried paths was derived."""

    DEPENDENCIES = "dependencies"
    """The target file plus its declared dependencies."""

    DIRECTORY = "directory"
    """The target's containing directory, recursively."""


@dataclass(frozen=True, slots=True)
class QueryPlan:
    """The paths handed to the version-control queries."""

    target: Path
    scope: QueryScope
    paths: tuple[Path, ...]


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

class ReportMode(enum.Enum):
    """What to report about the latest commit.

    The value is the ``git log --pretty=format:`` placeholder.
    """

    COMMIT = "%H"
    """Full commit hash."""

    DATE = "%cs"
    """Committer date, short ``YYYY-MM-DD`` form."""


@dataclass(frozen=True, slots=True)
class LatestChange:
    """Outcome of a latest-change query."""

    value: str
    """Commit hash or date, depending on :attr:`mode`."""

    mode: ReportMode

    dirty: bool = False
    """Whether the queried paths have uncommitted modifications."""

    def render(self) -> str:
        """Format as the single output line."""
        if self.dirty:
            return f"{self.value}{DIRTY_MARKER}"
        return self.value
