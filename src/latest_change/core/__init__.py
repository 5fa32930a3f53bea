"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or subprocess I/O.
* No imports from ``cli`` or ``infra``.
"""

from latest_change.core.change_service import LatestChangeService
from latest_change.core.models import (
    DependencyEntry,
    DependencyFile,
    LatestChange,
    QueryPlan,
    QueryScope,
    ReportMode,
)
from latest_change.core.protocols import VcsProvider
from latest_change.core.query_plan import build_query_plan

__all__: list[str] = [
    "DependencyEntry",
    "DependencyFile",
    "LatestChange",
    "LatestChangeService",
    "QueryPlan",
    "QueryScope",
    "ReportMode",
    "VcsProvider",
    "build_query_plan",
]
