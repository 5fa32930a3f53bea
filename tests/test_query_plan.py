"""Tests for query-set resolution (core/query_plan.py).

Coverage:
* No dependency file falls back to the containing directory.
* Missing entry falls back to the containing directory with a warning.
* Declared dependencies are unioned with the target, in order, deduplicated.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from latest_change.core.models import DependencyEntry, DependencyFile, QueryScope
from latest_change.core.query_plan import build_query_plan

TARGET = Path("/repo/docs/report.tex")


def _deps(*entries: DependencyEntry) -> DependencyFile:
    return DependencyFile(path=Path("/repo/docs/.deps.toml"), entries=entries)


class TestDirectoryFallback:
    def test_no_dependency_file(self) -> None:
        plan = build_query_plan(TARGET, None)
        assert plan.scope is QueryScope.DIRECTORY
        assert plan.paths == (Path("/repo/docs"),)
        assert plan.target == TARGET

    def test_no_entry_for_target(self, caplog: pytest.LogCaptureFixture) -> None:
        deps = _deps(DependencyEntry(filename="other.tex", dependencies=()))
        with caplog.at_level(logging.WARNING, logger="latest_change"):
            plan = build_query_plan(TARGET, deps)

        assert plan.scope is QueryScope.DIRECTORY
        assert plan.paths == (Path("/repo/docs"),)
        assert "report.tex" in caplog.text

    def test_empty_dependency_file(self) -> None:
        plan = build_query_plan(TARGET, _deps())
        assert plan.scope is QueryScope.DIRECTORY


class TestDeclaredDependencies:
    def test_union_of_target_and_dependencies(self) -> None:
        deps = _deps(
            DependencyEntry(
                filename="report.tex",
                dependencies=(Path("/repo/docs/intro.tex"), Path("/repo/shared/macros.tex")),
            ),
        )
        plan = build_query_plan(TARGET, deps)
        assert plan.scope is QueryScope.DEPENDENCIES
        assert plan.paths == (
            TARGET,
            Path("/repo/docs/intro.tex"),
            Path("/repo/shared/macros.tex"),
        )

    def test_entry_without_dependencies_queries_target_only(self) -> None:
        deps = _deps(DependencyEntry(filename="report.tex", dependencies=()))
        plan = build_query_plan(TARGET, deps)
        assert plan.scope is QueryScope.DEPENDENCIES
        assert plan.paths == (TARGET,)

    def test_duplicates_removed_keeping_first(self) -> None:
        intro = Path("/repo/docs/intro.tex")
        deps = _deps(
            DependencyEntry(filename="report.tex", dependencies=(intro, TARGET, intro)),
        )
        plan = build_query_plan(TARGET, deps)
        assert plan.paths == (TARGET, intro)
