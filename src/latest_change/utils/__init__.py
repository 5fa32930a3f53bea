"""Shared constants used across layers.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from __future__ import annotations

DEPENDENCIES_FILENAME: str = ".deps.toml"
"""Dependency file looked up next to the target file."""

DIRTY_MARKER: str = " DIRTY"
"""Suffix appended to a commit hash when the queried files are modified."""

LOG_LEVEL_ENV_VAR: str = "LATEST_CHANGE_LOG_LEVEL"
"""Environment variable consulted when ``--log-level`` is not given."""

DEFAULT_LOG_LEVEL: str = "WARNING"

__all__: list[str] = [
    "DEFAULT_LOG_LEVEL",
    "DEPENDENCIES_FILENAME",
    "DIRTY_MARKER",
    "LOG_LEVEL_ENV_VAR",
]
