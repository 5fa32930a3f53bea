"""latest-change — report the latest git commit affecting a file.

Optionally widens the query to the files declared in a ``.deps.toml``
dependency file and flags uncommitted changes in the working tree.
"""

from latest_change.version import __version__

__all__: list[str] = ["__version__"]
