"""Infrastructure: git detection and platform guidance.

Locates the git binary on the system PATH and provides
platform-specific installation guidance when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from latest_change.exceptions import GitNotFoundError


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GitDetection:
    """Result of a git detection probe.

    Attributes
    ----------
    found : bool
        Whether git was located on PATH.
    path : Path | None
        Absolute path to the git binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing git on the current
        platform.  Empty when git is already present.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_git() -> GitDetection:
    """Probe the system for a git binary.

    Returns a :class:`GitDetection` regardless of whether git is present.
    """
    result = shutil.which("git")

    if result is not None:
        return GitDetection(
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )

    return GitDetection(
        found=False,
        path=None,
        install_commands=_platform_install_commands(),
    )


def require_git() -> Path:
    """Locate git or raise :class:`GitNotFoundError`."""
    detection = detect_git()
    if not detection.found or detection.path is None:
        hint_lines: list[str] = []
        if detection.install_commands:
            hint_lines.append("Install git using one of:")
            hint_lines.extend(f"  {cmd}" for cmd in detection.install_commands)
        raise GitNotFoundError(
            "git is not installed or not on PATH.",
            hint="\n".join(hint_lines) if hint_lines else None,
        )
    return detection.path


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Git.Git",
            "choco install git",
        )
    if system == "linux":
        return (
            "sudo apt install git",
            "sudo dnf install git",
            "sudo pacman -S git",
        )
    if system == "darwin":
        return (
            "xcode-select --install",
            "brew install git",
        )
    return ("Please install git from https://git-scm.com/downloads",)
