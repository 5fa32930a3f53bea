"""Logging configuration for the CLI.

Library modules log through ``logging.getLogger(__name__)``; only this
module installs handlers.  Records are rendered to stderr by Rich's
:class:`~rich.logging.RichHandler`, or by a plain stream handler when
Rich is not installed.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

from latest_change.cli.console import get_rich_console
from latest_change.exceptions import EnvironmentError, UsageError
from latest_change.utils import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")

_LOGGER_NAME = "latest_change"


def resolve_log_level(
    cli_level: str | None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the effective level: CLI flag, then environment, then default.

    Raises
    ------
    UsageError
        If the chosen level is not one of :data:`LOG_LEVELS`.
    """
    env = os.environ if environ is None else environ
    level = cli_level or env.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    level = level.strip().upper()
    if level not in LOG_LEVELS:
        raise UsageError(
            f"Invalid log level: {level}",
            hint=f"Choose one of: {', '.join(LOG_LEVELS)}",
        )
    return level


def _build_handler() -> logging.Handler:
    try:
        console = get_rich_console()
    except EnvironmentError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        return handler

    from rich.logging import RichHandler

    return RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(level: str) -> logging.Logger:
    """Attach a stderr handler to the package logger at *level*.

    Calling it again replaces the previous handler.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(_build_handler())
    logger.setLevel(level)
    return logger
