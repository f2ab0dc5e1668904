# topmark:header:start
#
#   project      : MimeDetect
#   file         : logging.py
#   file_relpath : src/mimedetect/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic logging for MimeDetect.

Adds a ``TRACE`` level below ``DEBUG`` (the detector reports every signature
decision at that level), a logger class exposing ``.trace()``, and a
formatter that colors records by severity with ``yachalk``.

Logging is silent (``CRITICAL``) unless ``MIMEDETECT_LOG_LEVEL`` or an
explicit level says otherwise. Records go to standard error so results on
standard output stay pipeable.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "MIMEDETECT_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
VERBOSE_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(message)s"


class MimedetectLogger(logging.Logger):
    """Logger with a `trace` method for the ``TRACE`` level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at ``TRACE`` level.

        Args:
            msg (object): Message format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(MimedetectLogger)

# Lowest level first; a record takes the style of the highest threshold it reaches
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color of its level.

        Args:
            record (logging.LogRecord): Record to format.

        Returns:
            str: The colored, formatted record.
        """
        text: str = super().format(record)
        style: Callable[[str], str] = chalk.dim
        for threshold, candidate in _LEVEL_STYLES:
            if record.levelno >= threshold:
                style = candidate
        return style(text)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
}


def resolve_env_log_level() -> int | None:
    """Return the level named by ``MIMEDETECT_LOG_LEVEL``, if any.

    Accepts level names (case-insensitive, ``TRACE`` included) and integers.
    Unset, empty or unknown values yield None.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """(Re)configure the root logger with a single colored stderr handler.

    Args:
        level (int | None): Level to apply; when None, `resolve_env_log_level`
            is consulted and ``CRITICAL`` is the fallback.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    fmt: str = LOG_FORMAT if level >= logging.INFO else VERBOSE_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt))
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> MimedetectLogger:
    """Return the `MimedetectLogger` called ``name``."""
    return cast("MimedetectLogger", logging.getLogger(name))
