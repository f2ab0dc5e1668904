# topmark:header:start
#
#   project      : MimeDetect
#   file         : options.py
#   file_relpath : src/mimedetect/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and how their values are resolved.

Decorators here add the same options to the group and to commands:
verbosity (``-v``/``-q``), color (``--color``/``--no-color``) and config
sources (``--config``/``--no-config``).
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from mimedetect.cli.errors import MimedetectUsageError

P = ParamSpec("P")
R = TypeVar("R")

# Highest verbosity honored by the commands
MAX_VERBOSITY: int = 2


class ColorMode(str, Enum):
    """Value of ``--color``."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Combine the ``-v`` and ``-q`` counts into one program-output level.

    Args:
        verbose_count (int): Occurrences of ``-v``.
        quiet_count (int): Occurrences of ``-q``.

    Returns:
        int: ``-1`` when quiet (console warnings suppressed), ``0`` by default,
            up to `MAX_VERBOSITY` for banners and summaries.

    Raises:
        MimedetectUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise MimedetectUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count:
        return -1
    return min(verbose_count, MAX_VERBOSITY)


def _env_flag(name: str) -> bool | None:
    """Interpret the ``FORCE_COLOR``/``NO_COLOR`` conventions for one variable."""
    value: str | None = os.environ.get(name)
    if value is None:
        return None
    if name == "NO_COLOR":
        return True
    return value not in ("", "0")


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Decide whether the console emits ANSI styling.

    Order: ``--color always|never``, then ``FORCE_COLOR``, then ``NO_COLOR``,
    then whether stdout is a terminal.

    Args:
        cli_mode (ColorMode | None): Mode from the command line (None means auto).
        stdout_isatty (bool | None): Override for terminal detection.

    Returns:
        bool: True to enable color.
    """
    if cli_mode is ColorMode.ALWAYS:
        return True
    if cli_mode is ColorMode.NEVER:
        return False
    if _env_flag("FORCE_COLOR"):
        return True
    if _env_flag("NO_COLOR"):
        return False
    if stdout_isatty is None:
        isatty = getattr(sys.stdout, "isatty", None)
        stdout_isatty = bool(isatty()) if callable(isatty) else False
    return stdout_isatty


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Show banners and summaries (repeat for more).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Do not print warnings (errors are still shown).",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color [auto|always|never]`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Colorize output: auto (default), always or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Same as --color=never.",
    )(f)
    return f


def config_source_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add a repeatable ``--config FILE`` and ``--no-config``."""
    f = click.option(
        "--config",
        "config_paths",
        type=click.Path(dir_okay=False, path_type=str),
        multiple=True,
        help="Merge settings from this TOML file (repeatable; later files win).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore pyproject.toml and mimedetect.toml in the working directory.",
    )(f)
    return f
