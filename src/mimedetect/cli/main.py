# topmark:header:start
#
#   project      : MimeDetect
#   file         : main.py
#   file_relpath : src/mimedetect/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``mimedetect`` command group.

The group callback resolves verbosity, logging and color once and stores the
results with the program-output console on ``ctx.obj``; subcommands read them
from there.
"""

from __future__ import annotations

from typing import Any

import click

from mimedetect.cli.commands.config import config_command
from mimedetect.cli.commands.detect import detect_command
from mimedetect.cli.commands.signatures import signatures_command
from mimedetect.cli.commands.version import version_command
from mimedetect.cli.console import ClickConsole
from mimedetect.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from mimedetect.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> dict[str, Any]:
    """Populate ``ctx.obj`` with the state shared by all subcommands.

    Keys: ``verbosity_level`` (int), ``log_level`` (int | None),
    ``color_enabled`` (bool) and ``console`` (`ClickConsole`).

    Args:
        ctx (click.Context): Current Click context.
        verbose (int): Count of ``-v``.
        quiet (int): Count of ``-q``.
        color_mode (str | None): Value of ``--color``.
        no_color (bool): Whether ``--no-color`` was given.

    Returns:
        dict[str, Any]: The populated ``ctx.obj``.
    """
    state: dict[str, Any] = ctx.ensure_object(dict)
    state["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Diagnostics are controlled by MIMEDETECT_LOG_LEVEL, not by -v/-q
    state["log_level"] = resolve_env_log_level()
    setup_logging(level=state["log_level"])

    mode: ColorMode | None = ColorMode(color_mode) if color_mode else None
    if no_color:
        mode = ColorMode.NEVER
    state["color_enabled"] = resolve_color_mode(cli_mode=mode)
    ctx.color = state["color_enabled"]
    state["console"] = ClickConsole(enable_color=state["color_enabled"])
    logger.debug("CLI state: %s", {k: v for k, v in state.items() if k != "console"})
    return state


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="MimeDetect: identify content types from file content.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the MimeDetect CLI."""
    state: dict[str, Any] = init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    if ctx.invoked_subcommand is None:
        console: ClickConsole = state["console"]
        console.print("Hint: use 'mimedetect detect [PATHS...]' to identify files.")
        console.print()
        console.print(ctx.get_help())


for _command in (detect_command, signatures_command, config_command, version_command):
    cli.add_command(_command)

if __name__ == "__main__":
    cli()
