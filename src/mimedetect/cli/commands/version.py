# topmark:header:start
#
#   project      : MimeDetect
#   file         : version.py
#   file_relpath : src/mimedetect/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeDetect `version` command.

Prints the MimeDetect version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from mimedetect.cli.cli_types import EnumChoiceParam
from mimedetect.cli.cmd_common import get_ctx_console, get_effective_verbosity
from mimedetect.constants import MIMEDETECT_VERSION
from mimedetect.core.formats import OutputFormat

if TYPE_CHECKING:
    from mimedetect.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of MimeDetect.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of MimeDetect.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_ctx_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": MIMEDETECT_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# MimeDetect Version\n")
        console.print(f"**MimeDetect version: {MIMEDETECT_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("MimeDetect version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(MIMEDETECT_VERSION, bold=True)}")
    else:
        console.print(console.styled(MIMEDETECT_VERSION, bold=True))
