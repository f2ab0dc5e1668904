# topmark:header:start
#
#   project      : MimeDetect
#   file         : signatures.py
#   file_relpath : src/mimedetect/cli/commands/signatures.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeDetect `signatures` command.

Lists the ordered signature table. Entries are evaluated top to bottom and the
first match wins, so the listing order is significant.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from mimedetect.cli.cli_types import EnumChoiceParam
from mimedetect.cli.cmd_common import get_ctx_console, get_effective_verbosity
from mimedetect.constants import MIMEDETECT_VERSION
from mimedetect.core.formats import OutputFormat
from mimedetect.core.markdown import render_markdown_table
from mimedetect.signatures.instances import get_signature_table

if TYPE_CHECKING:
    from mimedetect.cli.console import ConsoleLike
    from mimedetect.signatures.base import Signature


def _serialize(index: int, sig: Signature, *, long: bool) -> dict[str, Any]:
    data: dict[str, Any] = {"index": index, "mime": sig.mime, "description": sig.description}
    if long:
        data["kind"] = sig.kind.value
        data["category"] = sig.category
        data["pattern"] = sig.matcher.describe()
    return data


@click.command(
    name="signatures",
    help="List the signature table in evaluation order.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show matcher kind, category and pattern.",
)
def signatures_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List the signature table.

    Args:
        show_details (bool): Include matcher kind, category and pattern.
        output_format (OutputFormat | None): Output format to use; the
            human-readable listing if None.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_ctx_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    table: tuple[Signature, ...] = get_signature_table()
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        payload = [_serialize(i, s, long=show_details) for i, s in enumerate(table, start=1)]
        console.print(json.dumps(payload, indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for i, s in enumerate(table, start=1):
            console.print(json.dumps(_serialize(i, s, long=show_details)))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# Signatures\n")
        console.print(
            f"MimeDetect version **{MIMEDETECT_VERSION}** evaluates these signatures in order:\n"
        )
        if show_details:
            headers: list[str] = ["#", "MIME type", "Kind", "Category", "Pattern", "Description"]
            rows: list[list[str]] = [
                [
                    str(i),
                    f"`{s.mime}`",
                    s.kind.value,
                    s.category,
                    f"`{s.matcher.describe()}`",
                    s.description,
                ]
                for i, s in enumerate(table, start=1)
            ]
        else:
            headers = ["#", "MIME type", "Description"]
            rows = [[str(i), f"`{s.mime}`", s.description] for i, s in enumerate(table, start=1)]
        console.print(render_markdown_table(headers, rows, align={0: "right"}))
        return

    if vlevel > 0:
        console.print(console.styled("Signatures (first match wins):\n", bold=True, underline=True))
    num_width: int = len(str(len(table)))
    mime_width: int = max(len(s.mime) for s in table)
    for i, s in enumerate(table, start=1):
        console.print(
            f"{i:>{num_width}}. {s.mime:<{mime_width}} "
            f"{console.styled('- ' + s.description, dim=True)}"
        )
        if show_details:
            console.print(f"      kind     : {s.kind.value}")
            console.print(f"      category : {s.category}")
            console.print(f"      pattern  : {s.matcher.describe()}")
