# topmark:header:start
#
#   project      : MimeDetect
#   file         : detect.py
#   file_relpath : src/mimedetect/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeDetect `detect` command.

Detects the MIME type of files (and/or standard input) by inspecting at most
the first 512 bytes of each. Directories are expanded with ``--recursive``;
gitignore-style ``--exclude`` patterns filter the expanded list.

Exit status:
    * 0 when every input was inspected;
    * 66 when an input path does not exist;
    * 77 when a file could not be opened for lack of permission;
    * 74 for other read errors.

The first error encountered decides the exit status; remaining inputs are
still processed and reported.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from mimedetect.cli.cli_types import EnumChoiceParam
from mimedetect.cli.cmd_common import (
    build_config,
    freeze_config,
    get_ctx_console,
    get_effective_verbosity,
)
from mimedetect.cli.errors import (
    MimedetectError,
    MimedetectFileNotFoundError,
    MimedetectUsageError,
    error_for_os_error,
)
from mimedetect.cli.exit_codes import ExitCode
from mimedetect.cli.options import config_source_options
from mimedetect.config.logging import get_logger
from mimedetect.constants import DEFAULT_TYPE, HEADER_LENGTH, STDIN_MARKER
from mimedetect.core.formats import OutputFormat
from mimedetect.core.markdown import render_markdown_table
from mimedetect.detector import detect_signature, read_header
from mimedetect.file_resolver import resolve_file_list

if TYPE_CHECKING:
    from mimedetect.cli.console import ConsoleLike
    from mimedetect.config import Config, MutableConfig
    from mimedetect.file_resolver import ResolvedFiles
    from mimedetect.signatures.base import Signature

logger = get_logger(__name__)


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of detecting one input.

    Attributes:
        path (str): Input path as given (``-`` for standard input).
        mime (str): Detected MIME type.
        signature (Signature | None): Table entry that decided the type.
    """

    path: str
    mime: str
    signature: Signature | None

    def to_dict(self, *, long: bool) -> dict[str, Any]:
        """Serialize for the machine output formats."""
        data: dict[str, Any] = {"path": self.path, "mime": self.mime}
        if long and self.signature is not None:
            data["kind"] = self.signature.kind.value
            data["category"] = self.signature.category
            data["description"] = self.signature.description
        return data


def _result_for(path: str, header: bytes) -> DetectionResult:
    sig: Signature | None = detect_signature(header)
    return DetectionResult(path=path, mime=sig.mime if sig else DEFAULT_TYPE, signature=sig)


def detect_files(
    files: list[Path],
    console: ConsoleLike,
) -> tuple[list[DetectionResult], ExitCode | None]:
    """Detect each file in turn and return (results, first_error_code).

    Read errors are reported on the console and do not stop processing.
    """
    results: list[DetectionResult] = []
    encountered: ExitCode | None = None
    for path in files:
        try:
            header: bytes = read_header(path)
        except OSError as e:
            logger.error("Cannot read %s: %s", path, e)
            err: MimedetectError = error_for_os_error(path, e)
            console.error(err.format_message())
            encountered = encountered or ExitCode(err.exit_code)
            continue
        results.append(_result_for(str(path), header))
    return results, encountered


def _render_default(
    console: ConsoleLike,
    results: list[DetectionResult],
    *,
    long: bool,
    vlevel: int,
) -> None:
    if vlevel > 0:
        console.print(console.styled("Detected MIME types:\n", bold=True, underline=True))
    for r in results:
        line: str = f"{r.path}: {console.styled(r.mime, fg='cyan')}"
        if long and r.signature is not None:
            detail: str = (
                f"[{r.signature.kind.value}] {r.signature.category}: {r.signature.description}"
            )
            line += "  " + console.styled(detail, dim=True)
        console.print(line)
    if vlevel > 0:
        console.print()
        console.print(f"{len(results)} input(s) inspected.")


def _render_markdown(console: ConsoleLike, results: list[DetectionResult], *, long: bool) -> None:
    console.print("# Detected MIME types\n")
    if long:
        headers: list[str] = ["Path", "MIME type", "Kind", "Category", "Signature"]
        rows: list[list[str]] = [
            [
                f"`{r.path}`",
                f"`{r.mime}`",
                r.signature.kind.value if r.signature else "",
                r.signature.category if r.signature else "",
                r.signature.description if r.signature else "",
            ]
            for r in results
        ]
    else:
        headers = ["Path", "MIME type"]
        rows = [[f"`{r.path}`", f"`{r.mime}`"] for r in results]
    console.print(render_markdown_table(headers, rows))


def render_results(
    console: ConsoleLike,
    results: list[DetectionResult],
    *,
    fmt: OutputFormat,
    long: bool,
    vlevel: int = 0,
) -> None:
    """Print ``results`` in the requested output format."""
    if fmt == OutputFormat.JSON:
        console.print(json.dumps([r.to_dict(long=long) for r in results], indent=2))
    elif fmt == OutputFormat.NDJSON:
        for r in results:
            console.print(json.dumps(r.to_dict(long=long)))
    elif fmt == OutputFormat.MARKDOWN:
        _render_markdown(console, results, long=long)
    else:
        _render_default(console, results, long=long, vlevel=vlevel)


@click.command(
    name="detect",
    help="Detect the MIME type of files from their content.",
    epilog="""
Only the first 512 bytes of each input are read. Use '-' (or --stdin) to
inspect standard input.
""",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=str))
@click.option(
    "--stdin",
    "use_stdin",
    is_flag=True,
    help="Read the content to inspect from standard input (same as '-').",
)
@click.option(
    "-r",
    "--recursive",
    is_flag=True,
    help="Descend into directories.",
)
@click.option(
    "--follow-symlinks",
    is_flag=True,
    help="Follow symbolic links while descending into directories.",
)
@click.option(
    "--exclude",
    "-e",
    "exclude_patterns",
    multiple=True,
    help="Skip files matching this gitignore-style pattern (repeatable).",
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
    help="Also show the signature that decided each type.",
)
@config_source_options
def detect_command(
    *,
    paths: tuple[str, ...],
    use_stdin: bool = False,
    recursive: bool = False,
    follow_symlinks: bool = False,
    exclude_patterns: tuple[str, ...] = (),
    output_format: OutputFormat | None = None,
    show_details: bool = False,
    config_paths: tuple[str, ...] = (),
    no_config: bool = False,
) -> None:
    """Detect MIME types for the given inputs.

    Args:
        paths (tuple[str, ...]): Files and directories; ``-`` stands for stdin.
        use_stdin (bool): Inspect standard input.
        recursive (bool): Descend into directories.
        follow_symlinks (bool): Follow symbolic links while descending.
        exclude_patterns (tuple[str, ...]): Extra gitignore-style exclusions.
        output_format (OutputFormat | None): Output format (from config if None).
        show_details (bool): Include the deciding signature.
        config_paths (tuple[str, ...]): Explicit config files.
        no_config (bool): Skip config discovery.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_ctx_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    read_stdin: bool = use_stdin or STDIN_MARKER in paths
    file_args: list[str] = [p for p in paths if p != STDIN_MARKER]
    if not read_stdin and not file_args:
        raise MimedetectUsageError("No input given. Pass PATHS, or '-' to read standard input.")

    draft: MutableConfig = build_config(config_paths=config_paths, no_config=no_config)
    if recursive:
        draft.recursive = True
    if follow_symlinks:
        draft.follow_symlinks = True
    draft.exclude.extend(exclude_patterns)
    if output_format is not None:
        draft.output_format = output_format
    if show_details:
        draft.long = True
    config: Config = freeze_config(draft)

    results: list[DetectionResult] = []
    encountered: ExitCode | None = None

    if read_stdin:
        header: bytes = click.get_binary_stream("stdin").read(HEADER_LENGTH)
        results.append(_result_for(STDIN_MARKER, header))

    if file_args:
        resolved: ResolvedFiles = resolve_file_list(file_args, config)
        for missing in resolved.missing:
            not_found = MimedetectFileNotFoundError(f"No such file or directory: {missing}")
            console.error(not_found.format_message())
            encountered = encountered or ExitCode(not_found.exit_code)
        if vlevel >= 0:
            for skipped in resolved.skipped_dirs:
                console.warn(f"Skipping directory {skipped} (use --recursive to descend)")
        file_results, file_error = detect_files(resolved.files, console)
        results.extend(file_results)
        encountered = encountered or file_error

    render_results(
        console,
        results,
        fmt=config.output_format,
        long=config.long,
        vlevel=vlevel,
    )

    if encountered is not None:
        ctx.exit(int(encountered))
