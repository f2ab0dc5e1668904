# topmark:header:start
#
#   project      : MimeDetect
#   file         : formats.py
#   file_relpath : src/mimedetect/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions used across MimeDetect frontends.

This module centralizes the `OutputFormat` enum so the config layer and CLI
commands agree on the same format vocabulary without depending on Click.

Machine formats (JSON, NDJSON) are intended to be stable and colorless.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        DEFAULT: Human-friendly text output; may include ANSI color if enabled.
        MARKDOWN: A Markdown document.
        JSON: A single JSON document (machine-readable).
        NDJSON: One JSON object per line (newline-delimited JSON; machine-readable).

    Notes:
        - Machine formats (``JSON`` and ``NDJSON``) must not include ANSI color.
        - Use with [`mimedetect.cli.cli_types.EnumChoiceParam`][] to parse
          ``--format`` from Click.
    """

    # Human formats:
    DEFAULT = "default"
    MARKDOWN = "markdown"

    # Machine formats:
    JSON = "json"
    NDJSON = "ndjson"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption.

    Args:
        fmt (OutputFormat | None): The output format to be checked.

    Returns:
        bool: `True` if the format provided is a machine format, else `False`.
    """
    return fmt in {OutputFormat.JSON, OutputFormat.NDJSON}
