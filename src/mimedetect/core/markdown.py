# topmark:header:start
#
#   project      : MimeDetect
#   file         : markdown.py
#   file_relpath : src/mimedetect/core/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown rendering helpers shared by the CLI commands.

The helpers here are Click-free and return plain strings.
"""

from __future__ import annotations

from typing import Mapping, Sequence


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers (Sequence[str]): Column headers.
        rows (Sequence[Sequence[str]]): Table rows, each as long as ``headers``.
        align (Mapping[int, str] | None): Optional column index to alignment
            mapping: ``"left"`` (default), ``"right"`` or ``"center"``.

    Returns:
        str: The table, one line per row, ending with a newline.

    Raises:
        ValueError: If a row length differs from the number of headers.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    if any(len(r) != ncols for r in rows):
        raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [max(3, len(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(cell))

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{cells[i]:<{widths[i]}}" for i in range(ncols)) + " |"

    def _sep(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = widths[i]
        if style == "right":
            return "-" * (w - 1) + ":"
        if style == "center":
            return ":" + "-" * (w - 2) + ":"
        return "-" * w

    lines: list[str] = [_line(headers)]
    lines.append("| " + " | ".join(_sep(i) for i in range(ncols)) + " |")
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines) + "\n"
