# topmark:header:start
#
#   project      : MimeDetect
#   file         : console.py
#   file_relpath : src/mimedetect/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing program output, kept apart from diagnostic logging.

Commands print results and per-file problems through a console object stored
on the Click context; ``logging`` is reserved for diagnostics enabled with
``MIMEDETECT_LOG_LEVEL``.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to standard output."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to standard error."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to standard error."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` with ANSI styling, or unchanged when color is off."""
        ...


class ClickConsole:
    """Console writing through ``click.echo``.

    Streams default to the process stdout/stderr at construction time, which
    under ``CliRunner`` are the captured streams.

    Args:
        enable_color (bool): Emit ANSI styling; when False, styles are stripped.
        out (TextIO | None): Stream for results.
        err (TextIO | None): Stream for warnings and errors.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def _echo(self, text: str, stream: TextIO, *, nl: bool, **style: Any) -> None:
        if style and self.enable_color:
            text = click.style(text, **style)
        click.echo(text, nl=nl, file=stream, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        self._echo(text, self.out, nl=nl)

    def warn(self, text: str, *, nl: bool = True) -> None:
        self._echo(text, self.err, nl=nl, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        self._echo(text, self.err, nl=nl, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        return click.style(text, **style_kwargs) if self.enable_color else text


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on ``ctx.obj``, or a plain one if absent."""
    obj: Any = ctx.obj
    console: ConsoleLike | None = obj.get("console") if isinstance(obj, dict) else None
    return console if console is not None else ClickConsole(enable_color=False)
