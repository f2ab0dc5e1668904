# topmark:header:start
#
#   project      : MimeDetect
#   file         : errors.py
#   file_relpath : src/mimedetect/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI exceptions carrying a sysexits-aligned exit status.

Raise these from commands; Click prints the message and exits with the
exception's ``exit_code``. When the group has placed a console on the context,
the message is printed through it so ``--no-color`` is honored.
"""

from __future__ import annotations

from typing import IO, Any

import click

from mimedetect.cli.exit_codes import ExitCode


class MimedetectError(click.ClickException):
    """Base class for errors reported by the MimeDetect CLI."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the message via the context console, or Click's default otherwise."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: Any = ctx.obj if ctx is not None else None
        console: Any = obj.get("console") if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class MimedetectUsageError(MimedetectError):
    """Invalid combination of arguments or options."""

    exit_code = ExitCode.USAGE_ERROR


class MimedetectConfigError(MimedetectError):
    """Unreadable, malformed or ill-typed configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class MimedetectFileNotFoundError(MimedetectError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class MimedetectPermissionDeniedError(MimedetectError):
    """An input exists but may not be read."""

    exit_code = ExitCode.PERMISSION_DENIED


class MimedetectIOError(MimedetectError):
    """Reading an input failed."""

    exit_code = ExitCode.IO_ERROR


def error_for_os_error(path: object, exc: OSError) -> MimedetectError:
    """Wrap an ``OSError`` raised while reading ``path`` in the matching CLI error."""
    reason: str = exc.strerror or str(exc)
    if isinstance(exc, FileNotFoundError):
        return MimedetectFileNotFoundError(f"No such file or directory: {path}")
    if isinstance(exc, PermissionError):
        return MimedetectPermissionDeniedError(f"Permission denied: {path}")
    return MimedetectIOError(f"Cannot read {path}: {reason}")
