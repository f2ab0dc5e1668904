# topmark:header:start
#
#   project      : MimeDetect
#   file         : exit_codes.py
#   file_relpath : src/mimedetect/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process exit status of the ``mimedetect`` command.

Failure codes follow BSD ``sysexits.h`` so shell scripts and CI jobs can tell
a missing input from a bad configuration without parsing messages.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit status returned by the CLI.

    Attributes:
        SUCCESS: Every input was inspected.
        FAILURE: Unspecified failure.
        USAGE_ERROR: Invalid invocation (``EX_USAGE``).
        FILE_NOT_FOUND: An input path does not exist (``EX_NOINPUT``).
        IO_ERROR: An input could not be read (``EX_IOERR``).
        PERMISSION_DENIED: An input could not be opened (``EX_NOPERM``).
        CONFIG_ERROR: A configuration source is unreadable or invalid (``EX_CONFIG``).
        UNEXPECTED_ERROR: Internal error.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    FILE_NOT_FOUND = 66
    IO_ERROR = 74
    PERMISSION_DENIED = 77
    CONFIG_ERROR = 78
    UNEXPECTED_ERROR = 255
