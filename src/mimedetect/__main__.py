# topmark:header:start
#
#   project      : MimeDetect
#   file         : __main__.py
#   file_relpath : src/mimedetect/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running MimeDetect via ``python -m mimedetect``.

Delegates to :func:`mimedetect.cli.main.cli`, the single CLI entry point.

Examples:
    Detect the type of a file::

        python -m mimedetect detect image.bin
"""

from __future__ import annotations

from mimedetect.cli.main import cli

if __name__ == "__main__":
    cli()
