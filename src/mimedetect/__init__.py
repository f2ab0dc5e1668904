# topmark:header:start
#
#   project      : MimeDetect
#   file         : __init__.py
#   file_relpath : src/mimedetect/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeDetect package.

MimeDetect determines the MIME type of a byte buffer from its content alone,
inspecting at most the first 512 bytes and following the WHATWG MIME Sniffing
rules. It exposes a small typed API and a CLI.

Examples:
    >>> from mimedetect import detect
    >>> detect(b"")
    'application/octet-stream'
    >>> detect(b"<html><body>hi</body></html>")
    'text/html'
"""

from __future__ import annotations

from mimedetect.constants import DEFAULT_TYPE, HEADER_LENGTH
from mimedetect.detector import detect, detect_file, detect_signature, header_of

__all__ = [
    "DEFAULT_TYPE",
    "HEADER_LENGTH",
    "detect",
    "detect_file",
    "detect_signature",
    "header_of",
]
