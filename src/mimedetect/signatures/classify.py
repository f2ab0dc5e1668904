# topmark:header:start
#
#   project      : MimeDetect
#   file         : classify.py
#   file_relpath : src/mimedetect/signatures/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-byte classifiers from the MIME Sniffing terminology.

See https://mimesniff.spec.whatwg.org/#terminology for the definitions of a
*binary data byte* and a *whitespace byte*.
"""

from __future__ import annotations

from typing import Final

_WHITESPACE_BYTES: Final[frozenset[int]] = frozenset({0x09, 0x0A, 0x0C, 0x0D, 0x20})


def is_binary_byte(b: int) -> bool:
    """Return True if ``b`` is a binary data byte.

    Binary data bytes are the control bytes 0x00-0x08, 0x0B, 0x0E-0x1A and
    0x1C-0x1F. Their presence is evidence that content is not plain text.

    Args:
        b (int): Byte value (0-255).

    Returns:
        bool: True for a binary data byte, False otherwise.
    """
    return b <= 0x08 or b == 0x0B or 0x0E <= b <= 0x1A or 0x1C <= b <= 0x1F


def is_whitespace_byte(b: int) -> bool:
    """Return True if ``b`` is TAB, LF, FF, CR or SPACE."""
    return b in _WHITESPACE_BYTES
