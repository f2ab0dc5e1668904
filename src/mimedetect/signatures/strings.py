# topmark:header:start
#
#   project      : MimeDetect
#   file         : strings.py
#   file_relpath : src/mimedetect/signatures/strings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Byte-string helpers shared by the pattern matchers."""

from __future__ import annotations

from mimedetect.signatures.classify import is_whitespace_byte


def without_leading_ws(buf: bytes) -> bytes:
    """Return ``buf`` with leading whitespace bytes removed.

    Args:
        buf (bytes): Buffer to strip.

    Returns:
        bytes: The buffer starting at its first non-whitespace byte
            (empty if the buffer is all whitespace).
    """
    start: int = 0
    n: int = len(buf)
    while start < n and is_whitespace_byte(buf[start]):
        start += 1
    return buf[start:] if start else buf


def lower_slice(buf: bytes, length: int) -> bytes:
    """Return the ASCII lower-case form of ``buf[:length]``.

    Only the requested slice is copied and folded, never the whole buffer.
    """
    return buf[:length].lower()
