# topmark:header:start
#
#   project      : MimeDetect
#   file         : fallback.py
#   file_relpath : src/mimedetect/signatures/builtins/fallback.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Catch-all signatures; these must stay at the end of the table, in this order."""

from __future__ import annotations

from mimedetect.constants import DEFAULT_TYPE
from mimedetect.signatures.base import Signature, match_any, match_text

SIGNATURES: list[Signature] = [
    Signature(match_text("text/plain"), "text", "Text without binary data bytes"),
    Signature(match_any(DEFAULT_TYPE), "fallback", "Unrecognized binary data"),
]
