# topmark:header:start
#
#   project      : MimeDetect
#   file         : fonts.py
#   file_relpath : src/mimedetect/signatures/builtins/fonts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Font types (https://mimesniff.spec.whatwg.org/#matching-a-font-type-pattern).

TrueType, OpenType and TrueType collections have no agreed result type yet
and are not listed.
"""

from __future__ import annotations

from mimedetect.signatures.base import Signature, match_exact, match_mask_str

SIGNATURES: list[Signature] = [
    # "LP" marker at offset 34
    Signature(
        match_mask_str("application/vnd.ms-fontobject", b"_" * 34 + b"LP"),
        "font",
        "Embedded OpenType font",
    ),
    Signature(match_exact("application/font-woff", b"wOFF"), "font", "WOFF font"),
]
