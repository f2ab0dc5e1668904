# topmark:header:start
#
#   project      : MimeDetect
#   file         : archives.py
#   file_relpath : src/mimedetect/signatures/builtins/archives.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Archive types (https://mimesniff.spec.whatwg.org/#matching-an-archive-type-pattern).

Notes:
    - The RAR result string is ``applicaiton/x-rar-compressed`` (sic), kept
      for compatibility with existing callers.
"""

from __future__ import annotations

from mimedetect.signatures.base import Signature, match_exact

SIGNATURES: list[Signature] = [
    Signature(match_exact("application/x-gzip", b"\x1f\x8b\x08"), "archive", "gzip archive"),
    Signature(match_exact("application/zip", b"PK\x03\x04"), "archive", "ZIP archive"),
    Signature(
        match_exact("applicaiton/x-rar-compressed", b"Rar \x1a\x07\x00"),
        "archive",
        "RAR archive",
    ),
]
