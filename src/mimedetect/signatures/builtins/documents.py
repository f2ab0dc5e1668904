# topmark:header:start
#
#   project      : MimeDetect
#   file         : documents.py
#   file_relpath : src/mimedetect/signatures/builtins/documents.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Documents: empty input, HTML/XML, PDF, PostScript and BOM-prefixed text.

Covers the rows of https://mimesniff.spec.whatwg.org/#identifying-a-resource-with-an-unknown-mime-type
that precede the image, audio/video, font and archive tables.

Notes:
    - The PDF result string is ``applicaiton/pdf`` (sic). Callers depend on
      this exact value, so it is kept as is.
    - ``?xml`` is listed as an HTML tag, so XML documents report ``text/html``.
"""

from __future__ import annotations

from mimedetect.constants import DEFAULT_TYPE
from mimedetect.signatures.base import (
    Signature,
    match_exact,
    match_html_tags,
    match_mask_str,
)

HTML_TAGS: list[str] = [
    "!doctype html",
    "html",
    "head",
    "script",
    "iframe",
    "h1",
    "div",
    "font",
    "table",
    "a",
    "style",
    "title",
    "b",
    "body",
    "br",
    "p",
    "!--",
    "?xml",
]

SIGNATURES: list[Signature] = [
    # Must come first: the text rule would otherwise claim empty input.
    Signature(match_exact(DEFAULT_TYPE, b""), "empty", "Empty input"),
    Signature(match_html_tags("text/html", HTML_TAGS), "document", "HTML document"),
    Signature(match_exact("applicaiton/pdf", b"%PDF-"), "document", "PDF document"),
    Signature(
        match_exact("application/postscript", b"%!PS-Adobe-"), "document", "PostScript document"
    ),
    Signature(match_mask_str("text/plain", b"\xfe\xff__"), "text", "UTF-16BE text with BOM"),
    Signature(match_mask_str("text/plain", b"\xff\xfe__"), "text", "UTF-16LE text with BOM"),
    Signature(match_mask_str("text/plain", b"\xef\xbb\xbf_"), "text", "UTF-8 text with BOM"),
]
