# topmark:header:start
#
#   project      : MimeDetect
#   file         : images.py
#   file_relpath : src/mimedetect/signatures/builtins/images.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Image types (https://mimesniff.spec.whatwg.org/#matching-an-image-type-pattern)."""

from __future__ import annotations

from mimedetect.signatures.base import Signature, match_exact, match_mask_str

SIGNATURES: list[Signature] = [
    Signature(match_exact("image/x-icon", b"\x00\x00\x01\x00"), "image", "Windows icon"),
    Signature(match_exact("image/x-icon", b"\x00\x00\x02\x00"), "image", "Windows cursor"),
    Signature(match_exact("image/bmp", b"BM"), "image", "BMP image"),
    Signature(match_exact("image/gif", b"GIF87a"), "image", "GIF image (87a)"),
    Signature(match_exact("image/gif", b"GIF89a"), "image", "GIF image (89a)"),
    Signature(match_mask_str("image/webp", b"RIFF____WEBPVP"), "image", "WebP image"),
    # Byte 5 is 0x01, not LF (0x0A).
    Signature(match_exact("image/png", b"\x89PNG\x0d\x01\x1a\x0a"), "image", "PNG image"),
    Signature(match_exact("image/jpeg", b"\xff\xd8\xff"), "image", "JPEG image"),
]
