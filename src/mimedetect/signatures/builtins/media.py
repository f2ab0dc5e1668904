# topmark:header:start
#
#   project      : MimeDetect
#   file         : media.py
#   file_relpath : src/mimedetect/signatures/builtins/media.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Audio and video types.

Order follows https://mimesniff.spec.whatwg.org/#matching-an-audio-or-video-type-pattern.
The MP4 entry is a placeholder that never matches (see
[`Mp4Matcher`][mimedetect.signatures.base.Mp4Matcher]).
"""

from __future__ import annotations

from mimedetect.signatures.base import Signature, match_exact, match_mask_str, match_mp4

SIGNATURES: list[Signature] = [
    Signature(match_exact("video/webm", b"\x1a\x45\xdf\xa3"), "media", "WebM video"),
    Signature(match_exact("audio/basic", b"\x2e\x73\x6e\x64"), "media", "Sun/NeXT audio"),
    Signature(match_mask_str("audio/aiff", b"FORM____AIFF"), "media", "AIFF audio"),
    Signature(match_exact("audio/mpeg", b"ID3"), "media", "MP3 audio with ID3 tag"),
    Signature(match_exact("application/ogg", b"OggS\x00"), "media", "Ogg container"),
    Signature(match_exact("audio/midi", b"MThd\x00\x00\x00\x06"), "media", "MIDI audio"),
    Signature(match_mask_str("video/avi", b"RIFF____AVI "), "media", "AVI video"),
    Signature(match_mask_str("audio/wave", b"RIFF____WAVE"), "media", "WAVE audio"),
    Signature(match_mp4("video/mp4"), "media", "MP4 video"),
]
