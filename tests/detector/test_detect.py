# topmark:header:start
#
#   project      : MimeDetect
#   file         : test_detect.py
#   file_relpath : tests/detector/test_detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Behavioral tests for `mimedetect.detect` and friends."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

import mimedetect
from mimedetect import DEFAULT_TYPE, HEADER_LENGTH, detect, detect_file, detect_signature, header_of
from mimedetect.signatures.base import MatcherKind
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


@parametrize(
    ("content", "expected"),
    [
        (b"", DEFAULT_TYPE),
        (b"%PDF-", "applicaiton/pdf"),
        (b"%!PS-Adobe-", "application/postscript"),
        (b"\xfe\xff\x00h", "text/plain"),
        (b"\xff\xfeh\x00", "text/plain"),
        (b"\xef\xbb\xbf\x00", "text/plain"),
        (b"\x00\x00\x01\x00", "image/x-icon"),
        (b"\x00\x00\x02\x00", "image/x-icon"),
        (b"BM", "image/bmp"),
        (b"GIF87a", "image/gif"),
        (b"GIF89a", "image/gif"),
        (b"RIFF\x00\x00\x00\x00WEBPVP8 \x00", "image/webp"),
        (b"\x89PNG\x0d\x01\x1a\x0a", "image/png"),
        (b"\xff\xd8\xff", "image/jpeg"),
        (b"\x1a\x45\xdf\xa3", "video/webm"),
        (b".snd", "audio/basic"),
        (b"FORM\x00\x00\x00\x10AIFFCOMM", "audio/aiff"),
        (b"ID3", "audio/mpeg"),
        (b"OggS\x00", "application/ogg"),
        (b"MThd\x00\x00\x00\x06", "audio/midi"),
        (b"RIFF\x10\x00\x00\x00AVI LIST", "video/avi"),
        (b"RIFF\x10\x00\x00\x00WAVEfmt ", "audio/wave"),
        (b"\x00" * 34 + b"LP", "application/vnd.ms-fontobject"),
        (b"wOFF", "application/font-woff"),
        (b"\x1f\x8b\x08", "application/x-gzip"),
        (b"PK\x03\x04", "application/zip"),
        (b"Rar \x1a\x07\x00", "applicaiton/x-rar-compressed"),
        (b"hello world\n", "text/plain"),
        (b"\x00\x01\x02\x03", DEFAULT_TYPE),
    ],
)
def test_detect_known_signatures(content: bytes, expected: str) -> None:
    assert detect(content) == expected


def test_exact_entries_do_not_match_longer_content() -> None:
    """Exact entries compare the whole header, so trailing bytes defeat them."""
    assert detect(b"%PDF-1.4 some text") == "text/plain"
    assert detect(b"GIF89a and more") == "text/plain"
    assert detect(b"GIF89a\x01\x00\x01\x00") == DEFAULT_TYPE
    assert detect(b"PK\x03\x04\x14\x00\x00\x00") == DEFAULT_TYPE


def test_high_bytes_are_not_binary_data() -> None:
    """Content made of bytes >= 0x80 has no binary data byte and reads as text."""
    assert detect(b"\xff\xd8\xff\xe0") == "text/plain"


def test_mask_entries_need_the_full_pattern() -> None:
    assert detect(b"RIFF\x00\x00\x00\x00WEBP") == DEFAULT_TYPE
    assert detect(b"RIFFabcdWEBP") == "text/plain"


@parametrize(
    "content",
    [
        b"<HTML><BODY>x</BODY></HTML>",
        b"  \t<div class=x>",
        b"\r\n<!DOCTYPE html>\n<html>",
        b"<?xml version=\"1.0\"?><root/>",
        b"<a href='#'>link</a>",
    ],
)
def test_detect_html(content: bytes) -> None:
    assert detect(content) == "text/html"


def test_html_rule_precedes_text() -> None:
    assert detect(b"<p>") == "text/html"
    assert detect(b"<pre>") == "text/plain"


def test_font_rule_precedes_text() -> None:
    """An ``LP`` marker at offset 34 wins over the text rule."""
    assert detect(b"a" * 34 + b"LP") == "application/vnd.ms-fontobject"
    assert detect(b"a" * 33 + b"LP") == "text/plain"


def test_only_the_first_512_bytes_are_inspected() -> None:
    assert detect(b"a" * HEADER_LENGTH + b"\x00\x01") == "text/plain"
    assert detect(b"a" * (HEADER_LENGTH - 1) + b"\x00") == DEFAULT_TYPE
    assert detect(b"<html>" + b"\x00" * 1000) == "text/html"


def test_header_of_truncates_and_copies() -> None:
    data = bytearray(b"x" * 600)
    header = header_of(data)
    assert isinstance(header, bytes)
    assert len(header) == HEADER_LENGTH
    assert header_of(b"abc") == b"abc"


@parametrize("wrap", [bytes, bytearray, memoryview])
def test_detect_accepts_bytes_like(wrap: type) -> None:
    assert detect(wrap(b"GIF87a")) == "image/gif"


def test_detect_does_not_mutate_input() -> None:
    data = bytearray(b"  <HTML>")
    before = bytes(data)
    assert detect(data) == "text/html"
    assert bytes(data) == before


def test_detect_signature_reports_deciding_entry() -> None:
    sig = detect_signature(b"hello")
    assert sig is not None
    assert sig.kind is MatcherKind.TEXT
    fallback = detect_signature(b"\x00")
    assert fallback is not None
    assert fallback.kind is MatcherKind.ANY


def test_detect_file_reads_header(tmp_path: Path) -> None:
    png = tmp_path / "image.png"
    png.write_bytes(b"\x89PNG\x0d\x01\x1a\x0a")
    text = tmp_path / "notes.txt"
    text.write_bytes(b"x" * 4096 + b"\x00")
    assert detect_file(png) == "image/png"
    assert detect_file(text) == "text/plain"


def test_detect_file_missing_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        detect_file(tmp_path / "nope.bin")


def test_public_api() -> None:
    assert set(mimedetect.__all__) == {
        "DEFAULT_TYPE",
        "HEADER_LENGTH",
        "detect",
        "detect_file",
        "detect_signature",
        "header_of",
    }
