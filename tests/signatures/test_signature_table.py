# topmark:header:start
#
#   project      : MimeDetect
#   file         : test_signature_table.py
#   file_relpath : tests/signatures/test_signature_table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the built-in signature table and its structural invariants."""

from __future__ import annotations

import pytest

from mimedetect.constants import DEFAULT_TYPE
from mimedetect.signatures.base import (
    MatcherKind,
    Signature,
    SignatureTableError,
    match_any,
    match_exact,
    match_text,
)
from mimedetect.signatures.instances import get_signature_table, validate_signature_table


def test_table_is_cached_and_immutable() -> None:
    table = get_signature_table()
    assert isinstance(table, tuple)
    assert get_signature_table() is table


def test_table_ends_with_text_then_unconditional_fallback() -> None:
    table = get_signature_table()
    assert table[-2].kind is MatcherKind.TEXT
    assert table[-2].mime == "text/plain"
    assert table[-1].kind is MatcherKind.ANY
    assert table[-1].mime == DEFAULT_TYPE
    assert sum(1 for s in table if s.kind is MatcherKind.ANY) == 1


def test_empty_input_rule_comes_first() -> None:
    first = get_signature_table()[0]
    assert first.kind is MatcherKind.EXACT
    assert first.match(b"") == DEFAULT_TYPE


def test_table_mime_types_and_order() -> None:
    """The table lists every family in evaluation order."""
    mimes: list[str] = [s.mime for s in get_signature_table()]
    assert mimes == [
        DEFAULT_TYPE,
        "text/html",
        "applicaiton/pdf",
        "application/postscript",
        "text/plain",
        "text/plain",
        "text/plain",
        "image/x-icon",
        "image/x-icon",
        "image/bmp",
        "image/gif",
        "image/gif",
        "image/webp",
        "image/png",
        "image/jpeg",
        "video/webm",
        "audio/basic",
        "audio/aiff",
        "audio/mpeg",
        "application/ogg",
        "audio/midi",
        "video/avi",
        "audio/wave",
        "video/mp4",
        "application/vnd.ms-fontobject",
        "application/font-woff",
        "application/x-gzip",
        "application/zip",
        "applicaiton/x-rar-compressed",
        "text/plain",
        DEFAULT_TYPE,
    ]


def test_every_entry_is_described() -> None:
    for sig in get_signature_table():
        assert sig.category
        assert sig.description
        assert isinstance(sig.matcher.describe(), str)


def _sig(matcher: object) -> Signature:
    return Signature(matcher, "test", "test")  # type: ignore[arg-type]


def test_validate_rejects_empty_table() -> None:
    with pytest.raises(SignatureTableError, match="empty"):
        validate_signature_table([])


def test_validate_rejects_missing_fallback() -> None:
    with pytest.raises(SignatureTableError, match="exactly one"):
        validate_signature_table([_sig(match_text("text/plain"))])


def test_validate_rejects_duplicate_fallback() -> None:
    table = [_sig(match_any(DEFAULT_TYPE)), _sig(match_any(DEFAULT_TYPE))]
    with pytest.raises(SignatureTableError, match="exactly one"):
        validate_signature_table(table)


def test_validate_rejects_fallback_not_last() -> None:
    table = [_sig(match_any(DEFAULT_TYPE)), _sig(match_exact("image/bmp", b"BM"))]
    with pytest.raises(SignatureTableError, match="must be last"):
        validate_signature_table(table)


def test_validate_rejects_wrong_fallback_type() -> None:
    with pytest.raises(SignatureTableError, match="must yield"):
        validate_signature_table([_sig(match_any("text/plain"))])


def test_validate_accepts_minimal_table() -> None:
    validate_signature_table([_sig(match_any(DEFAULT_TYPE))])


def test_signature_table_error_is_value_error() -> None:
    assert issubclass(SignatureTableError, ValueError)
