# topmark:header:start
#
#   project      : MimeDetect
#   file         : base.py
#   file_relpath : src/mimedetect/signatures/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pattern matchers and the signature record used by the detector.

A *matcher* is a small, immutable callable that inspects a resource header and
returns the MIME type it is bound to on success, or ``None`` otherwise. A
[`Signature`][mimedetect.signatures.base.Signature] pairs a matcher with
descriptive metadata so the ordered table can be listed and audited.

Matcher kinds:
    * ``ANY``: always matches (terminal fallback only).
    * ``EXACT``: the whole header equals a literal pattern.
    * ``MASK``: the header starts with a pattern where ``_`` matches any byte.
    * ``HTML``: after leading whitespace, the header opens one of a list of tags.
    * ``TEXT``: the header contains no binary data byte.
    * ``MP4``: placeholder for the MP4 box sniffer; never matches.

The factory functions (`match_exact`, `match_mask_str`, ...) mirror the
``(mime, parameters...) -> matcher`` shape used to write the signature table.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Protocol, runtime_checkable

from mimedetect.constants import WILDCARD
from mimedetect.signatures.classify import is_binary_byte
from mimedetect.signatures.strings import lower_slice, without_leading_ws


class SignatureTableError(ValueError):
    """Raised when a signature table violates its structural invariants."""


class MatcherKind(Enum):
    """Kind of pattern matcher bound in a signature.

    Attributes:
        ANY: Unconditional match.
        EXACT: Whole-buffer equality with a literal pattern.
        MASK: Wildcard-aware prefix match.
        HTML: Case-insensitive HTML tag match after leading whitespace.
        TEXT: No binary data bytes anywhere in the header.
        MP4: MP4 box-structure placeholder (never matches).
    """

    ANY = "any"
    EXACT = "exact"
    MASK = "mask"
    HTML = "html"
    TEXT = "text"
    MP4 = "mp4"


@runtime_checkable
class Matcher(Protocol):
    """Protocol for content matchers.

    A matcher is fast, side-effect free and total: it must accept buffers of
    any length (including zero) and must not raise.
    """

    kind: ClassVar[MatcherKind]

    @property
    def mime(self) -> str:
        """MIME type returned on a match."""
        ...

    def __call__(self, content: bytes) -> str | None:
        """Return the bound MIME type if ``content`` matches, else None.

        Args:
            content (bytes): The resource header to inspect.

        Returns:
            str | None: The bound MIME type on a match, otherwise ``None``.
        """
        ...

    def describe(self) -> str:
        """Return a short human-readable rendering of the matcher parameters."""
        ...


@dataclass(frozen=True)
class AnyMatcher:
    """Matches every buffer, ignoring its content."""

    kind: ClassVar[MatcherKind] = MatcherKind.ANY
    mime: str

    def __call__(self, content: bytes) -> str | None:
        return self.mime

    def describe(self) -> str:
        return "*"


@dataclass(frozen=True)
class ExactMatcher:
    """Matches when the whole header equals ``pattern``.

    This is value equality on the full buffer, not a prefix test: a header
    longer than the pattern never matches.
    """

    kind: ClassVar[MatcherKind] = MatcherKind.EXACT
    mime: str
    pattern: bytes

    def __call__(self, content: bytes) -> str | None:
        if content == self.pattern:
            return self.mime
        return None

    def describe(self) -> str:
        return repr(self.pattern)


@dataclass(frozen=True)
class MaskMatcher:
    """Matches when the header starts with ``pattern``, ``_`` matching any byte.

    The walk succeeds as soon as the pattern is exhausted and fails as soon as
    the content is exhausted first or a non-wildcard byte differs.
    """

    kind: ClassVar[MatcherKind] = MatcherKind.MASK
    mime: str
    pattern: bytes

    def __call__(self, content: bytes) -> str | None:
        n: int = len(content)
        for i, pb in enumerate(self.pattern):
            if i >= n:
                return None
            if pb != WILDCARD and pb != content[i]:
                return None
        return self.mime

    def describe(self) -> str:
        return repr(self.pattern)


@dataclass(frozen=True)
class HtmlTagMatcher:
    """Matches ``<tag `` or ``<tag>`` (case-insensitive) after leading whitespace.

    Tags are tried in order; the first one that matches wins. Only the
    ``len(tag) + 2`` bytes under comparison are lower-cased.
    """

    kind: ClassVar[MatcherKind] = MatcherKind.HTML
    mime: str
    tags: tuple[bytes, ...]

    def __call__(self, content: bytes) -> str | None:
        content = without_leading_ws(content)
        for tag in self.tags:
            if self._matches_tag(tag, content):
                return self.mime
        return None

    @staticmethod
    def _matches_tag(tag: bytes, content: bytes) -> bool:
        tag_len: int = len(tag) + 2
        if len(content) < tag_len:
            return False
        target: bytes = lower_slice(content, tag_len)
        return target in (b"<" + tag + b" ", b"<" + tag + b">")

    def describe(self) -> str:
        return ", ".join(tag.decode("ascii") for tag in self.tags)


@dataclass(frozen=True)
class TextMatcher:
    """Matches when no byte of the header is a binary data byte.

    The full header is scanned; an empty header matches.
    """

    kind: ClassVar[MatcherKind] = MatcherKind.TEXT
    mime: str

    def __call__(self, content: bytes) -> str | None:
        for b in content:
            if is_binary_byte(b):
                return None
        return self.mime

    def describe(self) -> str:
        return "no binary data bytes"


@dataclass(frozen=True)
class Mp4Matcher:
    """Placeholder for the MP4 signature (section 6.2.1); never matches.

    Detecting MP4 needs a walk over the ``ftyp`` box brands. Until that is
    implemented this matcher reports no match rather than guessing from a
    fixed byte signature.
    """

    kind: ClassVar[MatcherKind] = MatcherKind.MP4
    mime: str

    def __call__(self, content: bytes) -> str | None:
        return None

    def describe(self) -> str:
        return "<not implemented>"


# --- Factories ---


def match_any(mime: str) -> AnyMatcher:
    """Return a matcher that always yields ``mime``."""
    return AnyMatcher(mime)


def match_exact(mime: str, pattern: bytes) -> ExactMatcher:
    """Return a matcher yielding ``mime`` when the header equals ``pattern``."""
    return ExactMatcher(mime, bytes(pattern))


def match_mask_str(mime: str, pattern: bytes) -> MaskMatcher:
    """Return a wildcard-aware prefix matcher (``_`` matches any byte)."""
    return MaskMatcher(mime, bytes(pattern))


def match_html_tags(mime: str, tags: list[str] | tuple[str, ...]) -> HtmlTagMatcher:
    """Return a matcher for any of the given lower-case HTML ``tags``.

    Args:
        mime (str): MIME type returned on a match.
        tags (list[str] | tuple[str, ...]): Tag names without angle brackets,
            e.g. ``"html"`` or ``"!doctype html"``. Compared case-insensitively.

    Returns:
        HtmlTagMatcher: The configured matcher.
    """
    return HtmlTagMatcher(mime, tuple(tag.lower().encode("ascii") for tag in tags))


def match_text(mime: str) -> TextMatcher:
    """Return a matcher yielding ``mime`` for headers free of binary data bytes."""
    return TextMatcher(mime)


def match_mp4(mime: str) -> Mp4Matcher:
    """Return the MP4 placeholder matcher (never matches)."""
    return Mp4Matcher(mime)


@dataclass(frozen=True)
class Signature:
    """One entry of the ordered signature table.

    Attributes:
        matcher (Matcher): The bound matcher; carries the result MIME type.
        category (str): Topical group the signature belongs to
            (e.g. ``"image"``, ``"archive"``).
        description (str): Human-readable description of the format.
    """

    matcher: Matcher
    category: str
    description: str

    @property
    def mime(self) -> str:
        """MIME type returned when this signature matches."""
        return self.matcher.mime

    @property
    def kind(self) -> MatcherKind:
        """Kind of the bound matcher."""
        return self.matcher.kind

    def match(self, content: bytes) -> str | None:
        """Evaluate the bound matcher against ``content``."""
        return self.matcher(content)
