# topmark:header:start
#
#   project      : MimeDetect
#   file         : detector.py
#   file_relpath : src/mimedetect/detector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content-type detection over the resource header.

Implements the "identifying a resource with an unknown MIME type" walk from
https://mimesniff.spec.whatwg.org/: the input is truncated to its resource
header (at most 512 bytes) and the signature table is evaluated in order; the
first match wins.

`detect` is total: every bytes-like input yields a MIME type string and no
exception is raised. The input is never mutated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from mimedetect.config.logging import get_logger
from mimedetect.constants import DEFAULT_TYPE, HEADER_LENGTH
from mimedetect.signatures.instances import get_signature_table

if TYPE_CHECKING:
    from pathlib import Path

    from mimedetect.config.logging import MimedetectLogger
    from mimedetect.signatures.base import Signature

logger: MimedetectLogger = get_logger(__name__)

BytesLike = bytes | bytearray | memoryview


def header_of(content: BytesLike) -> bytes:
    """Return the resource header: at most the first 512 bytes of ``content``.

    Args:
        content (bytes | bytearray | memoryview): Raw resource bytes.

    Returns:
        bytes: ``content[:512]`` as an immutable copy (or all of it if shorter).
    """
    return bytes(content[:HEADER_LENGTH])


def detect_first(header: bytes, signatures: Sequence[Signature]) -> Signature | None:
    """Return the first signature in ``signatures`` matching ``header``, if any."""
    for sig in signatures:
        if sig.match(header) is not None:
            logger.trace("matched %s (%s) -> %s", sig.description, sig.kind.value, sig.mime)
            return sig
    return None


def detect_signature(content: BytesLike) -> Signature | None:
    """Return the table entry that decides the type of ``content``.

    Args:
        content (bytes | bytearray | memoryview): Raw resource bytes.

    Returns:
        Signature | None: The first matching signature; ``None`` only if the
            table is exhausted, which the terminal fallback prevents.
    """
    return detect_first(header_of(content), get_signature_table())


def detect(content: BytesLike) -> str:
    """Detect the MIME type of ``content`` by inspecting at most 512 bytes.

    Args:
        content (bytes | bytearray | memoryview): Raw resource bytes, any length.

    Returns:
        str: A MIME type from the signature table; ``application/octet-stream``
            if the content is not recognized.
    """
    sig: Signature | None = detect_signature(content)
    if sig is None:
        return DEFAULT_TYPE
    return sig.mime


def read_header(path: Path) -> bytes:
    """Read at most `HEADER_LENGTH` bytes from the start of ``path``.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with path.open("rb") as handle:
        return handle.read(HEADER_LENGTH)


def detect_file(path: Path) -> str:
    """Detect the MIME type of the file at ``path``.

    Only the resource header is read from disk.

    Args:
        path (Path): File to inspect.

    Returns:
        str: The detected MIME type.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    return detect(read_header(path))
