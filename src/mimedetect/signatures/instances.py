# topmark:header:start
#
#   project      : MimeDetect
#   file         : instances.py
#   file_relpath : src/mimedetect/signatures/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Signature table for MimeDetect.

Builds the ordered table of [`mimedetect.signatures.base.Signature`][] objects
from the built-in groups. The table is constructed lazily on first access,
validated once, and cached thereafter as an immutable tuple, so it can be
shared across threads without locking.

Notes:
    * Group order in `_BUILTIN_MODULES` is the table order; earlier entries win.
    * The last entry is the single unconditional fallback.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import import_module
from typing import TYPE_CHECKING, Any, Final, Iterable, Sequence, cast

from mimedetect.config.logging import MimedetectLogger, get_logger
from mimedetect.constants import DEFAULT_TYPE

from .base import MatcherKind, Signature, SignatureTableError

if TYPE_CHECKING:
    from types import ModuleType

logger: MimedetectLogger = get_logger(__name__)

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "mimedetect.signatures.builtins.documents",
    "mimedetect.signatures.builtins.images",
    "mimedetect.signatures.builtins.media",
    "mimedetect.signatures.builtins.fonts",
    "mimedetect.signatures.builtins.archives",
    "mimedetect.signatures.builtins.fallback",
)


def _iter_builtin_signatures() -> Iterable[Signature]:
    """Yield built-in Signature objects from topical modules (lazy import).

    Raises:
        SignatureTableError: If a module has no ``SIGNATURES`` list or lists a
            non-Signature entry.
    """
    for modname in _BUILTIN_MODULES:
        mod: ModuleType = import_module(modname)
        signatures: Any = getattr(mod, "SIGNATURES", None)
        if not isinstance(signatures, list):
            raise SignatureTableError(f"Module {modname} has no SIGNATURES list")
        for obj in cast("Sequence[object]", signatures):
            if not isinstance(obj, Signature):
                raise SignatureTableError(f"Non-Signature entry in {modname}.SIGNATURES: {obj!r}")
            yield obj


def validate_signature_table(table: Sequence[Signature]) -> None:
    """Check the structural invariants of a signature table.

    A valid table ends with exactly one unconditional matcher, and that
    matcher yields the default type.

    Args:
        table (Sequence[Signature]): Candidate table, in evaluation order.

    Raises:
        SignatureTableError: If the table is empty, the unconditional entry is
            missing, duplicated or not last, or does not yield `DEFAULT_TYPE`.
    """
    if not table:
        raise SignatureTableError("Signature table is empty")

    positions: list[int] = [i for i, sig in enumerate(table) if sig.kind is MatcherKind.ANY]
    if len(positions) != 1:
        raise SignatureTableError(
            f"Expected exactly one unconditional signature, found {len(positions)}"
        )
    if positions[0] != len(table) - 1:
        raise SignatureTableError(
            f"Unconditional signature must be last (found at index {positions[0]})"
        )
    if table[-1].mime != DEFAULT_TYPE:
        raise SignatureTableError(
            f"Unconditional signature must yield {DEFAULT_TYPE!r}, not {table[-1].mime!r}"
        )


@lru_cache(maxsize=1)
def get_signature_table() -> tuple[Signature, ...]:
    """Return the ordered signature table (built once, then cached).

    Returns:
        tuple[Signature, ...]: Immutable table in evaluation order.
    """
    table: tuple[Signature, ...] = tuple(_iter_builtin_signatures())
    validate_signature_table(table)
    logger.debug("Built signature table with %d entries", len(table))
    return table
