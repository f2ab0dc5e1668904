# topmark:header:start
#
#   project      : MimeDetect
#   file         : __init__.py
#   file_relpath : src/mimedetect/signatures/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Signature matching for MimeDetect.

Responsibilities:
    * [`mimedetect.signatures.classify`][]: byte classifiers (binary, whitespace).
    * [`mimedetect.signatures.base`][]: matcher kinds, factories and the
      ``Signature`` record.
    * [`mimedetect.signatures.builtins`][]: the topical signature groups.
    * [`mimedetect.signatures.instances`][]: the assembled, validated table.
"""

from __future__ import annotations
