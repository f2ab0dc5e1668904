# topmark:header:start
#
#   project      : MimeDetect
#   file         : __init__.py
#   file_relpath : src/mimedetect/signatures/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in signature groups.

Each topical module exports a ``SIGNATURES`` list. Order inside a module is
significant, and the modules themselves are assembled in a fixed order by
[`mimedetect.signatures.instances`][].
"""

from __future__ import annotations
