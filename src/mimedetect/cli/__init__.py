# topmark:header:start
#
#   project      : MimeDetect
#   file         : __init__.py
#   file_relpath : src/mimedetect/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for MimeDetect."""

from __future__ import annotations
