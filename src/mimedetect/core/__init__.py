# topmark:header:start
#
#   project      : MimeDetect
#   file         : __init__.py
#   file_relpath : src/mimedetect/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Frontend-neutral definitions shared by the config layer and the CLI."""

from __future__ import annotations
