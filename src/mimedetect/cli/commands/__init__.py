# topmark:header:start
#
#   project      : MimeDetect
#   file         : __init__.py
#   file_relpath : src/mimedetect/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the MimeDetect CLI."""
