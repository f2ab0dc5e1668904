# topmark:header:start
#
#   project      : MimeDetect
#   file         : constants.py
#   file_relpath : src/mimedetect/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeDetect Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

MIMEDETECT_VERSION: str = get_version("mimedetect")

# Resource header length, see https://mimesniff.spec.whatwg.org/#resource-header
HEADER_LENGTH: Final[int] = 512

# Result when nothing more specific matches
DEFAULT_TYPE: Final[str] = "application/octet-stream"

# Wildcard byte in masked patterns ('_')
WILDCARD: Final[int] = 0x5F

# Name of the bundled default config inside the package `mimedetect.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "mimedetect.config"
DEFAULT_TOML_CONFIG_NAME: str = "mimedetect-default.toml"

# Project-local config discovery
LOCAL_TOML_CONFIG_NAME: str = "mimedetect.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Marker for reading the buffer from standard input on the command line
STDIN_MARKER: str = "-"
