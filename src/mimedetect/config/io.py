# topmark:header:start
#
#   project      : MimeDetect
#   file         : io.py
#   file_relpath : src/mimedetect/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, query and render TOML configuration sources.

This module provides I/O helpers for reading MimeDetect configuration from:
- the packaged default TOML template, and
- on-disk TOML files (`mimedetect.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures. Typed
getters coerce individual values and raise `ConfigError` on type mismatches.
"""

from __future__ import annotations

from collections.abc import Mapping
from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from mimedetect.config.logging import get_logger
from mimedetect.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    LOCAL_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
)

if TYPE_CHECKING:
    from pathlib import Path

    from mimedetect.config.logging import MimedetectLogger

# A parsed TOML table as plain Python data
TomlTable = dict[str, Any]

logger: MimedetectLogger = get_logger(__name__)


class ConfigError(Exception):
    """Raised for unreadable, malformed or ill-typed configuration."""


# --- TOML file I/O ---


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``mimedetect.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read, is not UTF-8 or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Cannot decode config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_section(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the MimeDetect table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.mimedetect]`` (None when absent);
    any other file is taken as a whole.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get("mimedetect") if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        return None
    return cast("TomlTable", section)


def discover_local_config_files(start: Path) -> list[Path]:
    """Return the project config files found in directory ``start``.

    When both are present, ``pyproject.toml`` comes first and
    ``mimedetect.toml`` second so a later merge gives the dedicated file
    precedence. A ``pyproject.toml`` without ``[tool.mimedetect]`` (or one
    that cannot be parsed) is skipped.

    Args:
        start (Path): Directory to look in (a file path uses its parent).

    Returns:
        list[Path]: Discovered config files in merge order.
    """
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent

    found: list[Path] = []
    pyproject: Path = cur / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        try:
            if extract_tool_section(load_toml_dict(pyproject), pyproject) is not None:
                found.append(pyproject)
                logger.debug("Discovered config file: %s", pyproject)
        except ConfigError as e:
            # Best-effort discovery; a broken pyproject.toml is not ours to report.
            logger.debug("Ignoring unreadable %s: %s", pyproject, e)

    local: Path = cur / LOCAL_TOML_CONFIG_NAME
    if local.is_file():
        found.append(local)
        logger.debug("Discovered config file: %s", local)
    return found


def load_default_config_template_toml_text() -> str:
    """Return the bundled default TOML config template as text.

    Comments and formatting of the packaged ``mimedetect-default.toml`` are
    preserved.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    return resource.read_text(encoding="utf-8")


def load_defaults_dict() -> TomlTable:
    """Return the built-in defaults parsed from the bundled template.

    Raises:
        ConfigError: If the packaged template is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(load_default_config_template_toml_text())
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid bundled default config: {e}") from e
    return cast("TomlTable", doc.unwrap())


# --- Typed getters ---


def get_table_value(table: Mapping[str, Any], key: str) -> TomlTable:
    """Return sub-table ``key`` or an empty dict when it is absent.

    Raises:
        ConfigError: If the value exists but is not a table.
    """
    value: Any = table.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table, got {type(value).__name__}")
    return cast("TomlTable", value)


def get_bool_value_or_none(table: Mapping[str, Any], key: str) -> bool | None:
    """Return boolean ``key`` or None when it is absent.

    Raises:
        ConfigError: If the value exists but is not a boolean.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a boolean, got {value!r}")
    return value


def get_string_value_or_none(table: Mapping[str, Any], key: str) -> str | None:
    """Return string ``key`` or None when it is absent.

    Raises:
        ConfigError: If the value exists but is not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {value!r}")
    return value


def get_list_value_or_none(table: Mapping[str, Any], key: str) -> list[str] | None:
    """Return list-of-strings ``key`` or None when it is absent.

    Raises:
        ConfigError: If the value exists but is not a list of strings.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings, got {value!r}")
    return list(cast("list[str]", value))


def warn_unknown_keys(table: Mapping[str, Any], known: set[str], where: str) -> None:
    """Log a warning for every key of ``table`` not in ``known``."""
    for key in table:
        if key not in known:
            logger.warning("Ignoring unknown config key '%s' in %s", key, where)


# --- Rendering ---


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string (``None`` values are omitted)."""
    cleaned: dict[str, Any] = {
        section: {k: v for k, v in values.items() if v is not None}
        if isinstance(values, dict)
        else values
        for section, values in toml_dict.items()
        if values is not None
    }
    return tomlkit.dumps(cleaned)
