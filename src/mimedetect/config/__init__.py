# topmark:header:start
#
#   project      : MimeDetect
#   file         : __init__.py
#   file_relpath : src/mimedetect/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for MimeDetect.

This module defines the immutable `Config` snapshot used at runtime and the
`MutableConfig` builder that merges layered TOML sources and CLI overrides.

Precedence (later wins):
    1. Built-in defaults (``mimedetect-default.toml``)
    2. ``[tool.mimedetect]`` in ``./pyproject.toml``
    3. ``./mimedetect.toml``
    4. Each explicit ``--config FILE``, in order
    5. Command-line flags

The detector itself takes no configuration; these settings govern how the CLI
selects files and renders results.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mimedetect.config.io import (
    ConfigError,
    TomlTable,
    discover_local_config_files,
    extract_tool_section,
    get_bool_value_or_none,
    get_list_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
    warn_unknown_keys,
)
from mimedetect.config.logging import MimedetectLogger, get_logger
from mimedetect.core.formats import OutputFormat

logger: MimedetectLogger = get_logger(__name__)

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
]

_KNOWN_SECTIONS: set[str] = {"files", "output"}
_KNOWN_FILES_KEYS: set[str] = {"recursive", "follow_symlinks", "exclude"}
_KNOWN_OUTPUT_KEYS: set[str] = {"format", "long"}


def _parse_output_format(raw: str, where: str) -> OutputFormat:
    try:
        return OutputFormat(raw.lower())
    except ValueError as e:
        choices: str = ", ".join(f.value for f in OutputFormat)
        raise ConfigError(f"Invalid output format {raw!r} in {where} (one of: {choices})") from e


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for MimeDetect.

    Produced by `MutableConfig.freeze`. Use `Config.thaw` to obtain a mutable
    builder for edits.

    Attributes:
        recursive (bool): Descend into directories.
        follow_symlinks (bool): Follow symbolic links.
        exclude (tuple[str, ...]): Gitignore-style exclusion patterns.
        output_format (OutputFormat): How results are rendered.
        long (bool): Include the deciding signature in the output.
        config_files (tuple[Path, ...]): Config files merged into this snapshot.
    """

    recursive: bool = False
    follow_symlinks: bool = False
    exclude: tuple[str, ...] = ()
    output_format: OutputFormat = OutputFormat.DEFAULT
    long: bool = False
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            recursive=self.recursive,
            follow_symlinks=self.follow_symlinks,
            exclude=list(self.exclude),
            output_format=self.output_format,
            long=self.long,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration in the TOML table shape it is read from."""
        return {
            "files": {
                "recursive": self.recursive,
                "follow_symlinks": self.follow_symlinks,
                "exclude": list(self.exclude),
            },
            "output": {
                "format": self.output_format.value,
                "long": self.long,
            },
        }

    def to_toml(self) -> str:
        """Render this configuration as a TOML document."""
        return to_toml(self.to_toml_dict())


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        recursive (bool): Descend into directories.
        follow_symlinks (bool): Follow symbolic links.
        exclude (list[str]): Gitignore-style exclusion patterns.
        output_format (OutputFormat): How results are rendered.
        long (bool): Include the deciding signature in the output.
        config_files (list[Path]): Config files merged so far.
    """

    recursive: bool = False
    follow_symlinks: bool = False
    exclude: list[str] = field(default_factory=lambda: [])
    output_format: OutputFormat = OutputFormat.DEFAULT
    long: bool = False
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Exclusion patterns are de-duplicated, keeping first occurrence order.
        """
        return Config(
            recursive=self.recursive,
            follow_symlinks=self.follow_symlinks,
            exclude=tuple(dict.fromkeys(self.exclude)),
            output_format=self.output_format,
            long=self.long,
            config_files=tuple(self.config_files),
        )

    def merge_toml_dict(self, data: Mapping[str, Any], *, where: str) -> MutableConfig:
        """Apply the settings present in ``data`` on top of this builder.

        Keys absent from ``data`` leave the current values untouched; an
        ``exclude`` list extends the patterns collected so far.

        Args:
            data (Mapping[str, Any]): A MimeDetect TOML table.
            where (str): Human-readable origin used in messages.

        Returns:
            MutableConfig: ``self``, for chaining.

        Raises:
            ConfigError: If a value has the wrong type or an unknown format.
        """
        warn_unknown_keys(data, _KNOWN_SECTIONS, where)

        files_tbl: TomlTable = get_table_value(data, "files")
        logger.trace("TOML [files] from %s: %s", where, files_tbl)
        warn_unknown_keys(files_tbl, _KNOWN_FILES_KEYS, f"{where} [files]")

        output_tbl: TomlTable = get_table_value(data, "output")
        logger.trace("TOML [output] from %s: %s", where, output_tbl)
        warn_unknown_keys(output_tbl, _KNOWN_OUTPUT_KEYS, f"{where} [output]")

        recursive: bool | None = get_bool_value_or_none(files_tbl, "recursive")
        if recursive is not None:
            self.recursive = recursive

        follow: bool | None = get_bool_value_or_none(files_tbl, "follow_symlinks")
        if follow is not None:
            self.follow_symlinks = follow

        exclude: list[str] | None = get_list_value_or_none(files_tbl, "exclude")
        if exclude:
            self.exclude.extend(exclude)

        fmt: str | None = get_string_value_or_none(output_tbl, "format")
        if fmt is not None:
            self.output_format = _parse_output_format(fmt, where)

        long: bool | None = get_bool_value_or_none(output_tbl, "long")
        if long is not None:
            self.long = long

        return self

    def merge_toml_file(self, path: Path) -> MutableConfig:
        """Merge the MimeDetect settings of a config file.

        Raises:
            ConfigError: If the file cannot be read or holds invalid settings.
        """
        logger.debug("Merging config file: %s", path)
        section: TomlTable | None = extract_tool_section(load_toml_dict(path), path)
        if section is None:
            logger.warning("[tool.mimedetect] section missing in %s", path)
            return self
        self.merge_toml_dict(section, where=str(path))
        self.config_files.append(path)
        return self

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder initialized from the bundled defaults."""
        return cls().merge_toml_dict(load_defaults_dict(), where="<defaults>")

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: list[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Build a builder by merging defaults, discovered files and explicit files.

        Args:
            cwd (Path | None): Directory used for discovery (defaults to the CWD).
            extra_config_files (list[Path] | None): Explicit config files, merged last.
            no_config (bool): Skip discovery of ``pyproject.toml``/``mimedetect.toml``.

        Returns:
            MutableConfig: The merged builder (not yet frozen).

        Raises:
            ConfigError: If any merged source is unreadable or invalid.
        """
        draft: MutableConfig = cls.from_defaults()
        if not no_config:
            for path in discover_local_config_files(cwd or Path.cwd()):
                draft.merge_toml_file(path)
        for path in extra_config_files or []:
            draft.merge_toml_file(path)
        logger.debug("Merged config: %s", draft)
        return draft
