# topmark:header:start
#
#   project      : MimeDetect
#   file         : test_config_io_helpers.py
#   file_relpath : tests/config/test_config_io_helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TOML I/O helpers in `mimedetect.config.io`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from mimedetect.config.io import (
    ConfigError,
    discover_local_config_files,
    extract_tool_section,
    get_bool_value_or_none,
    get_list_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_default_config_template_toml_text,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
    warn_unknown_keys,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_load_toml_dict_returns_plain_dicts(tmp_path: Path) -> None:
    path = tmp_path / "mimedetect.toml"
    path.write_text('[files]\nexclude = ["*.log"]\n', encoding="utf-8")
    data = load_toml_dict(path)
    assert data == {"files": {"exclude": ["*.log"]}}
    assert type(data["files"]) is dict


def test_load_toml_dict_rejects_malformed(tmp_path: Path) -> None:
    path = tmp_path / "mimedetect.toml"
    path.write_text("[files\nrecursive = ", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_toml_dict(path)


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_toml_dict(tmp_path / "absent.toml")


def test_load_toml_dict_rejects_non_utf8(tmp_path: Path) -> None:
    path = tmp_path / "mimedetect.toml"
    path.write_bytes(b"\xff\xfe[files]\n")
    with pytest.raises(ConfigError, match="Cannot decode"):
        load_toml_dict(path)


def test_extract_tool_section(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    assert extract_tool_section({"tool": {"mimedetect": {"a": 1}}}, pyproject) == {"a": 1}
    assert extract_tool_section({"tool": {"other": {}}}, pyproject) is None
    assert extract_tool_section({"project": {}}, pyproject) is None
    # Dedicated files are taken whole
    assert extract_tool_section({"a": 1}, tmp_path / "mimedetect.toml") == {"a": 1}


def test_discover_local_config_files_order(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.mimedetect.files]\nrecursive = true\n", encoding="utf-8"
    )
    (tmp_path / "mimedetect.toml").write_text("", encoding="utf-8")
    assert discover_local_config_files(tmp_path) == [
        (tmp_path / "pyproject.toml").resolve(),
        (tmp_path / "mimedetect.toml").resolve(),
    ]


def test_discover_skips_unrelated_or_broken_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")
    assert discover_local_config_files(tmp_path) == []
    (tmp_path / "pyproject.toml").write_text("[project\n", encoding="utf-8")
    assert discover_local_config_files(tmp_path) == []
    (tmp_path / "pyproject.toml").write_bytes(b"\xff\xfe[tool.mimedetect]\n")
    assert discover_local_config_files(tmp_path) == []


def test_bundled_defaults() -> None:
    text = load_default_config_template_toml_text()
    assert "[files]" in text
    assert "[output]" in text
    assert load_defaults_dict() == {
        "files": {"recursive": False, "follow_symlinks": False, "exclude": []},
        "output": {"format": "default", "long": False},
    }


def test_typed_getters() -> None:
    table: dict[str, Any] = {
        "sub": {"k": 1},
        "flag": True,
        "name": "json",
        "items": ["a", "b"],
    }
    assert get_table_value(table, "sub") == {"k": 1}
    assert get_table_value(table, "absent") == {}
    assert get_bool_value_or_none(table, "flag") is True
    assert get_bool_value_or_none(table, "absent") is None
    assert get_string_value_or_none(table, "name") == "json"
    assert get_list_value_or_none(table, "items") == ["a", "b"]
    assert get_list_value_or_none(table, "absent") is None


@pytest.mark.parametrize(
    ("getter", "key"),
    [
        (get_table_value, "flag"),
        (get_bool_value_or_none, "name"),
        (get_string_value_or_none, "flag"),
        (get_list_value_or_none, "name"),
        (get_list_value_or_none, "mixed"),
    ],
)
def test_typed_getters_reject_wrong_types(getter: Any, key: str) -> None:
    table: dict[str, Any] = {"flag": True, "name": "x", "mixed": ["a", 1]}
    with pytest.raises(ConfigError):
        getter(table, key)


def test_warn_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        warn_unknown_keys({"files": {}, "colour": 1}, {"files"}, "test.toml")
    assert "Ignoring unknown config key 'colour' in test.toml" in caplog.text
    assert "'files'" not in caplog.text


def test_to_toml_omits_none_values() -> None:
    text = to_toml({"files": {"recursive": True, "unused": None}, "skip": None})
    parsed: Any = tomlkit.parse(text).unwrap()
    assert parsed == {"files": {"recursive": True}}
