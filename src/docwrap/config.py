from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import tomllib

from docwrap.exceptions import ConfigError

DEFAULT_CONFIG_NAME = "docwrap.toml"
DEFAULT_LINE_LIMIT = 80

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError:
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def layout_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("layout", {})
    return section if isinstance(section, dict) else {}


def validate_line_limit(value: TomlValue) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(
            f"line_limit must be a positive integer, got {value!r}",
            key="line_limit",
            value=value,
        )
    if value <= 0:
        raise ConfigError(
            f"line_limit must be a positive integer, got {value}",
            key="line_limit",
            value=value,
        )
    return value


def line_limit_from_section(section: TomlTable | None) -> int:
    if section is None:
        return DEFAULT_LINE_LIMIT
    if not isinstance(section, dict):
        return DEFAULT_LINE_LIMIT
    value = section.get("line_limit")
    if value is None:
        return DEFAULT_LINE_LIMIT
    return validate_line_limit(value)


def _normalize_name_list(value: TomlValue) -> list[str]:
    items: list[str] = []
    if value is None:
        return items
    if isinstance(value, str):
        items = [part.strip() for part in value.split(",") if part.strip()]
    elif isinstance(value, (list, tuple, set)):
        for item in value:
            if isinstance(item, str):
                items.extend([part.strip() for part in item.split(",") if part.strip()])
    return [item for item in items if item]


def layout_exclude_list(section: TomlTable | None) -> list[str]:
    if section is None:
        return []
    if not isinstance(section, dict):
        return []
    return _normalize_name_list(section.get("exclude"))


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged
