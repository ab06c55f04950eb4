"""Application configuration: data model and JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

CONFIG_FILE = "config.json"


@dataclass
class DirectoryEntry:
    """A directory to scan for markdown files."""

    path: str = ""
    recursive: bool = False


@dataclass
class ToolbarConfig:
    """A named toolbar and the actions it shows, in order."""

    name: str = ""
    orientation: str = ""  # "horizontal" or "vertical"
    actions: list[str] = field(default_factory=list)


@dataclass
class AppConfig:
    """Top-level application settings."""

    theme: str = ""
    directories: list[DirectoryEntry] = field(default_factory=list)
    toolbars: list[ToolbarConfig] = field(default_factory=list)


def default_config() -> AppConfig:
    """Return the configuration used when no valid file exists."""
    return AppConfig(
        theme="system",
        directories=[DirectoryEntry(path=".", recursive=False)],
        toolbars=[
            ToolbarConfig(
                name="editorMain",
                orientation="horizontal",
                actions=[
                    "newfile",
                    "separator",
                    "save",
                    "copy",
                    "cut",
                    "paste",
                    "separator",
                    "undo",
                    "redo",
                    "separator",
                    "deletefile",
                    "movefile",
                ],
            )
        ],
    )


def config_to_dict(cfg: AppConfig) -> dict[str, Any]:
    """Convert a configuration into its JSON-ready form."""
    return {
        "theme": cfg.theme,
        "directories": [
            {"path": d.path, "recursive": d.recursive} for d in cfg.directories
        ],
        "toolbars": [
            {"name": t.name, "orientation": t.orientation, "actions": list(t.actions)}
            for t in cfg.toolbars
        ],
    }


def _string(value: Any, current: str, key: str) -> str:
    if value is None:
        return current
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _boolean(value: Any, current: bool, key: str) -> bool:
    if value is None:
        return current
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean, got {type(value).__name__}")
    return value


def _items(value: Any, key: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array, got {type(value).__name__}")
    return value


def _mapping(value: Any, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{key!r} must be an object, got {type(value).__name__}")
    return value


def _directory(raw: Any) -> DirectoryEntry:
    data = _mapping(raw, "directories[]")
    entry = DirectoryEntry()
    entry.path = _string(data.get("path"), entry.path, "path")
    entry.recursive = _boolean(data.get("recursive"), entry.recursive, "recursive")
    return entry


def _toolbar(raw: Any) -> ToolbarConfig:
    data = _mapping(raw, "toolbars[]")
    toolbar = ToolbarConfig()
    toolbar.name = _string(data.get("name"), toolbar.name, "name")
    toolbar.orientation = _string(data.get("orientation"), toolbar.orientation, "orientation")
    if "actions" in data:
        toolbar.actions = [
            _string(item, "", "actions[]") for item in _items(data["actions"], "actions")
        ]
    return toolbar


def config_from_dict(data: Any) -> AppConfig:
    """Build a configuration from decoded JSON, keeping defaults for absent keys.

    Raises ValueError when a value has the wrong type.
    """
    cfg = default_config()
    mapping = _mapping(data, "config")
    if "theme" in mapping:
        cfg.theme = _string(mapping["theme"], cfg.theme, "theme")
    if "directories" in mapping:
        cfg.directories = [_directory(d) for d in _items(mapping["directories"], "directories")]
    if "toolbars" in mapping:
        cfg.toolbars = [_toolbar(t) for t in _items(mapping["toolbars"], "toolbars")]
    return cfg


def _decode_first(text: str) -> Any:
    """Decode the first JSON value in ``text``; anything after it is ignored."""
    value, _ = json.JSONDecoder().raw_decode(text.lstrip())
    return value


def save_config(cfg: AppConfig, path: str | Path = CONFIG_FILE) -> None:
    """Write the configuration as one line of JSON. Raises OSError on failure."""
    encoded = json.dumps(config_to_dict(cfg), ensure_ascii=False, separators=(",", ":"))
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(encoded + "\n")
    log.info("Config saved successfully.")


def _save_quietly(cfg: AppConfig, path: str | Path) -> None:
    try:
        save_config(cfg, path)
    except OSError as exc:
        log.warning("Error saving config file: %s", exc)


def load_config(path: str | Path = CONFIG_FILE) -> AppConfig:
    """Load the configuration, writing and returning defaults if it is missing or invalid."""
    try:
        raw = Path(path).read_bytes()
    except OSError:
        log.info("No config file found, creating default config.")
        cfg = default_config()
        _save_quietly(cfg, path)
        return cfg

    try:
        return config_from_dict(_decode_first(raw.decode("utf-8")))
    except ValueError as exc:
        log.warning("Error decoding config file, using default: %s", exc)
        cfg = default_config()
        _save_quietly(cfg, path)
        return cfg