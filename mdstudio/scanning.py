"""Discovery of markdown files in the configured directories."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable, Iterator
from pathlib import Path

from mdstudio.config import AppConfig

log = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def _is_markdown(name: str) -> bool:
    return name.lower().endswith(MARKDOWN_SUFFIX)


def _join(directory: str, name: str) -> str:
    return os.path.normpath(os.path.join(directory, name))


def _sorted_entries(directory: str) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def _base(path: str | Path) -> str:
    text = os.fspath(path)
    if not text:
        return "."
    separators = os.sep + (os.altsep or "")
    stripped = text.rstrip(separators)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def scan_markdown_files(cfg: AppConfig) -> list[str]:
    """Return the markdown files of every configured directory, in configuration order."""
    files: list[str] = []
    for entry in cfg.directories:
        if entry.recursive:
            files.extend(scan_recursive(entry.path))
        else:
            files.extend(scan_flat(entry.path))
    return files


def _walk(path: str, is_dir: bool) -> Iterator[str]:
    if not is_dir:
        if _is_markdown(_base(path)):
            yield path
        return
    try:
        entries = _sorted_entries(path)
    except OSError:
        return
    for entry in entries:
        try:
            child_is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        yield from _walk(_join(path, entry.name), child_is_dir)


def scan_recursive(directory: str | Path) -> list[str]:
    """Walk ``directory`` depth-first in name order and return every .md file.

    Unreadable directories are skipped; symbolic links are not followed.
    """
    root = os.fspath(directory)
    try:
        mode = os.lstat(root).st_mode
    except OSError:
        return []
    return list(_walk(root, stat.S_ISDIR(mode)))


def scan_flat(directory: str | Path) -> list[str]:
    """Return the .md files directly inside ``directory``, sorted by name."""
    root = os.fspath(directory)
    try:
        entries = _sorted_entries(root)
    except OSError:
        return []
    return [
        _join(root, entry.name)
        for entry in entries
        if not entry.is_dir(follow_symlinks=False) and _is_markdown(entry.name)
    ]


def file_names(paths: Iterable[str | Path]) -> list[str]:
    """Return the last element of each path."""
    return [_base(path) for path in paths]