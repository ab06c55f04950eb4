"""The list of markdown files shown beside the editor."""

from __future__ import annotations

from typing import Callable, Optional

from mdstudio.config import AppConfig
from mdstudio.scanning import file_names, scan_markdown_files


class FileList:
    """Markdown files found in the configured directories, with selection."""

    def __init__(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.md_files: list[str] = []
        self.file_names: list[str] = []
        self.selected: Optional[int] = None
        self._on_selected: Optional[Callable[[int], None]] = None
        self.refresh_files()

    def __len__(self) -> int:
        return len(self.file_names)

    def refresh_files(self) -> None:
        """Rescan the configured directories."""
        paths = scan_markdown_files(self.cfg)
        names = file_names(paths)
        self.md_files, self.file_names = paths, names

    def update_list(self) -> list[str]:
        """Rescan and return the names now shown."""
        self.refresh_files()
        return list(self.file_names)

    def on_selected(self, callback: Optional[Callable[[int], None]]) -> None:
        """Set the function called with the index of a selected file."""
        self._on_selected = callback

    def select(self, index: int) -> None:
        """Select the file at ``index``. Raises IndexError when out of range."""
        if not 0 <= index < len(self.md_files):
            raise IndexError(f"file index out of range: {index}")
        self.selected = index
        if self._on_selected is not None:
            self._on_selected(index)