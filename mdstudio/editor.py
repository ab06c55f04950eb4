"""The markdown editor: text buffer, file binding and dirty tracking."""

from __future__ import annotations

import logging
from typing import Optional

from mdstudio.actions import ActionContext, EditorState
from mdstudio.config import AppConfig
from mdstudio.eventbus import EventBus
from mdstudio.toolbar import Toolbar, build_toolbar

log = logging.getLogger(__name__)

PLACEHOLDER = "Select a markdown file to edit..."
EDITOR_TOOLBAR = "editorMain"


class Editor:
    """Holds the text being edited and keeps its toolbar in step with it."""

    def __init__(self, cfg: AppConfig, event_bus: Optional[EventBus] = None) -> None:
        self.event_bus = event_bus
        self.placeholder = PLACEHOLDER
        self.current_file_path = ""
        self.original_content = ""
        self.is_dirty = False
        self._text = ""
        self.toolbar: Optional[Toolbar] = build_toolbar(
            EDITOR_TOOLBAR, cfg, ActionContext(event_bus=event_bus)
        )

    @property
    def text(self) -> str:
        """The current buffer; assigning to it counts as an edit."""
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self.on_content_changed(value)

    @property
    def state(self) -> EditorState:
        """The state the toolbar actions react to."""
        # Selection information is not tracked.
        return EditorState(
            current_file_path=self.current_file_path,
            is_dirty=self.is_dirty,
            has_selection=False,
        )

    def save(self) -> bool:
        """Write the buffer to the current file; return False when no file is open.

        Raises OSError if the file cannot be written.
        """
        if not self.current_file_path:
            return False
        with open(self.current_file_path, "w", encoding="utf-8", newline="") as handle:
            handle.write(self._text)
        log.info("Saved: %s", self.current_file_path)
        self.original_content = self._text
        self.is_dirty = False
        self.update_toolbar_state()
        return True

    def on_content_changed(self, content: str) -> None:
        """Mark the buffer dirty exactly when it differs from the loaded content."""
        self.is_dirty = content != self.original_content
        self.update_toolbar_state()

    def set_file(self, path: str, content: str) -> None:
        """Load ``content`` as the contents of ``path``."""
        self.current_file_path = path
        self.original_content = content
        self._text = content
        self.is_dirty = False
        self.update_toolbar_state()

    def update_toolbar_state(self) -> None:
        """Tell the toolbar about the current state, if there is a toolbar."""
        if self.toolbar is not None:
            self.toolbar.update_state(self.state)