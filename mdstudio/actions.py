"""Toolbar actions, the state they react to, and the registry that builds them."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Optional

from mdstudio.eventbus import EventBus


@dataclass
class EditorState:
    """The editor state that actions enable or disable themselves from."""

    current_file_path: str = ""
    is_dirty: bool = False
    has_selection: bool = False


@dataclass
class ActionContext:
    """What an action needs when it is built."""

    editor_state: EditorState = field(default_factory=EditorState)
    event_bus: Optional[EventBus] = None


class Action:
    """A toolbar action that publishes an event when clicked."""

    name: ClassVar[str] = ""
    label: ClassVar[str] = ""
    event: ClassVar[str] = ""
    initially_enabled: ClassVar[bool] = False

    def __init__(self, ctx: Optional[ActionContext] = None) -> None:
        self.ctx = ctx if ctx is not None else ActionContext()
        self.enabled = False
        self.set_enabled(self.initially_enabled)

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable the action."""
        self.enabled = bool(enabled)

    def update_state(self, state: EditorState) -> None:
        """React to a change of editor state; the default does nothing."""

    def on_event(self, event: str, payload: Any) -> None:
        """React to an application event; the default does nothing."""

    def click(self) -> list[threading.Thread]:
        """Publish the action's event if it is enabled and a bus is present."""
        if not self.enabled or self.ctx.event_bus is None:
            return []
        return self.ctx.event_bus.publish(self.event, None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, enabled={self.enabled})"


class CopyAction(Action):
    name = "copy"
    label = "📋 Copy"
    event = "editor.copy"

    def update_state(self, state: EditorState) -> None:
        self.set_enabled(state.has_selection)


class CutAction(Action):
    name = "cut"
    label = "✂️ Cut"
    event = "editor.cut"

    def update_state(self, state: EditorState) -> None:
        self.set_enabled(state.has_selection)


class DeleteFileAction(Action):
    name = "deletefile"
    label = "🗑️ Delete"
    event = "app.deletefile"

    def update_state(self, state: EditorState) -> None:
        self.set_enabled(state.current_file_path != "")


class MoveFileAction(Action):
    name = "movefile"
    label = "📂 Move"
    event = "app.movefile"

    def update_state(self, state: EditorState) -> None:
        self.set_enabled(state.current_file_path != "")


class NewFileAction(Action):
    name = "newfile"
    label = "🆕 New"
    event = "app.newfile"
    initially_enabled = True

    def update_state(self, state: EditorState) -> None:
        self.set_enabled(True)


class PasteAction(Action):
    name = "paste"
    label = "📋 Paste"
    event = "editor.paste"
    initially_enabled = True

    def update_state(self, state: EditorState) -> None:
        self.set_enabled(True)


class RedoAction(Action):
    name = "redo"
    label = "↪️ Redo"
    event = "editor.redo"

    def update_state(self, state: EditorState) -> None:
        self.set_enabled(True)


class SaveAction(Action):
    name = "save"
    label = "💾 Save"
    event = "editor.save"

    def update_state(self, state: EditorState) -> None:
        self.set_enabled(state.is_dirty)


class UndoAction(Action):
    name = "undo"
    label = "↩️ Undo"
    event = "editor.undo"

    def update_state(self, state: EditorState) -> None:
        self.set_enabled(True)


ActionConstructor = Callable[[ActionContext], Action]

ACTION_REGISTRY: dict[str, ActionConstructor] = {}


def register_action(name: str, constructor: ActionConstructor) -> None:
    """Register ``constructor`` under ``name``, replacing any earlier one."""
    ACTION_REGISTRY[name] = constructor


def create_action(name: str, ctx: ActionContext) -> Action:
    """Build the action registered as ``name``. Raises KeyError if unknown."""
    try:
        constructor = ACTION_REGISTRY[name]
    except KeyError:
        raise KeyError(f"unknown action: {name}") from None
    return constructor(ctx)


for _cls in (
    CopyAction,
    CutAction,
    DeleteFileAction,
    MoveFileAction,
    NewFileAction,
    PasteAction,
    RedoAction,
    SaveAction,
    UndoAction,
):
    register_action(_cls.name, _cls)