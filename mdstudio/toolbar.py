"""Toolbars assembled from configuration and the action registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from mdstudio.actions import Action, ActionContext, EditorState, create_action
from mdstudio.config import AppConfig

log = logging.getLogger(__name__)

SEPARATOR = "separator"


@dataclass(frozen=True)
class Separator:
    """A visual gap between groups of actions."""


ToolbarItem = Union[Action, Separator]


@dataclass
class Toolbar:
    """A named, ordered set of actions with separators between groups."""

    name: str
    orientation: str = "horizontal"
    items: list[ToolbarItem] = field(default_factory=list)

    @property
    def actions(self) -> list[Action]:
        """The toolbar's actions without separators."""
        return [item for item in self.items if isinstance(item, Action)]

    def update_state(self, state: EditorState) -> None:
        """Pass the editor state to every action."""
        for action in self.actions:
            action.update_state(state)


def build_toolbar(name: str, cfg: AppConfig, ctx: ActionContext) -> Optional[Toolbar]:
    """Build the toolbar called ``name`` from ``cfg``; None if it is not configured.

    Unknown action names are logged and left out.
    """
    toolbar_cfg = next((tb for tb in cfg.toolbars if tb.name == name), None)
    if toolbar_cfg is None:
        log.warning("Toolbar config '%s' not found", name)
        return None

    items: list[ToolbarItem] = []
    for action_name in toolbar_cfg.actions:
        if action_name == SEPARATOR:
            items.append(Separator())
            continue
        try:
            items.append(create_action(action_name, ctx))
        except KeyError:
            log.warning("Unknown action: %s", action_name)

    orientation = "vertical" if toolbar_cfg.orientation == "vertical" else "horizontal"
    return Toolbar(name=name, orientation=orientation, items=items)