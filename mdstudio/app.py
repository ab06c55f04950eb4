"""The main window: wires the editor, file list, toolbar and watcher together."""

from __future__ import annotations

import argparse
import logging
import os
import queue
from pathlib import Path
from typing import Any, Callable, Optional

from mdstudio.config import CONFIG_FILE, AppConfig, DirectoryEntry, load_config, save_config
from mdstudio.editor import Editor
from mdstudio.eventbus import EventBus
from mdstudio.filelist import FileList
from mdstudio.toolbar import Separator
from mdstudio.watcher import MarkdownDirWatcher, watch_markdown_dir

log = logging.getLogger(__name__)

WINDOW_TITLE = "Markdown Studio"
WINDOW_SIZE = (1000, 600)
SPLIT_OFFSET = 0.25
POLL_MILLISECONDS = 100

_LOGGED_EVENTS = {
    "app.newfile": "New file requested",
    "app.deletefile": "Delete file requested",
    "app.movefile": "Move file requested",
}

_TEXT_EVENTS = {
    "editor.undo": ("undo", "Undo requested"),
    "editor.redo": ("redo", "Redo requested"),
    "editor.copy": ("copy", None),
    "editor.cut": ("cut", None),
    "editor.paste": ("paste", None),
}

_THEMES = {
    "dark": {"background": "#1e1e1e", "foreground": "#dddddd"},
    "light": {"background": "#f0f0f0", "foreground": "#000000"},
}


def _working_directory() -> str:
    try:
        return os.getcwd()
    except OSError as exc:
        log.warning("Could not get working directory: %s", exc)
        return "."


def ensure_config_directories(cfg: AppConfig, config_path: str | Path = CONFIG_FILE) -> bool:
    """Give ``cfg`` the working directory if it lists none; return whether it changed.

    The changed configuration is saved to ``config_path``.
    """
    if cfg.directories:
        return False
    cwd = _working_directory()
    cfg.directories = [DirectoryEntry(path=cwd, recursive=False)]
    log.info("No directories in config; using current directory: %s", cwd)
    log.info("Loaded config: %r", cfg)
    try:
        save_config(cfg, config_path)
    except OSError as exc:
        log.warning("Error saving config file: %s", exc)
    return True


class StudioController:
    """The application state behind the window, independent of any widget toolkit."""

    def __init__(self, cfg: AppConfig, config_path: str | Path = CONFIG_FILE) -> None:
        self.cfg = cfg
        self.config_path = config_path
        ensure_config_directories(cfg, config_path)
        self.event_bus = EventBus()
        self.editor = Editor(cfg, self.event_bus)
        self.file_list = FileList(cfg)
        self.status = ""
        self.text_command: Optional[Callable[[str], Any]] = None
        self.watcher: Optional[MarkdownDirWatcher] = None
        self._wired = False
        self.file_list.on_selected(self.load_selected)
        self.wire_events()

    def load_selected(self, index: int) -> bool:
        """Open the listed file at ``index`` in the editor; return whether it loaded."""
        if not 0 <= index < len(self.file_list.md_files):
            return False
        path = self.file_list.md_files[index]
        try:
            content = Path(path).read_bytes().decode("utf-8", errors="replace")
        except OSError:
            self.status = "Failed to load: " + path
            return False
        self.editor.set_file(path, content)
        self.status = path
        return True

    def wire_events(self) -> None:
        """Subscribe the application's handlers to the event bus, once."""
        if self._wired:
            return
        self._wired = True
        for event, message in _LOGGED_EVENTS.items():
            self.event_bus.subscribe(event, self._logger(message))
        for event, (command, message) in _TEXT_EVENTS.items():
            self.event_bus.subscribe(event, self._forwarder(command, message))
        self.event_bus.subscribe("editor.save", self._save)

    @staticmethod
    def _logger(message: str) -> Callable[[Any], None]:
        def handler(_payload: Any) -> None:
            log.info(message)

        return handler

    def _forwarder(self, command: str, message: Optional[str]) -> Callable[[Any], None]:
        def handler(_payload: Any) -> None:
            if message:
                log.info(message)
            if self.text_command is not None:
                self.text_command(command)

        return handler

    def _save(self, _payload: Any) -> None:
        try:
            self.editor.save()
        except OSError as exc:
            log.warning("Failed to save: %s", exc)

    def _on_directory_change(self) -> None:
        log.info("Directory change detected, updating file list...")
        self.file_list.update_list()

    def _stop_watching(self) -> None:
        if self.watcher is not None:
            self.watcher.stop()
            self.watcher = None


def _run_text_command(text: Any, command: str) -> None:
    import tkinter as tk

    try:
        if command == "undo":
            text.edit_undo()
        elif command == "redo":
            text.edit_redo()
        else:
            text.event_generate(f"<<{command.capitalize()}>>")
    except tk.TclError:
        pass


def build_main_ui(root: Any, cfg: AppConfig, config_path: str | Path = CONFIG_FILE) -> StudioController:
    """Lay out the file list, toolbar, editor and status line inside ``root``."""
    import tkinter as tk

    controller = StudioController(cfg, config_path)
    commands: "queue.Queue[str]" = queue.Queue()
    controller.text_command = commands.put

    outer = tk.Frame(root)
    outer.pack(fill="both", expand=True)

    status = tk.Label(outer, text="", anchor="w", justify="left")
    status.pack(side="bottom", fill="x")
    status.bind("<Configure>", lambda event: status.configure(wraplength=event.width))

    paned = tk.PanedWindow(outer, orient="horizontal")
    paned.pack(fill="both", expand=True)

    listbox = tk.Listbox(paned, exportselection=False)
    right = tk.Frame(paned)
    paned.add(listbox, width=int(WINDOW_SIZE[0] * SPLIT_OFFSET))
    paned.add(right)

    buttons: list[tuple[Any, Any]] = []
    toolbar = controller.editor.toolbar
    if toolbar is not None:
        bar = tk.Frame(right)
        vertical = toolbar.orientation == "vertical"
        bar.pack(side="left" if vertical else "top", fill="y" if vertical else "x")
        side = "top" if vertical else "left"
        for item in toolbar.items:
            if isinstance(item, Separator):
                tk.Frame(bar, width=8, height=8).pack(side=side)
                continue
            button = tk.Button(bar, text=item.label, command=item.click)
            button.pack(side=side)
            buttons.append((item, button))

    text = tk.Text(right, undo=True, wrap="word")
    text.pack(fill="both", expand=True)

    def on_modified(_event: Any) -> None:
        if not text.edit_modified():
            return
        content = text.get("1.0", "end-1c")
        if content != controller.editor.text:
            controller.editor.text = content
        text.edit_modified(False)

    text.bind("<<Modified>>", on_modified)

    def on_select(_event: Any) -> None:
        selection = listbox.curselection()
        if not selection:
            return
        controller.file_list.select(selection[0])
        text.delete("1.0", "end")
        text.insert("1.0", controller.editor.text)
        text.edit_reset()
        text.edit_modified(False)

    listbox.bind("<<ListboxSelect>>", on_select)

    def poll() -> None:
        while True:
            try:
                command = commands.get_nowait()
            except queue.Empty:
                break
            _run_text_command(text, command)
        names = list(controller.file_list.file_names)
        if list(listbox.get(0, "end")) != names:
            listbox.delete(0, "end")
            for name in names:
                listbox.insert("end", name)
        status.configure(text=controller.status)
        for action, button in buttons:
            button.configure(state="normal" if action.enabled else "disabled")
        root.after(POLL_MILLISECONDS, poll)

    controller.watcher = watch_markdown_dir(_working_directory(), controller._on_directory_change)

    top = root.winfo_toplevel()

    def on_close() -> None:
        controller._stop_watching()
        top.destroy()

    top.protocol("WM_DELETE_WINDOW", on_close)
    poll()
    return controller


def _apply_theme(root: Any, theme: str) -> None:
    palette = _THEMES.get(theme)
    if palette is not None:
        root.tk_setPalette(**palette)


def main(argv: Optional[list[str]] = None) -> int:
    """Start the editor window."""
    parser = argparse.ArgumentParser(prog="markdown-studio", description="Edit markdown files.")
    parser.add_argument("--config", default=CONFIG_FILE, help="configuration file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    cfg = load_config(args.config)

    import tkinter as tk

    root = tk.Tk()
    root.title(WINDOW_TITLE)
    root.geometry(f"{WINDOW_SIZE[0]}x{WINDOW_SIZE[1]}")
    _apply_theme(root, cfg.theme)
    build_main_ui(root, cfg, args.config)
    root.mainloop()
    return 0