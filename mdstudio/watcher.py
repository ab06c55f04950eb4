"""Debounced watching of a directory for markdown files appearing or disappearing."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Callable, Optional

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

log = logging.getLogger(__name__)

DEBOUNCE_SECONDS = 0.5


def is_relevant_event(event_type: str, path: str) -> bool:
    """Tell whether an event means a .md file was created or removed."""
    return path.endswith(".md") and event_type in (EVENT_TYPE_CREATED, EVENT_TYPE_DELETED)


class _Forwarder(FileSystemEventHandler):
    def __init__(self, watcher: "MarkdownDirWatcher") -> None:
        super().__init__()
        self._watcher = watcher

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.event_type == EVENT_TYPE_MOVED:
            # A rename makes a new name appear in the directory.
            self._watcher.notify(EVENT_TYPE_CREATED, os.fsdecode(event.dest_path))
        else:
            self._watcher.notify(event.event_type, os.fsdecode(event.src_path))


class MarkdownDirWatcher:
    """Calls ``on_change`` once relevant events have been quiet for ``debounce`` seconds."""

    def __init__(
        self,
        directory: str | Path,
        on_change: Callable[[], None],
        debounce: float = DEBOUNCE_SECONDS,
    ) -> None:
        self.directory = os.fspath(directory)
        self.on_change = on_change
        self.debounce = debounce
        self._observer: Optional[Observer] = None
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()
        self._stopped = False

    @property
    def active(self) -> bool:
        """True while the directory is being watched."""
        return self._observer is not None

    def start(self) -> "MarkdownDirWatcher":
        """Begin watching; failures are logged and leave the watcher inactive."""
        if self._observer is not None:
            return self
        with self._lock:
            self._stopped = False
        if not os.path.isdir(self.directory):
            log.warning("Failed to add watch directory: %s", self.directory)
            return self
        observer = Observer()
        try:
            observer.schedule(_Forwarder(self), self.directory, recursive=False)
            observer.start()
        except OSError as exc:
            log.warning("Failed to initialize watcher: %s", exc)
            return self
        self._observer = observer
        return self

    def stop(self) -> None:
        """Stop watching and drop any pending notification."""
        with self._lock:
            self._stopped = True
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        observer, self._observer = self._observer, None
        if observer is not None:
            observer.stop()
            observer.join()

    def notify(self, event_type: str, path: str) -> bool:
        """Feed one event; return whether it (re)started the debounce timer."""
        if not is_relevant_event(event_type, path):
            return False
        with self._lock:
            if self._stopped:
                return False
            if self._timer is not None:
                self._timer.cancel()
            timer = threading.Timer(self.debounce, self._fire)
            timer.daemon = True
            self._timer = timer
            timer.start()
        return True

    def _fire(self) -> None:
        with self._lock:
            if self._stopped or self._timer is not threading.current_thread():
                return
            self._timer = None
        self.on_change()

    def __enter__(self) -> "MarkdownDirWatcher":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


def watch_markdown_dir(directory: str | Path, on_change: Callable[[], None]) -> MarkdownDirWatcher:
    """Start watching ``directory`` and return the running watcher."""
    return MarkdownDirWatcher(directory, on_change).start()