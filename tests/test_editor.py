import pytest

from mdstudio.config import AppConfig, default_config
from mdstudio.editor import PLACEHOLDER, Editor
from mdstudio.eventbus import EventBus


def _actions(editor):
    return {action.name: action for action in editor.toolbar.actions}


def test_new_editor_is_clean_with_toolbar():
    editor = Editor(default_config())
    assert editor.text == ""
    assert editor.is_dirty is False
    assert editor.placeholder == PLACEHOLDER
    assert _actions(editor)["save"].enabled is False


def test_editing_marks_dirty_and_enables_save():
    editor = Editor(default_config())
    editor.text = "hello"
    assert editor.is_dirty is True
    assert _actions(editor)["save"].enabled is True
    editor.text = ""
    assert editor.is_dirty is False
    assert _actions(editor)["save"].enabled is False


def test_set_file_loads_content_clean(tmp_path):
    editor = Editor(default_config())
    path = str(tmp_path / "doc.md")
    editor.set_file(path, "# Doc")
    assert editor.current_file_path == path
    assert editor.text == "# Doc"
    assert editor.original_content == "# Doc"
    assert editor.is_dirty is False
    assert _actions(editor)["deletefile"].enabled is True
    assert editor.state.current_file_path == path


def test_save_writes_buffer_and_clears_dirty(tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("old", encoding="utf-8")
    editor = Editor(default_config())
    editor.set_file(str(path), "old")
    editor.text = "new text\n"
    assert editor.is_dirty is True
    assert editor.save() is True
    assert path.read_text(encoding="utf-8") == "new text\n"
    assert editor.original_content == "new text\n"
    assert editor.is_dirty is False
    assert _actions(editor)["save"].enabled is False


def test_save_without_file_does_nothing(tmp_path):
    editor = Editor(default_config())
    editor.text = "unsaved"
    assert editor.save() is False
    assert editor.is_dirty is True


def test_save_to_unwritable_location_raises(tmp_path):
    editor = Editor(default_config())
    editor.set_file(str(tmp_path / "missing" / "doc.md"), "x")
    editor.text = "y"
    with pytest.raises(OSError):
        editor.save()
    assert editor.is_dirty is True


def test_editor_without_configured_toolbar_still_tracks_changes():
    editor = Editor(AppConfig())
    assert editor.toolbar is None
    editor.text = "changed"
    assert editor.is_dirty is True


def test_toolbar_actions_use_editor_bus():
    bus = EventBus()
    received = []
    bus.subscribe("editor.save", received.append)
    editor = Editor(default_config(), bus)
    editor.set_file("doc.md", "a")
    editor.text = "b"
    threads = _actions(editor)["save"].click()
    for thread in threads:
        thread.join(2)
    assert received == [None]