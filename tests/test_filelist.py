import os

import pytest

from mdstudio.config import AppConfig, DirectoryEntry
from mdstudio.filelist import FileList


def _config(directory):
    return AppConfig(directories=[DirectoryEntry(path=str(directory), recursive=False)])


def _touch(path):
    path.write_text("text", encoding="utf-8")


def test_initial_scan_lists_files(tmp_path):
    _touch(tmp_path / "a.md")
    _touch(tmp_path / "b.md")
    _touch(tmp_path / "c.txt")
    files = FileList(_config(tmp_path))
    assert files.file_names == ["a.md", "b.md"]
    assert files.md_files == [
        os.path.join(str(tmp_path), "a.md"),
        os.path.join(str(tmp_path), "b.md"),
    ]
    assert len(files) == len(files.md_files)


def test_names_and_paths_stay_aligned(tmp_path):
    for name in ("x.md", "y.MD", "z.md"):
        _touch(tmp_path / name)
    files = FileList(_config(tmp_path))
    assert [os.path.basename(p) for p in files.md_files] == files.file_names


def test_update_list_sees_new_files(tmp_path):
    _touch(tmp_path / "first.md")
    files = FileList(_config(tmp_path))
    assert files.file_names == ["first.md"]
    _touch(tmp_path / "second.md")
    assert files.update_list() == ["first.md", "second.md"]
    assert files.file_names == ["first.md", "second.md"]


def test_refresh_files_drops_removed_files(tmp_path):
    _touch(tmp_path / "gone.md")
    files = FileList(_config(tmp_path))
    (tmp_path / "gone.md").unlink()
    files.refresh_files()
    assert files.md_files == []
    assert len(files) == 0


def test_select_invokes_callback(tmp_path):
    _touch(tmp_path / "a.md")
    _touch(tmp_path / "b.md")
    files = FileList(_config(tmp_path))
    chosen = []
    files.on_selected(chosen.append)
    files.select(1)
    assert chosen == [1]
    assert files.selected == 1


def test_select_out_of_range_raises(tmp_path):
    _touch(tmp_path / "a.md")
    files = FileList(_config(tmp_path))
    chosen = []
    files.on_selected(chosen.append)
    with pytest.raises(IndexError):
        files.select(1)
    with pytest.raises(IndexError):
        files.select(-1)
    assert chosen == []
    assert files.selected is None


def test_select_without_callback_records_selection(tmp_path):
    _touch(tmp_path / "only.md")
    files = FileList(_config(tmp_path))
    files.select(0)
    assert files.selected == 0