import os

from mdstudio.config import AppConfig, DirectoryEntry
from mdstudio.scanning import file_names, scan_flat, scan_markdown_files, scan_recursive


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("# title\n", encoding="utf-8")
    return path


def test_scan_flat_matches_suffix_case_insensitively(tmp_path):
    _touch(tmp_path / "b.md")
    _touch(tmp_path / "A.MD")
    _touch(tmp_path / "c.txt")
    (tmp_path / "folder.md").mkdir()
    assert scan_flat(tmp_path) == [
        os.path.join(str(tmp_path), "A.MD"),
        os.path.join(str(tmp_path), "b.md"),
    ]


def test_scan_flat_does_not_descend(tmp_path):
    _touch(tmp_path / "top.md")
    _touch(tmp_path / "sub" / "inner.md")
    assert scan_flat(tmp_path) == [os.path.join(str(tmp_path), "top.md")]


def test_scan_flat_missing_directory_is_empty(tmp_path):
    assert scan_flat(tmp_path / "missing") == []


def test_scan_flat_relative_dot_gives_clean_paths(tmp_path, monkeypatch):
    _touch(tmp_path / "readme.md")
    monkeypatch.chdir(tmp_path)
    assert scan_flat(".") == ["readme.md"]


def test_scan_recursive_depth_first_in_name_order(tmp_path):
    _touch(tmp_path / "a.md")
    _touch(tmp_path / "m" / "d.md")
    _touch(tmp_path / "m" / "skip.txt")
    _touch(tmp_path / "z.md")
    root = str(tmp_path)
    assert scan_recursive(tmp_path) == [
        os.path.join(root, "a.md"),
        os.path.join(root, "m", "d.md"),
        os.path.join(root, "z.md"),
    ]


def test_scan_recursive_missing_directory_is_empty(tmp_path):
    assert scan_recursive(tmp_path / "nowhere") == []


def test_scan_recursive_ignores_directories_named_like_markdown(tmp_path):
    _touch(tmp_path / "dir.md" / "real.md")
    assert scan_recursive(tmp_path) == [
        os.path.join(str(tmp_path), "dir.md", "real.md")
    ]


def test_scan_markdown_files_follows_config_order(tmp_path):
    flat = tmp_path / "flat"
    deep = tmp_path / "deep"
    _touch(flat / "one.md")
    _touch(flat / "nested" / "hidden.md")
    _touch(deep / "x" / "two.md")
    cfg = AppConfig(
        directories=[
            DirectoryEntry(path=str(deep), recursive=True),
            DirectoryEntry(path=str(flat), recursive=False),
        ]
    )
    assert scan_markdown_files(cfg) == [
        os.path.join(str(deep), "x", "two.md"),
        os.path.join(str(flat), "one.md"),
    ]


def test_scan_markdown_files_with_no_directories():
    assert scan_markdown_files(AppConfig()) == []


def test_file_names_returns_base_names(tmp_path):
    paths = [os.path.join("docs", "guide.md"), os.path.join("a", "b", "notes.md"), "plain.md"]
    assert file_names(paths) == ["guide.md", "notes.md", "plain.md"]


def test_file_names_matches_scan_results(tmp_path):
    _touch(tmp_path / "alpha.md")
    _touch(tmp_path / "beta.md")
    assert file_names(scan_flat(tmp_path)) == ["alpha.md", "beta.md"]