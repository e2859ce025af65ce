from __future__ import annotations

from pathlib import Path

import pytest

from loveprobe.core.classifier import get_extension, is_love_package, is_love_project_folder


@pytest.mark.parametrize(
    "path",
    ["game.love", "a.b.love", "/tmp/projects/demo.love", ".love", Path("nested/dir/x.love")],
)
def test_love_extension_is_package(path):
    assert is_love_package(path) is True


@pytest.mark.parametrize(
    "path",
    ["game.zip", "game.LOVE", "game.love.zip", "game", "love", "", "dir.love/game", "/tmp/projects/game"],
)
def test_other_paths_are_not_packages(path):
    assert is_love_package(path) is False


def test_dotless_name_has_no_extension():
    assert get_extension("love") == ""
    assert get_extension("some/dir/love") == ""


def test_only_last_segment_counts():
    assert get_extension("a.b.love") == "love"
    assert get_extension("archive.tar.gz") == "gz"


def test_custom_extension():
    assert is_love_package("game.pkg", extension="pkg") is True
    assert is_love_package("game.love", extension="pkg") is False


def test_folder_with_entry_point(make_folder):
    folder = make_folder({"main.lua": "function love.draw() end\n"})
    assert is_love_project_folder(folder) is True
    assert is_love_project_folder(str(folder)) is True


def test_folder_without_entry_point(make_folder):
    folder = make_folder({"conf.lua": 'function love.conf(t) t.version = "11.3" end\n'})
    assert is_love_project_folder(folder) is False


def test_nested_entry_point_does_not_count(make_folder):
    folder = make_folder({"src/main.lua": ""})
    assert is_love_project_folder(folder) is False


def test_missing_path_is_not_a_folder(tmp_path):
    assert is_love_project_folder(tmp_path / "does-not-exist") is False


def test_package_file_is_not_a_folder(make_package):
    package = make_package({"main.lua": "", "conf.lua": 't.version = "11.3"'})
    assert is_love_project_folder(package) is False


def test_classification_follows_disk_state(make_folder):
    folder = make_folder({})
    assert is_love_project_folder(folder) is False
    (folder / "main.lua").write_text("", encoding="utf-8")
    assert is_love_project_folder(folder) is True
    (folder / "main.lua").unlink()
    assert is_love_project_folder(folder) is False
