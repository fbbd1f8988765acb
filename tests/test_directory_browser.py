from pathlib import Path

import pytest

from genco.directory_browser import (
    check_dir_exist,
    get_dir,
    get_dir_ending_with,
    get_dir_map,
    get_dir_of_file,
    read_dir,
)


@pytest.fixture
def boot_dir(tmp_path):
    (tmp_path / "app-boot").mkdir()
    (tmp_path / "app-core").mkdir()
    (tmp_path / "notes-boot.txt").write_text("file, not a directory")
    return tmp_path


@pytest.fixture
def dir_with_files(tmp_path):
    (tmp_path / "first_dir").mkdir()
    (tmp_path / "second_dir").mkdir()
    (tmp_path / "file.txt").write_text("x")
    return tmp_path


def test_get_dir_ending_in_boot(boot_dir):
    assert get_dir_ending_with(boot_dir, "boot") == boot_dir / "app-boot"


def test_get_dir_ending_with_no_match(boot_dir):
    assert get_dir_ending_with(boot_dir, "web") is None


def test_get_dir_code(tmp_path):
    (tmp_path / "code").mkdir()
    (tmp_path / "other").mkdir()

    assert get_dir(tmp_path, "code") == tmp_path / "code"


def test_get_dir_ignores_files(tmp_path):
    (tmp_path / "code").write_text("a file")

    assert get_dir(tmp_path, "code") is None


def test_get_dir_map_dir_with_files(dir_with_files):
    dir_map = get_dir_map(dir_with_files)

    assert len(dir_map) == 2
    assert dir_map["first_dir"] == dir_with_files / "first_dir"
    assert dir_map["first_dir"].is_dir()
    assert dir_map["second_dir"].name == "second_dir"


def test_check_dir_exist_accepts_directory(dir_with_files):
    check_dir_exist(dir_with_files, "Error")
    assert dir_with_files.is_dir()


def test_check_dir_exist_raises(tmp_path):
    with pytest.raises(NotADirectoryError, match="^Missing dir: "):
        check_dir_exist(tmp_path / "nope", "Missing dir")


def test_read_dir_lists_entries(dir_with_files):
    names = [entry.name for entry in read_dir(dir_with_files)]

    assert names == ["file.txt", "first_dir", "second_dir"]


def test_read_dir_rejects_file(tmp_path):
    file_path = tmp_path / "f.txt"
    file_path.write_text("x")

    with pytest.raises(NotADirectoryError, match="expecting directory"):
        read_dir(file_path)


def test_get_dir_of_file():
    assert get_dir_of_file(Path("a") / "b" / "c.txt") == Path("a") / "b"