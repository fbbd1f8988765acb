from pathlib import Path

import pytest

from genco.file_browser import (
    do_last_element_in_path_ends_with,
    get_file_map,
    get_first_file_from_dir_if_exists,
    remove_java_extension,
)


@pytest.fixture
def java_pom_dir(tmp_path):
    (tmp_path / "pom.xml").write_text("<project/>")
    (tmp_path / "src").mkdir()
    return tmp_path


def test_get_first_file_if_exists_java_build_files_find_pom(java_pom_dir):
    pom = get_first_file_from_dir_if_exists(java_pom_dir, ["build.gradle", "pom.xml"])

    assert pom == java_pom_dir / "pom.xml"
    assert pom.is_file()


def test_get_first_file_if_exists_java_build_files_not_find(java_pom_dir):
    assert get_first_file_from_dir_if_exists(java_pom_dir, ["build.gradle"]) is None


def test_get_first_file_ignores_directories(tmp_path):
    (tmp_path / "pom.xml").mkdir()

    assert get_first_file_from_dir_if_exists(tmp_path, ["pom.xml"]) is None


def test_get_first_file_warns_on_non_directory(tmp_path, capsys):
    result = get_first_file_from_dir_if_exists(tmp_path / "missing", ["pom.xml"])

    assert result is None
    assert capsys.readouterr().out.startswith("WARN: ")


def test_get_file_map(tmp_path):
    (tmp_path / ".gitignore").write_text("target/")
    (tmp_path / "README.md").write_text("readme")
    (tmp_path / "subdir").mkdir()

    file_map = get_file_map(tmp_path)

    assert len(file_map) == 2
    assert file_map[".gitignore"] == tmp_path / ".gitignore"
    assert file_map[".gitignore"].is_file()


def test_do_last_element_in_path_ends_with():
    path = Path("org") / "test" / "JavaClass.java"

    assert do_last_element_in_path_ends_with(path, ".java")
    assert not do_last_element_in_path_ends_with(path, ".kt")


def test_do_last_element_in_empty_path_raises():
    with pytest.raises(ValueError):
        do_last_element_in_path_ends_with("", ".java")


def test_remove_java_extension():
    assert remove_java_extension("JavaClassFrom.java") == "JavaClassFrom"


def test_remove_java_extension_too_short():
    with pytest.raises(ValueError):
        remove_java_extension("a.j")