import pytest

from genco.file_editor import (
    FileEditError,
    copy,
    create_ancestor_dirs,
    create_empty_file_if_not_exist_with_ancestor,
    create_file_if_not_exist,
    create_non_existent_file_with_content,
    create_or_replace_file_with_bytes,
    remove_file_if_exists,
    replace_bytes_in_existing_file,
)


def test_create_if_not_exists(tmp_path):
    file_path = tmp_path / "new_folder" / "new_file.rs"

    create_file_if_not_exist(file_path)

    assert file_path.is_file()
    assert file_path.read_bytes() == b""


def test_create_if_not_exists_keeps_existing_content(tmp_path):
    file_path = tmp_path / "existing.txt"
    file_path.write_text("keep")

    create_file_if_not_exist(file_path)

    assert file_path.read_text() == "keep"


def test_copy(tmp_path):
    input_file = tmp_path / "create_file_with_content.txt"
    input_file.write_text("line one\nline two\n")
    output_file = tmp_path / "create_file_with_content_output.txt"

    copy(input_file, output_file)

    assert output_file.is_file()
    assert output_file.read_text() == input_file.read_text()


def test_copy_replaces_longer_existing_output(tmp_path):
    input_file = tmp_path / "in.txt"
    input_file.write_text("ab")
    output_file = tmp_path / "out.txt"
    output_file.write_text("a much longer content")

    copy(input_file, output_file)

    assert output_file.read_text() == "ab"


def test_copy_missing_input_raises(tmp_path):
    with pytest.raises(FileEditError, match="Error reading resource"):
        copy(tmp_path / "missing.txt", tmp_path / "out.txt")


def test_create_or_replace_file_with_bytes_creates_parents(tmp_path):
    target = tmp_path / "a" / "b" / "c.txt"

    create_or_replace_file_with_bytes(target, b"content")

    assert target.read_bytes() == b"content"


def test_create_or_replace_file_with_bytes_replaces(tmp_path):
    target = tmp_path / "c.txt"
    target.write_bytes(b"old and long content")

    create_or_replace_file_with_bytes(target, b"new")

    assert target.read_bytes() == b"new"


def test_replace_bytes_in_missing_file_raises(tmp_path):
    with pytest.raises(FileEditError):
        replace_bytes_in_existing_file(tmp_path / "missing.txt", b"x")


def test_replace_bytes_in_existing_file(tmp_path):
    target = tmp_path / "f.txt"
    target.write_bytes(b"0123456789")

    replace_bytes_in_existing_file(target, b"ab")

    assert target.read_bytes() == b"ab"


def test_remove_file_if_exists(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("x")

    remove_file_if_exists(target)
    remove_file_if_exists(target)

    assert not target.exists()


def test_remove_file_if_exists_leaves_directories(tmp_path):
    directory = tmp_path / "dir"
    directory.mkdir()

    remove_file_if_exists(directory)

    assert directory.is_dir()


def test_create_ancestor_dirs_returns_highest_created(tmp_path):
    target = tmp_path / "x" / "y" / "z" / "file.txt"

    highest = create_ancestor_dirs(target)

    assert highest == tmp_path / "x"
    assert (tmp_path / "x" / "y" / "z").is_dir()
    assert not target.exists()


def test_create_ancestor_dirs_nothing_to_create(tmp_path):
    assert create_ancestor_dirs(tmp_path / "file.txt") is None


def test_create_empty_file_with_ancestor(tmp_path):
    target = tmp_path / "p" / "q.txt"

    create_empty_file_if_not_exist_with_ancestor(target)

    assert target.is_file()
    assert target.read_bytes() == b""


def test_create_non_existent_file_with_content(tmp_path):
    target = tmp_path / "new.txt"

    create_non_existent_file_with_content(target, b"hello")

    assert target.read_bytes() == b"hello"


def test_create_non_existent_file_with_content_writes_from_start(tmp_path):
    target = tmp_path / "existing.txt"
    target.write_bytes(b"abcdef")

    create_non_existent_file_with_content(target, b"XY")

    assert target.read_bytes() == b"XYcdef"