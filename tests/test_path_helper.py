from pathlib import Path

from genco.path_helper import try_to_absolute_path


def test_existing_relative_path_becomes_absolute(tmp_path, monkeypatch):
    target = tmp_path / "sub" / "path_helper.rs"
    target.parent.mkdir()
    target.write_text("x")
    monkeypatch.chdir(tmp_path)

    result = try_to_absolute_path(Path("sub/path_helper.rs"))

    assert result.endswith("sub/path_helper.rs")
    assert Path(result).is_absolute()
    assert result == str(target.resolve())


def test_nonexistent_path_is_returned_unchanged():
    path = Path("does/not/exist.txt")
    assert try_to_absolute_path(path) == str(path)