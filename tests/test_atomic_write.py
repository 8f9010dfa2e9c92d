import pytest

from scrivi.atomic_write import atomic_write_text_file
from scrivi.errors import ErrorCode, ScriviError


def test_writes_text(tmp_path):
    target = tmp_path / "scene.md"
    atomic_write_text_file(str(target), "# Heading\nBody ü\n")
    assert target.read_bytes() == "# Heading\nBody ü\n".encode("utf-8")


def test_leaves_no_temp_file(tmp_path):
    target = tmp_path / "project.json"
    result = atomic_write_text_file(target, "{}")
    assert result is None
    assert target.read_text() == "{}"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["project.json"]


def test_overwrites_existing(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("old old old")
    atomic_write_text_file(target, "new")
    assert target.read_text() == "new"


def test_accepts_bytes(tmp_path):
    target = tmp_path / "b.bin"
    atomic_write_text_file(target, b"\x00\x01raw")
    assert target.read_bytes() == b"\x00\x01raw"


def test_missing_directory_raises_io_error(tmp_path):
    target = tmp_path / "missing" / "x.txt"
    with pytest.raises(ScriviError) as info:
        atomic_write_text_file(target, "data")
    assert info.value.code is ErrorCode.IO_ERROR
    assert info.value.path == str(target) + ".tmp"


def test_rename_failure_cleans_up(tmp_path):
    target = tmp_path / "dir"
    target.mkdir()
    (target / "keep").write_text("x")
    with pytest.raises(ScriviError) as info:
        atomic_write_text_file(target, "data")
    assert info.value.code is ErrorCode.IO_ERROR
    assert info.value.path == str(target)
    assert info.value.message.startswith("rename failed")
    assert not (tmp_path / "dir.tmp").exists()