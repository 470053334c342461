"""Integration tests for clibkit.files against a real temporary directory."""

import pytest

from clibkit import files
from clibkit.errors import FileOperationError

# pylint: disable=magic-value-comparison


def test_write_then_read(tmp_path):
    """Text written is read back unchanged, UTF-8 included."""
    target = tmp_path / "note.txt"
    files.write_file(target, "héllo\nworld\n")
    assert files.read_file(target) == "héllo\nworld\n"
    assert files.file_exists(target)


def test_write_replaces_and_append_extends(tmp_path):
    """write_file truncates; append_file adds to the end or creates the file."""
    target = tmp_path / "log.txt"
    files.append_file(target, "a")
    files.append_file(target, "b")
    assert files.read_file(target) == "ab"
    files.write_file(target, "c")
    assert files.read_file(target) == "c"


def test_copy_file(tmp_path):
    """copy_file leaves the source in place."""
    src, dst = tmp_path / "src.txt", tmp_path / "dst.txt"
    files.write_file(src, "data")
    files.copy_file(src, dst)
    assert files.read_file(dst) == "data"
    assert files.file_exists(src)


def test_move_file(tmp_path):
    """move_file removes the source and replaces an existing destination."""
    src, dst = tmp_path / "src.txt", tmp_path / "dst.txt"
    files.write_file(src, "new")
    files.write_file(dst, "old")
    files.move_file(src, dst)
    assert not files.file_exists(src)
    assert files.read_file(dst) == "new"


def test_delete_file(tmp_path):
    """delete_file removes the file."""
    target = tmp_path / "gone.txt"
    files.write_file(target, "x")
    files.delete_file(target)
    assert not files.file_exists(target)


def test_file_exists_is_false_for_directories(tmp_path):
    """Directories are not files."""
    assert files.file_exists(tmp_path) is False


@pytest.mark.parametrize(
    ("operation", "call"),
    [
        ("read", lambda p: files.read_file(p)),
        ("delete", lambda p: files.delete_file(p)),
        ("copy", lambda p: files.copy_file(p, p.with_name("copy.txt"))),
        ("move", lambda p: files.move_file(p, p.with_name("moved.txt"))),
    ],
)
def test_missing_file_raises_file_operation_error(tmp_path, operation, call):
    """OS failures become FileOperationError naming the operation and path."""
    missing = tmp_path / "missing.txt"
    with pytest.raises(FileOperationError) as excinfo:
        call(missing)
    assert excinfo.value.operation == operation
    assert excinfo.value.path == str(missing)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_write_into_missing_directory_fails(tmp_path):
    """Writing below a directory that does not exist fails cleanly."""
    target = tmp_path / "nope" / "file.txt"
    with pytest.raises(FileOperationError, match="Could not write"):
        files.write_file(target, "x")
