import pytest

from core.file_manager import FileManager, FileManagerError


def test_write_file_creates_parents_and_replaces_content(tmp_path):
    manager = FileManager()
    target = tmp_path / "out" / "change.diff"

    manager.write_file(str(target), "first\n")
    manager.write_file(str(target), "second\n")

    assert target.read_text(encoding="utf-8") == "second\n"


def test_read_file_keeps_line_endings(tmp_path):
    source = tmp_path / "crlf.txt"
    source.write_bytes(b"a\r\nb\r\n")

    assert FileManager().read_file(str(source)) == "a\r\nb\r\n"


def test_read_file_errors(tmp_path):
    manager = FileManager()

    with pytest.raises(FileManagerError, match="File not found"):
        manager.read_file(str(tmp_path / "missing.txt"))
    with pytest.raises(FileManagerError, match="Not a file"):
        manager.read_file(str(tmp_path))

    binary = tmp_path / "blob.bin"
    binary.write_bytes(b"\xff\xfe\x00\x80")
    with pytest.raises(FileManagerError, match="non UTF-8"):
        manager.read_file(str(binary))
