"""Tests for file utilities."""

import pytest

from codebase_query.file_utils import FileError, FileLoadError, LocalFs, read_file_content


@pytest.mark.asyncio
async def test_read_file_content(tmp_path):
    path = tmp_path / "note.txt"
    path.write_text("héllo\n", encoding="utf-8")

    assert await read_file_content(path) == "héllo\n"
    assert await read_file_content(str(path)) == "héllo\n"


@pytest.mark.asyncio
async def test_read_file_content_preserves_line_endings(tmp_path):
    """Byte offsets only line up when \\r\\n is kept as is."""
    path = tmp_path / "windows.txt"
    path.write_bytes(b"one\r\ntwo\r\n")

    content = await read_file_content(path)

    assert content == "one\r\ntwo\r\n"
    assert len(content.encode("utf-8")) == 10


@pytest.mark.asyncio
async def test_read_missing_file_raises_file_load_error(tmp_path):
    with pytest.raises(FileLoadError) as error:
        await read_file_content(tmp_path / "missing.txt")

    assert isinstance(error.value, FileError)
    assert isinstance(error.value.__cause__, FileNotFoundError)


@pytest.mark.asyncio
async def test_read_invalid_utf8_raises_file_load_error(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("café".encode("latin-1"))

    with pytest.raises(FileLoadError):
        await read_file_content(path)


@pytest.mark.asyncio
async def test_local_fs_load(tmp_path):
    path = tmp_path / "code.py"
    path.write_text("x = 1\n")

    assert await LocalFs().load(path) == "x = 1\n"
