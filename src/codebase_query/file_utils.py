"""Utilities for file operations."""

from pathlib import Path
from typing import Protocol, Union

import aiofiles
from loguru import logger

FilePath = Union[Path, str]


class FileError(Exception):
    """Base exception for file operations."""

    pass


class FileLoadError(FileError):
    """Raised when a file cannot be read or decoded as UTF-8."""

    pass


class Fs(Protocol):
    """Filesystem collaborator used to load file content."""

    async def load(self, path: Path) -> str:
        """Return the full text content of ``path``."""
        ...


async def read_file_content(path: FilePath) -> str:
    """
    Read a file as UTF-8 text.

    Uses aiofiles for true async I/O (non-blocking).

    Args:
        path: File path (Path or string)

    Returns:
        The file content

    Raises:
        FileLoadError: If the file is missing, unreadable or not valid UTF-8
    """
    path_obj = Path(path) if isinstance(path, str) else path

    try:
        async with aiofiles.open(path_obj, mode="r", encoding="utf-8", newline="") as f:
            content = await f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileLoadError(f"Failed to read file {path_obj}: {e}") from e

    logger.debug("Read file", path=str(path_obj), content_length=len(content))
    return content


class LocalFs:
    """Fs implementation reading from the local disk."""

    async def load(self, path: Path) -> str:
        return await read_file_content(path)
