"""File system utilities for the batch processor."""

from pathlib import Path

import aiofiles


async def read_bytes_async(path: Path) -> bytes:
    """Read a file's raw bytes asynchronously.

    Args:
        path: Path to the file.

    Returns:
        File contents.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        OSError: If the file can't be read.
    """
    async with aiofiles.open(path, "rb") as f:
        return await f.read()


async def write_bytes_async(path: Path, content: bytes) -> None:
    """Create or truncate a file and write content to it verbatim.

    Args:
        path: Path to the file.
        content: Bytes to write.
    """
    async with aiofiles.open(path, "wb") as f:
        await f.write(content)


def ensure_directory(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path.

    Returns:
        The directory path.
    """
    path.mkdir(parents=True, exist_ok=True)
    return path
