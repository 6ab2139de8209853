"""Shared utilities for the batch processor."""

from grobid_batch.utils.file_utils import (
    ensure_directory,
    read_bytes_async,
    write_bytes_async,
)

__all__ = [
    "ensure_directory",
    "read_bytes_async",
    "write_bytes_async",
]
