"""Exception types for the batch processor.

Fatal errors abort the whole run. Per-job errors are caught by the workers,
logged and recorded in the run summary.
"""

from __future__ import annotations

from pathlib import Path


class GrobidBatchError(Exception):
    """Base class for errors that abort a whole run."""


class ServiceUnavailableError(GrobidBatchError):
    """Raised when the GROBID server fails the availability check."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"GROBID server does not appear up and running at {url}: {reason}")
        self.url = url
        self.reason = reason


class DiscoveryError(GrobidBatchError):
    """Raised when the input directory tree cannot be traversed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Cannot traverse {str(path)!r}: {reason}")
        self.path = str(path)
        self.reason = reason


class QueueClosedError(RuntimeError):
    """Raised when a job is put on a queue that was already closed."""


class OutputExistsError(FileExistsError):
    """Raised when the output file for a job is already present."""

    def __init__(self, output_path: Path) -> None:
        super().__init__(f"File already exists {output_path}")
        self.output_path = output_path
