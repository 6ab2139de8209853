"""Recursive discovery of PDF files under an input directory."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from grobid_batch.exceptions import DiscoveryError
from grobid_batch.models.job import Job

logger = logging.getLogger("grobid_batch.orchestration.discovery")

# Only these two spellings are picked up; ".Pdf" and friends are not
PDF_SUFFIXES = (".pdf", ".PDF")


def is_pdf_name(name: str) -> bool:
    """Check whether a file name carries one of the accepted PDF suffixes."""
    return name.endswith(PDF_SUFFIXES)


def _raise_walk_error(error: OSError) -> None:
    raise DiscoveryError(error.filename or "", error.strerror or str(error)) from error


def discover_pdfs(input_dir: Path) -> Iterator[Job]:
    """Yield a job for every PDF file below input_dir.

    Directories are walked in lexical order. Symlinked directories are
    listed but not descended into.

    Args:
        input_dir: Root of the tree to walk.

    Yields:
        One Job per matching file.

    Raises:
        DiscoveryError: If any part of the tree cannot be read, including
            a missing or non-directory input_dir.
    """
    if not input_dir.is_dir():
        raise DiscoveryError(input_dir, "not a directory")

    for dirpath, dirnames, filenames in os.walk(input_dir, onerror=_raise_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            if is_pdf_name(name):
                yield Job.from_path(Path(dirpath) / name)
            else:
                logger.debug(f"Ignoring {Path(dirpath) / name}")
