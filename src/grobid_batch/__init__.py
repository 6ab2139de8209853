"""GROBID Batch Processor.

Walks a directory tree of PDF files, submits each one to a GROBID server
through a fixed pool of concurrent workers and saves the TEI XML responses
to an output directory.
"""

__version__ = "0.1.0"

from grobid_batch.models.enums import GrobidService, JobStatus
from grobid_batch.orchestration.runner import process_directory, run_batch

__all__ = [
    "__version__",
    "GrobidService",
    "JobStatus",
    "process_directory",
    "run_batch",
]
