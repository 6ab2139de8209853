"""Data models for the batch processor."""

from grobid_batch.models.enums import GrobidService, JobStatus
from grobid_batch.models.job import OUTPUT_SUFFIX, BatchResult, Job, JobResult

__all__ = [
    "BatchResult",
    "GrobidService",
    "Job",
    "JobResult",
    "JobStatus",
    "OUTPUT_SUFFIX",
]
