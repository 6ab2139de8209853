"""Orchestration layer for batch runs."""

from grobid_batch.orchestration.batch_processor import BatchProcessor
from grobid_batch.orchestration.discovery import discover_pdfs, is_pdf_name
from grobid_batch.orchestration.job_queue import JobQueue
from grobid_batch.orchestration.progress import ProgressTracker
from grobid_batch.orchestration.runner import check_service, process_directory, run_batch
from grobid_batch.orchestration.submit import submit_and_save

__all__ = [
    "BatchProcessor",
    "JobQueue",
    "ProgressTracker",
    "check_service",
    "discover_pdfs",
    "is_pdf_name",
    "process_directory",
    "run_batch",
    "submit_and_save",
]
