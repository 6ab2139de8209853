"""Job and run result models."""

from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from grobid_batch.models.enums import GrobidService, JobStatus

# Suffix appended to the source file name to build the output file name
OUTPUT_SUFFIX = ".tei.xml"


class Job(BaseModel):
    """One discovered input file awaiting submission."""

    source_path: Path = Field(..., description="Path of the PDF on disk")
    file_name: str = Field(..., description="Base name of the PDF")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_path(cls, path: Path) -> "Job":
        """Build a job for a file path."""
        return cls(source_path=path, file_name=path.name)

    def output_path(self, output_dir: Path) -> Path:
        """Derive the TEI output path for this job inside output_dir."""
        return output_dir / f"{self.file_name}{OUTPUT_SUFFIX}"


class JobResult(BaseModel):
    """Outcome of processing one job."""

    job: Job
    status: JobStatus
    output_path: Path
    worker_id: int = 0
    error: Optional[str] = None


class BatchResult(BaseModel):
    """Summary of a completed batch run."""

    input_dir: Path
    output_dir: Path
    service: GrobidService
    started_at: datetime
    completed_at: Optional[datetime] = None
    results: list[JobResult] = Field(default_factory=list)

    def _count(self, status: JobStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def discovered(self) -> int:
        """Number of jobs handed to the workers."""
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return self._count(JobStatus.SUCCEEDED)

    @property
    def skipped(self) -> int:
        return self._count(JobStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(JobStatus.FAILED)

    @property
    def failures(self) -> list[JobResult]:
        """Results of jobs that failed."""
        return [r for r in self.results if r.status == JobStatus.FAILED]

    @property
    def duration_seconds(self) -> Optional[float]:
        """Wall-clock duration of the run."""
        if self.completed_at is None:
            return None
        return (self.completed_at - self.started_at).total_seconds()
