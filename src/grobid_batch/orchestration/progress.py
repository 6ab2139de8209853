"""Progress tracking with Rich console output."""

import logging
from typing import Optional

from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from grobid_batch.models.enums import JobStatus
from grobid_batch.models.job import BatchResult, JobResult

logger = logging.getLogger("grobid_batch.orchestration.progress")


class ProgressTracker:
    """Tracks and displays batch progress using Rich.

    The total is unknown while discovery is still walking the tree, so the
    display counts finished jobs instead of showing a bar.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        show_progress: bool = True,
    ):
        """Initialize the progress tracker.

        Args:
            console: Rich console for output (created if not provided).
            show_progress: Whether to show the live progress display.
        """
        self._console = console or Console()
        self._show_progress = show_progress
        self._progress: Optional[Progress] = None
        self._task_id: Optional[TaskID] = None
        self._completed = 0
        self._errors = 0

    @property
    def completed(self) -> int:
        return self._completed

    @property
    def errors(self) -> int:
        return self._errors

    def start(self) -> None:
        """Start the live display."""
        self._completed = 0
        self._errors = 0

        if not self._show_progress or self._progress is not None:
            return

        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TextColumn("{task.completed} done"),
            TextColumn("•"),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._progress.start()
        self._task_id = self._progress.add_task("Processing PDFs", total=None)

    def record(self, result: JobResult) -> None:
        """Record a finished job.

        Args:
            result: Outcome of the job.
        """
        self._completed += 1
        if result.status == JobStatus.FAILED:
            self._errors += 1

        if self._progress and self._task_id is not None:
            display_item = str(result.job.source_path)
            if len(display_item) > 50:
                display_item = "..." + display_item[-47:]

            self._progress.update(
                self._task_id,
                advance=1,
                description=f"Processing: {display_item}",
            )

    def finish(self) -> None:
        """Stop the live display."""
        if self._progress:
            self._progress.stop()
            self._progress = None

    def display_summary(self, batch_result: BatchResult) -> None:
        """Print a summary table of the run.

        Args:
            batch_result: Result of the finished run.
        """
        table = Table(title="Batch Summary")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")

        table.add_row("Service", batch_result.service.cli_name)
        table.add_row("PDFs Found", str(batch_result.discovered))
        table.add_row("Processed", f"[green]{batch_result.succeeded}[/]")
        table.add_row("Skipped (exists)", str(batch_result.skipped))
        table.add_row(
            "Failed",
            f"[red]{batch_result.failed}[/]" if batch_result.failed > 0 else "0",
        )
        if batch_result.duration_seconds is not None:
            table.add_row("Duration", f"{batch_result.duration_seconds:.1f} s")

        self._console.print(table)

        failures = batch_result.failures
        if failures:
            failed_table = Table(title="Failed Files")
            failed_table.add_column("File", style="cyan", max_width=50)
            failed_table.add_column("Error", max_width=60)
            for result in failures:
                failed_table.add_row(str(result.job.source_path), result.error or "")
            self._console.print(failed_table)
