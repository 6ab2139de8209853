"""Worker pool that drains discovered PDFs through GROBID."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from grobid_batch.client.grobid import GrobidClient
from grobid_batch.config.models import RunConfiguration
from grobid_batch.exceptions import DiscoveryError, OutputExistsError
from grobid_batch.models.enums import JobStatus
from grobid_batch.models.job import BatchResult, Job, JobResult
from grobid_batch.orchestration.discovery import discover_pdfs
from grobid_batch.orchestration.job_queue import JobQueue
from grobid_batch.orchestration.progress import ProgressTracker
from grobid_batch.orchestration.submit import submit_and_save
from grobid_batch.utils.file_utils import ensure_directory

logger = logging.getLogger("grobid_batch.orchestration.batch")


class BatchProcessor:
    """Runs one batch: availability check, worker pool, discovery, barrier.

    Per-file failures are logged and recorded in the result; only an
    unavailable server or a traversal error make process() raise.
    """

    def __init__(
        self,
        client: GrobidClient,
        progress_tracker: Optional[ProgressTracker] = None,
    ):
        """Initialize the batch processor.

        Args:
            client: GROBID client shared by all workers.
            progress_tracker: Optional progress tracker for UI updates.
        """
        self._client = client
        self._progress = progress_tracker or ProgressTracker(show_progress=False)

    async def process(self, run_config: RunConfiguration) -> BatchResult:
        """Process every PDF under the input directory.

        Args:
            run_config: Directories, service and worker count for the run.

        Returns:
            BatchResult listing the outcome of every discovered file.

        Raises:
            ServiceUnavailableError: If the availability check fails. No
                worker is started and no file is touched.
            DiscoveryError: If the input tree cannot be traversed. Workers
                finish their current job before this propagates.

        Cancelling the calling task cancels every worker, abandoning the
        uploads in flight.
        """
        await self._client.check_alive()

        ensure_directory(run_config.output_dir)

        batch_result = BatchResult(
            input_dir=run_config.input_dir,
            output_dir=run_config.output_dir,
            service=run_config.service,
            started_at=datetime.now(timezone.utc),
        )

        queue = JobQueue()
        self._progress.start()
        try:
            workers = [
                asyncio.create_task(
                    self._worker(worker_id, queue, run_config, batch_result),
                    name=f"grobid-worker-{worker_id}",
                )
                for worker_id in range(1, run_config.worker_count + 1)
            ]
            logger.debug(f"Started {len(workers)} workers")

            try:
                await self._discover(run_config, queue)
                await queue.close()
                outcomes = await asyncio.gather(*workers, return_exceptions=True)
            except DiscoveryError:
                # Jobs already handed out finish before the error propagates
                await queue.close()
                await asyncio.gather(*workers, return_exceptions=True)
                raise
            except BaseException:
                await self._cancel_workers(workers)
                raise
        finally:
            self._progress.finish()

        crashes = [o for o in outcomes if isinstance(o, Exception)]
        for crash in crashes:
            logger.error(f"Worker crashed: {type(crash).__name__}: {crash}")
        if crashes:
            raise crashes[0]

        batch_result.completed_at = datetime.now(timezone.utc)
        logger.info(
            f"Batch finished: {batch_result.succeeded} processed, "
            f"{batch_result.skipped} skipped, {batch_result.failed} failed"
        )
        return batch_result

    async def _cancel_workers(self, workers: list[asyncio.Task]) -> None:
        """Cancel every worker and wait until they have all stopped."""
        for worker in workers:
            worker.cancel()
        await asyncio.gather(*workers, return_exceptions=True)
        logger.info("Batch cancelled, in-flight jobs abandoned")

    async def _discover(self, run_config: RunConfiguration, queue: JobQueue) -> None:
        """Feed every discovered PDF to the queue.

        The directory walk runs in a worker thread so listing large trees
        does not stall the uploads.
        """
        jobs = discover_pdfs(run_config.input_dir)
        seen: dict[str, Job] = {}
        found = 0
        while (job := await asyncio.to_thread(next, jobs, None)) is not None:
            if job.file_name in seen:
                logger.warning(
                    f"{job.source_path} and {seen[job.file_name].source_path} share the "
                    f"output {job.output_path(run_config.output_dir)}"
                )
            else:
                seen[job.file_name] = job
            await queue.put(job)
            found += 1
        logger.info(f"Discovery complete: {found} PDF files under {run_config.input_dir}")

    async def _worker(
        self,
        worker_id: int,
        queue: JobQueue,
        run_config: RunConfiguration,
        batch_result: BatchResult,
    ) -> None:
        """Handle jobs one at a time until the queue is closed and drained."""
        async for job in queue:
            logger.info(f"worker {worker_id} started job on file {job.source_path}")
            result = await self._run_job(worker_id, job, run_config)
            batch_result.results.append(result)
            try:
                self._progress.record(result)
            except Exception as e:
                logger.warning(f"Progress update failed: {e}")
            logger.info(f"worker {worker_id} finished job on file {job.source_path}")

    async def _run_job(
        self,
        worker_id: int,
        job: Job,
        run_config: RunConfiguration,
    ) -> JobResult:
        """Run submit-and-save for one job, turning errors into a result."""
        output_path = job.output_path(run_config.output_dir)
        try:
            await submit_and_save(
                self._client, job, run_config.output_dir, run_config.service
            )
        except OutputExistsError as e:
            logger.warning(str(e))
            return JobResult(
                job=job,
                status=JobStatus.SKIPPED,
                output_path=output_path,
                worker_id=worker_id,
                error=str(e),
            )
        except Exception as e:
            logger.error(f"Processing failed for {job.source_path}: {type(e).__name__}: {e}")
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"Full exception for {job.source_path}", exc_info=True)
            return JobResult(
                job=job,
                status=JobStatus.FAILED,
                output_path=output_path,
                worker_id=worker_id,
                error=f"{type(e).__name__}: {e}",
            )

        return JobResult(
            job=job,
            status=JobStatus.SUCCEEDED,
            output_path=output_path,
            worker_id=worker_id,
        )
