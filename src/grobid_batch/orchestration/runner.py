"""Entry points that wire the client, worker pool and configuration together."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import httpx

from grobid_batch.client.grobid import GrobidClient
from grobid_batch.config.defaults import DEFAULT_WORKERS
from grobid_batch.config.models import GrobidConfig, RunConfiguration
from grobid_batch.models.enums import GrobidService
from grobid_batch.models.job import BatchResult
from grobid_batch.orchestration.batch_processor import BatchProcessor
from grobid_batch.orchestration.progress import ProgressTracker

logger = logging.getLogger("grobid_batch.orchestration.runner")


async def run_batch(
    run_config: RunConfiguration,
    grobid_config: Optional[GrobidConfig] = None,
    progress_tracker: Optional[ProgressTracker] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> BatchResult:
    """Run one batch against a GROBID server.

    Args:
        run_config: Directories, service and worker count.
        grobid_config: Server location (defaults to localhost:8070).
        progress_tracker: Optional progress display.
        transport: Optional httpx transport, mainly for tests.

    Returns:
        BatchResult for the run.
    """
    grobid_config = grobid_config or GrobidConfig()
    logger.info(
        f"Processing {run_config.input_dir} -> {run_config.output_dir} "
        f"with {run_config.service.value} at {grobid_config.base_url} "
        f"({run_config.worker_count} workers)"
    )
    async with GrobidClient(grobid_config, transport=transport) as client:
        processor = BatchProcessor(client, progress_tracker=progress_tracker)
        return await processor.process(run_config)


async def check_service(
    grobid_config: Optional[GrobidConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """Run the availability check on its own.

    Raises:
        ServiceUnavailableError: If the server is not ready.
    """
    async with GrobidClient(grobid_config, transport=transport) as client:
        await client.check_alive()


def process_directory(
    input_dir: Path | str,
    output_dir: Path | str,
    service: GrobidService | str = GrobidService.FULLTEXT,
    *,
    worker_count: int = DEFAULT_WORKERS,
    grobid_config: Optional[GrobidConfig] = None,
) -> BatchResult:
    """Process a directory tree of PDFs synchronously.

    Args:
        input_dir: Directory walked for .pdf/.PDF files.
        output_dir: Directory receiving one <name>.tei.xml per PDF.
        service: GROBID operation, as an enum member or its name.
        worker_count: Number of concurrent workers.
        grobid_config: Server location (defaults to localhost:8070).

    Returns:
        BatchResult for the run.

    Raises:
        ServiceUnavailableError: If the server fails the availability check.
        DiscoveryError: If the input tree cannot be traversed.
    """
    run_config = RunConfiguration(
        input_dir=Path(input_dir),
        output_dir=Path(output_dir),
        service=service,
        worker_count=worker_count,
    )
    return asyncio.run(run_batch(run_config, grobid_config))
