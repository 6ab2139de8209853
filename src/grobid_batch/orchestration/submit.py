"""Submit one PDF to GROBID and save the response."""

import logging
from pathlib import Path

from grobid_batch.client.grobid import GrobidClient
from grobid_batch.exceptions import OutputExistsError
from grobid_batch.models.enums import GrobidService
from grobid_batch.models.job import Job
from grobid_batch.utils.file_utils import read_bytes_async, write_bytes_async

logger = logging.getLogger("grobid_batch.orchestration.submit")


async def submit_and_save(
    client: GrobidClient,
    job: Job,
    output_dir: Path,
    service: GrobidService,
) -> Path:
    """Upload a job's PDF and write the response body to its output file.

    The server is not contacted when the output file already exists, which
    makes re-running over a finished directory a no-op.

    Args:
        client: GROBID client.
        job: Job to process.
        output_dir: Directory receiving the TEI files.
        service: GROBID operation to invoke.

    Returns:
        Path of the written output file.

    Raises:
        OutputExistsError: If the output file is already present.
        OSError: If the source cannot be read or the output cannot be written.
        httpx.HTTPError: If the upload fails.
    """
    output_path = job.output_path(output_dir)
    if output_path.exists():
        raise OutputExistsError(output_path)

    content = await read_bytes_async(job.source_path)
    body = await client.process(service, job.file_name, content)

    try:
        await write_bytes_async(output_path, body)
    except OSError:
        # Leave no truncated output behind, it would block the next run
        output_path.unlink(missing_ok=True)
        raise

    logger.debug(f"Wrote {len(body)} bytes to {output_path}")
    return output_path
