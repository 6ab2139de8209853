"""Closable job queue connecting discovery to the worker pool."""

import asyncio
from collections.abc import AsyncIterator

from grobid_batch.exceptions import QueueClosedError
from grobid_batch.models.job import Job

# Sentinel placed on the queue by close(); never handed to callers
_CLOSED = object()


class JobQueue:
    """Single-producer, multi-consumer queue with an end-of-stream state.

    A capacity of 1 keeps discovery at most one job ahead of the workers.
    Once closed, every receiver (current or future) sees end-of-stream
    after the remaining jobs are drained.
    """

    def __init__(self, maxsize: int = 1):
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def put(self, job: Job) -> None:
        """Enqueue a job, waiting while the queue is full.

        Raises:
            QueueClosedError: If the queue has been closed.
        """
        if self._closed:
            raise QueueClosedError("put() on a closed job queue")
        await self._queue.put(job)

    async def close(self) -> None:
        """Signal that no further jobs will arrive. Idempotent."""
        if self._closed:
            return
        self._closed = True
        await self._queue.put(_CLOSED)

    async def get(self) -> Job | None:
        """Take the next job, or None once the queue is closed and drained."""
        item = await self._queue.get()
        if item is _CLOSED:
            # Hand the sentinel on so the other receivers also stop
            self._queue.put_nowait(_CLOSED)
            return None
        return item

    async def __aiter__(self) -> AsyncIterator[Job]:
        while (job := await self.get()) is not None:
            yield job
