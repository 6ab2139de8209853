"""Async HTTP client for the GROBID REST API."""

import logging
from typing import Optional

import httpx

from grobid_batch.config.models import GrobidConfig
from grobid_batch.exceptions import ServiceUnavailableError
from grobid_batch.models.enums import GrobidService

logger = logging.getLogger("grobid_batch.client.grobid")

# Multipart field the GROBID processing endpoints read the PDF from
UPLOAD_FIELD = "input"

ALIVE_ENDPOINT = "isalive"


class GrobidClient:
    """Thin wrapper around httpx for the two GROBID calls the batch needs.

    No retries are attempted: a failed request is reported to the caller
    exactly once.
    """

    def __init__(
        self,
        config: Optional[GrobidConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            config: Server location and timeout (defaults to localhost:8070).
            transport: Optional httpx transport, used to plug in a mock server.
        """
        self._config = config or GrobidConfig()
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        """Return the API base URL."""
        return self._config.base_url

    def service_url(self, service: GrobidService) -> str:
        """Absolute URL of a processing service."""
        return f"{self._config.base_url}{service.value}"

    async def check_alive(self) -> None:
        """Probe the server's liveness endpoint.

        Raises:
            ServiceUnavailableError: If the server cannot be reached or does
                not answer 200 OK.
        """
        url = f"{self._config.base_url}{ALIVE_ENDPOINT}"
        try:
            response = await self._client.get(ALIVE_ENDPOINT)
        except httpx.HTTPError as e:
            raise ServiceUnavailableError(url, f"{type(e).__name__}: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise ServiceUnavailableError(
                url, f"{response.status_code} {response.reason_phrase}"
            )

        logger.info("GROBID server is up and running")

    async def is_alive(self) -> bool:
        """Return True if the liveness probe succeeds."""
        try:
            await self.check_alive()
        except ServiceUnavailableError as e:
            logger.debug(str(e))
            return False
        return True

    async def process(
        self,
        service: GrobidService,
        file_name: str,
        content: bytes,
    ) -> bytes:
        """Upload one PDF to a processing service.

        Args:
            service: GROBID operation to invoke.
            file_name: File name sent with the multipart upload.
            content: Raw PDF bytes.

        Returns:
            The response body, unmodified.

        Raises:
            httpx.HTTPError: On transport failure or a non-success status.
        """
        response = await self._client.post(
            service.value,
            files={UPLOAD_FIELD: (file_name, content, "application/pdf")},
        )
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError:
            logger.debug(f"GROBID error body for {file_name}: {response.text[:500]}")
            raise
        return response.content

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "GrobidClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
