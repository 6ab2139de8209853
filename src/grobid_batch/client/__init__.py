"""HTTP client for the GROBID server."""

from grobid_batch.client.grobid import GrobidClient

__all__ = ["GrobidClient"]
