"""Command-line interface for grobid-batch."""

from grobid_batch.cli.main import app

__all__ = ["app"]
