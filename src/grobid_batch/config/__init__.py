"""Configuration management for the GROBID batch processor."""

from grobid_batch.config.loader import load_config
from grobid_batch.config.models import (
    BatchConfig,
    GrobidBatchConfig,
    GrobidConfig,
    LoggingConfig,
    RunConfiguration,
)

__all__ = [
    "BatchConfig",
    "GrobidBatchConfig",
    "GrobidConfig",
    "LoggingConfig",
    "RunConfiguration",
    "load_config",
]
