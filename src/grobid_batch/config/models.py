"""Pydantic configuration models for the GROBID batch processor."""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from grobid_batch.config.defaults import (
    DEFAULT_GROBID_HOST,
    DEFAULT_GROBID_PORT,
    DEFAULT_TIMEOUT,
    DEFAULT_WORKERS,
)
from grobid_batch.models.enums import GrobidService


def _coerce_service(value: Any) -> Any:
    if isinstance(value, str) and not isinstance(value, GrobidService):
        return GrobidService.from_name(value)
    return value


class GrobidConfig(BaseModel):
    """Location of the GROBID server."""

    host: str = DEFAULT_GROBID_HOST
    port: str = DEFAULT_GROBID_PORT
    timeout: Optional[float] = Field(default=DEFAULT_TIMEOUT, gt=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("port", mode="before")
    @classmethod
    def _port_as_str(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @property
    def base_url(self) -> str:
        """API base URL, always ending with a slash."""
        return f"http://{self.host}:{self.port}/api/"


class BatchConfig(BaseModel):
    """Batch behavior configuration."""

    workers: int = Field(default=DEFAULT_WORKERS, ge=1, le=256)
    service: GrobidService = GrobidService.FULLTEXT

    @field_validator("service", mode="before")
    @classmethod
    def _normalize_service(cls, value: Any) -> Any:
        return _coerce_service(value)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    verbosity: int = Field(default=1, ge=0, le=3)
    log_file: Optional[Path] = None


class GrobidBatchConfig(BaseModel):
    """Root configuration model."""

    grobid: GrobidConfig = Field(default_factory=GrobidConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="ignore")  # Ignore unknown fields in config file


class RunConfiguration(BaseModel):
    """Inputs of one batch run. Immutable once built."""

    input_dir: Path
    output_dir: Path
    service: GrobidService = GrobidService.FULLTEXT
    worker_count: int = Field(default=DEFAULT_WORKERS, ge=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("service", mode="before")
    @classmethod
    def _normalize_service(cls, value: Any) -> Any:
        return _coerce_service(value)

    @classmethod
    def from_config(
        cls,
        config: GrobidBatchConfig,
        input_dir: Path,
        output_dir: Path,
    ) -> "RunConfiguration":
        """Build a run configuration from the loaded settings."""
        return cls(
            input_dir=input_dir,
            output_dir=output_dir,
            service=config.batch.service,
            worker_count=config.batch.workers,
        )
