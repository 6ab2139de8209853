"""Configuration loading and merging logic."""

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from grobid_batch.config.defaults import (
    CONFIG_SEARCH_PATHS,
    ENV_GROBID_HOST,
    ENV_GROBID_PORT,
    ENV_WORKERS,
)
from grobid_batch.config.models import GrobidBatchConfig


def find_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file.

    Args:
        explicit_path: Explicitly specified config file path (from CLI).

    Returns:
        Path to config file if found, None otherwise.
    """
    if explicit_path is not None:
        if explicit_path.exists():
            return explicit_path
        raise FileNotFoundError(f"Config file not found: {explicit_path}")

    # Search default locations
    for search_path in CONFIG_SEARCH_PATHS:
        if search_path.exists():
            return search_path

    return None


def load_config_file(path: Path) -> dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path: Path to the configuration file.

    Returns:
        Parsed configuration dictionary.
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def merge_cli_overrides(
    config: GrobidBatchConfig,
    host: Optional[str] = None,
    port: Optional[str] = None,
    timeout: Optional[float] = None,
    workers: Optional[int] = None,
    service: Optional[str] = None,
    verbose: Optional[int] = None,
    log_file: Optional[Path] = None,
) -> GrobidBatchConfig:
    """Merge CLI overrides into the configuration.

    CLI arguments take precedence over config file values.

    Args:
        config: Base configuration from file.
        host: GROBID host override.
        port: GROBID port override.
        timeout: Request timeout override in seconds.
        workers: Worker count override.
        service: Service name override.
        verbose: Verbosity level override.
        log_file: Log file override.

    Returns:
        Configuration with CLI overrides applied.
    """
    # Create a copy to avoid mutating the original
    data = config.model_dump()

    # Apply server overrides
    if host is not None:
        data["grobid"]["host"] = host
    if port is not None:
        data["grobid"]["port"] = port
    if timeout is not None:
        data["grobid"]["timeout"] = timeout

    # Apply batch overrides
    if workers is not None:
        data["batch"]["workers"] = workers
    if service is not None:
        data["batch"]["service"] = service

    # Apply logging overrides
    if verbose is not None:
        data["logging"]["verbosity"] = verbose
    if log_file is not None:
        data["logging"]["log_file"] = log_file

    return GrobidBatchConfig.model_validate(data)


def load_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    **cli_overrides: Any,
) -> GrobidBatchConfig:
    """Load configuration with CLI overrides.

    Configuration is loaded from the following sources (in order of priority):
    1. CLI arguments (highest priority)
    2. Environment variables (GROBID_HOST, GROBID_PORT, GROBID_BATCH_WORKERS)
    3. Config file (if found)
    4. Default values (lowest priority)

    Args:
        config_path: Explicit config file path (from --config CLI option).
        environ: Environment mapping (defaults to os.environ).
        **cli_overrides: CLI argument overrides. None values are ignored.

    Returns:
        Merged configuration object.
    """
    environ = os.environ if environ is None else environ
    overrides = {k: v for k, v in cli_overrides.items() if v is not None}

    # Start with default configuration
    config = GrobidBatchConfig()

    # Try to load from config file
    found_config = find_config_file(config_path)
    if found_config is not None:
        file_data = load_config_file(found_config)
        config = GrobidBatchConfig.model_validate(file_data)

    # Environment variables sit between the config file and the CLI
    if host := environ.get(ENV_GROBID_HOST):
        overrides.setdefault("host", host)
    if port := environ.get(ENV_GROBID_PORT):
        overrides.setdefault("port", port)
    if workers := environ.get(ENV_WORKERS):
        overrides.setdefault("workers", int(workers))

    # Apply CLI overrides
    return merge_cli_overrides(config, **overrides)
