"""Default configuration values for the GROBID batch processor."""

from pathlib import Path

# Default configuration file name
DEFAULT_CONFIG_FILENAME = "grobid-batch.config.json"

# Search paths for configuration file (in order of priority)
CONFIG_SEARCH_PATHS = [
    Path.cwd() / DEFAULT_CONFIG_FILENAME,
    Path.home() / ".config" / "grobid-batch" / "config.json",
]

# GROBID server location
DEFAULT_GROBID_HOST = "localhost"
DEFAULT_GROBID_PORT = "8070"

# Environment variables read by the loader
ENV_GROBID_HOST = "GROBID_HOST"
ENV_GROBID_PORT = "GROBID_PORT"
ENV_WORKERS = "GROBID_BATCH_WORKERS"

# Number of concurrent workers
DEFAULT_WORKERS = 10

# Per-request timeout in seconds (full-text processing of large PDFs is slow)
DEFAULT_TIMEOUT = 300.0
