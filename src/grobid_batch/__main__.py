"""Entry point for running grobid-batch as a module.

Usage:
    python -m grobid_batch [command] [options]
"""

from grobid_batch.cli.main import app

if __name__ == "__main__":
    app()
