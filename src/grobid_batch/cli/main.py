"""Main CLI entry point for grobid-batch."""

import asyncio
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from grobid_batch import __version__
from grobid_batch.config import GrobidBatchConfig, RunConfiguration, load_config
from grobid_batch.exceptions import GrobidBatchError
from grobid_batch.models.enums import GrobidService
from grobid_batch.orchestration.progress import ProgressTracker
from grobid_batch.orchestration.runner import check_service, run_batch
from grobid_batch.utils.logging import setup_logging

app = typer.Typer(
    name="grobid-batch",
    help="Batch-process a directory of PDFs through a GROBID server.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"grobid-batch version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """GROBID batch processor.

    Submit every PDF under a directory to GROBID and save the TEI XML.
    """
    pass


ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration file.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]

HostOption = Annotated[
    Optional[str],
    typer.Option("--host", help="GROBID host (default: $GROBID_HOST or localhost)."),
]

PortOption = Annotated[
    Optional[str],
    typer.Option("--port", help="GROBID port (default: $GROBID_PORT or 8070)."),
]

TimeoutOption = Annotated[
    Optional[float],
    typer.Option("--timeout", help="Per-request timeout in seconds.", min=0.1),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        help="Increase verbosity (-v verbose, -vv debug).",
        min=0,
        max=2,
        clamp=True,
        count=True,
    ),
]

QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Only show warnings and errors."),
]


def _verbosity(verbose: int, quiet: bool) -> Optional[int]:
    """Map -v/-q flags to a verbosity override (None keeps the configured level)."""
    if quiet:
        return 0
    if verbose:
        return 1 + verbose
    return None


def _load_config_or_exit(**kwargs) -> GrobidBatchConfig:
    """Load configuration, exiting with code 2 when it is invalid."""
    try:
        return load_config(**kwargs)
    except ValueError as e:
        console.print(f"[bold red]Invalid configuration:[/bold red] {e}")
        raise typer.Exit(code=2)


@app.command()
def process(
    input_dir: Annotated[
        Path,
        typer.Argument(
            help="Directory searched recursively for .pdf/.PDF files.",
            exists=True,
            file_okay=False,
            dir_okay=True,
            readable=True,
        ),
    ],
    output_dir: Annotated[
        Path,
        typer.Argument(help="Directory receiving <name>.tei.xml files."),
    ],
    service: Annotated[
        Optional[str],
        typer.Option(
            "--service",
            "-s",
            help="GROBID service: fulltext, header or references.",
        ),
    ] = None,
    workers: Annotated[
        Optional[int],
        typer.Option(
            "--workers",
            "-w",
            help="Number of concurrent workers.",
            min=1,
            max=256,
        ),
    ] = None,
    host: HostOption = None,
    port: PortOption = None,
    timeout: TimeoutOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = 0,
    quiet: QuietOption = False,
    log_file: Annotated[
        Optional[Path],
        typer.Option("--log-file", help="Also write a debug log to this file."),
    ] = None,
    show_progress: Annotated[
        bool,
        typer.Option("--progress/--no-progress", help="Show the live progress display."),
    ] = True,
) -> None:
    """Submit every PDF under INPUT_DIR to GROBID and save the responses.

    Files whose output already exists are skipped. Failures on single files
    are reported but do not fail the run.

    Example:
        grobid-batch process ./papers ./tei --workers 4
    """
    cfg = _load_config_or_exit(
        config_path=config,
        host=host,
        port=port,
        timeout=timeout,
        workers=workers,
        service=service,
        verbose=_verbosity(verbose, quiet),
        log_file=log_file,
    )

    setup_logging(verbosity=cfg.logging.verbosity, log_file=cfg.logging.log_file)

    run_config = RunConfiguration.from_config(cfg, input_dir, output_dir)

    console.print("[bold green]Starting batch[/bold green]")
    console.print(f"  Input:   {run_config.input_dir}")
    console.print(f"  Output:  {run_config.output_dir}")
    console.print(f"  Service: {run_config.service.cli_name}")
    console.print(f"  Server:  {cfg.grobid.base_url}")
    console.print(f"  Workers: {run_config.worker_count}")
    console.print()

    tracker = ProgressTracker(console=console, show_progress=show_progress)
    try:
        batch_result = asyncio.run(
            run_batch(run_config, cfg.grobid, progress_tracker=tracker)
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Batch interrupted by user[/yellow]")
        sys.exit(1)
    except (GrobidBatchError, OSError) as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        if cfg.logging.verbosity >= 2:
            console.print_exception()
        sys.exit(1)

    tracker.display_summary(batch_result)


@app.command()
def check(
    host: HostOption = None,
    port: PortOption = None,
    timeout: TimeoutOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = 0,
    quiet: QuietOption = False,
) -> None:
    """Check that the GROBID server is up and running."""
    cfg = _load_config_or_exit(
        config_path=config,
        host=host,
        port=port,
        timeout=timeout,
        verbose=_verbosity(verbose, quiet),
    )
    setup_logging(verbosity=cfg.logging.verbosity)

    try:
        asyncio.run(check_service(cfg.grobid))
    except GrobidBatchError as e:
        console.print(f"[bold red]✗[/] {e}")
        sys.exit(1)

    console.print(f"[bold green]✓[/] GROBID server is up and running at {cfg.grobid.base_url}")


@app.command()
def services() -> None:
    """List the GROBID services a batch can run."""
    table = Table(title="GROBID Services")
    table.add_column("Name", style="cyan")
    table.add_column("Endpoint")

    for service in GrobidService:
        table.add_row(service.cli_name, service.value)

    console.print(table)


if __name__ == "__main__":
    app()
