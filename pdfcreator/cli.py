"""CLI entry point for PdfCreator.

Drop files or folders onto the executable (or a Send To shortcut) and each
Word, Excel, or PowerPoint document gets a PDF next to it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import click
import typer
from rich import print as rprint
from rich.markup import escape
from rich.status import Status
from rich.table import Table

from pdfcreator.batch import BatchOutcome, BatchRunner, Dispatcher
from pdfcreator.config import PdfCreatorConfig, load_config
from pdfcreator.converter import FileOutcome, OutcomeStatus, create_converters

app = typer.Typer(
    name="pdfcreator",
    help="Convert Word, Excel, and PowerPoint documents to PDF next to the originals.",
    add_completion=False,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _exit_with_error(message: str, pause: bool = True) -> NoReturn:
    """Print ``message`` in red, wait for a keypress, then exit with status 1."""
    rprint(f"[red]{escape(message)}[/red]")
    rprint()
    if pause:
        # click.pause is a no-op when stdin is not a terminal.
        click.pause("Press any key to exit.")
    raise typer.Exit(1)


def _configure_logging(cfg: PdfCreatorConfig) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[cfg.log_level],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _display_outcome(outcome: FileOutcome) -> None:
    path = escape(outcome.path)
    if outcome.status is OutcomeStatus.converted:
        rprint(f"[green]Created[/green] {escape(outcome.destination or '')}")
    elif outcome.status is OutcomeStatus.skipped:
        rprint(f"{path} [dim](PDF already exists)[/dim]")
    else:
        rprint(f"[red]{escape(outcome.message or outcome.path)}[/red]")


def _display_summary(batch: BatchOutcome) -> None:
    table = Table(title="Conversion Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Converted", str(batch.converted))
    table.add_row("Skipped", str(batch.skipped))
    table.add_row("Failed", str(batch.failed))
    rprint(table)


@app.command()
def main(
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="Documents or folders to convert", show_default=False),
    ] = None,
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to pdfcreator.yaml")
    ] = None,
) -> None:
    """Convert each document (or each document directly inside a folder) to PDF."""
    try:
        cfg = load_config(config)
    except ValueError as e:
        _exit_with_error(str(e))

    _configure_logging(cfg)

    if not paths:
        _exit_with_error("No arguments. Drag & drop a file or folder.", cfg.pause_on_exit)

    dispatcher = Dispatcher(create_converters(cfg))

    try:
        with Status("[bold]Generating pdf...", spinner="dots") as status:

            def on_start(path: Path) -> None:
                rprint(escape(str(path)))
                rprint("Generating pdf...")
                status.update(f"[bold]Generating pdf...[/bold] {escape(path.name)}")

            runner = BatchRunner(dispatcher, on_start=on_start, on_outcome=_display_outcome)
            batch = runner.run(paths)
    except Exception as e:
        logger.debug("batch aborted", exc_info=True)
        _exit_with_error(f"{type(e).__name__}: {e}", cfg.pause_on_exit)

    _display_summary(batch)

    if batch.has_errors:
        _exit_with_error(
            "The conversion encountered some issues. See above.", cfg.pause_on_exit
        )


if __name__ == "__main__":
    app()
