"""Typer CLI for genheap."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from .builder import generate
from .config import parse_pause, resolve_profile
from .console import console, stderr_console
from .exceptions import GenHeapError, ValidationError
from .models import BatchingPolicy, FixtureShape

app = typer.Typer(help="Allocate a heap fixture and pause for a memory snapshot.", add_completion=False)


def _format_shape_table(shape: FixtureShape) -> Table:
    table = Table(title=f"Fixture shape for {shape.passes} passes ({shape.policy} batching)")
    table.add_column("Structure")
    table.add_column("Entries", justify="right")

    def count(value: Optional[int]) -> str:
        return "-" if value is None else str(value)

    table.add_row("Scalar table", count(shape.scalar_entries))
    table.add_row("Batch table", count(shape.batches))
    table.add_row("Flushed records", count(shape.flushed_records))
    table.add_row("Discarded records", count(shape.discarded_records))
    table.add_row("Dominance table", count(shape.dominance_entries))
    table.add_row("Dominance array", count(shape.dominance_shared))
    return table


def _check_pause(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    try:
        return parse_pause(value, "--pause-s")
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def run(
    passes: int = typer.Argument(..., min=0, help="Number of Thing1 records to build"),
    pause_s: Optional[float] = typer.Option(
        None,
        "--pause-s",
        min=0,
        callback=_check_pause,
        help="Seconds to hold the process alive (default 60)",
    ),
    batching: Optional[BatchingPolicy] = typer.Option(
        None, "--batching", case_sensitive=False, help="When to flush a batch"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for random batching"),
    profile: Optional[Path] = typer.Option(
        None, "--profile", exists=True, dir_okay=False, resolve_path=True
    ),
    manifest: Optional[Path] = typer.Option(
        None, "--manifest", file_okay=False, resolve_path=True, help="Directory for manifest files"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview the shape without allocating"),
) -> None:
    """Build the fixture, announce it on stderr, then pause."""
    try:
        settings = resolve_profile(profile).merged(
            pause_s=pause_s,
            batching=batching,
            seed=seed,
            manifest_dir=manifest,
        )
    except GenHeapError as exc:
        raise typer.Exit(f"error: {exc}") from exc

    if dry_run:
        console.print(_format_shape_table(FixtureShape.expected(passes, settings.batching)))
        return

    try:
        generate(passes, settings)
    except KeyboardInterrupt:
        stderr_console.print("\n[warning]Interrupted before the pause ended.[/warning]")
        raise typer.Exit(code=130)


if __name__ == "__main__":
    app()
