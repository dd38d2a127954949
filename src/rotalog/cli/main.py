"""CLI entry point for rotalog.

Invoked as::

    rotalog [OPTIONS] COMMAND [ARGS]...

or during development::

    python -m rotalog.cli.main

Commands
--------
- archives  List rotated backups and their retention status
- prune     Delete backups older than the retention window
- rotate    Force rotation of the active log file
- version   Show version information
"""
from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from rotalog.config_loader import ConfigLoader, WriterConfig

console = Console()
err_console = Console(stderr=True)

_DEFAULT_CONFIG = Path("rotalog.yaml")


def _writer_options(func: click.decorators.FC) -> click.decorators.FC:
    """Attach the options every command uses to locate the log stream."""
    func = click.option(
        "--filename",
        "-f",
        default=None,
        help="Active log file name (overrides the config).",
    )(func)
    func = click.option(
        "--directory",
        "-d",
        default=None,
        type=click.Path(file_okay=False),
        help="Log directory (overrides the config).",
    )(func)
    func = click.option(
        "--config",
        "-c",
        "config_path",
        default=str(_DEFAULT_CONFIG),
        show_default=True,
        type=click.Path(),
        help="Path to rotalog.yaml.",
    )(func)
    return func


def _resolve_config(config_path: str, directory: str | None, filename: str | None) -> WriterConfig:
    loader = ConfigLoader()
    cfg_path = Path(config_path)
    try:
        config = loader.load(cfg_path) if cfg_path.exists() else loader.defaults()
    except ValueError as exc:
        err_console.print(f"[red]Invalid config:[/red] {exc}")
        sys.exit(1)

    overrides: dict[str, object] = {}
    if directory is not None:
        overrides["directory"] = Path(directory)
    if filename is not None:
        overrides["filename"] = filename
    if not overrides:
        return config.writer
    try:
        return WriterConfig.model_validate({**config.writer.model_dump(), **overrides})
    except ValueError as exc:
        err_console.print(f"[red]Invalid option:[/red] {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# Root command group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="rotalog")
def cli() -> None:
    """Inspect and maintain daily rotated log files."""


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from rotalog import __version__

    console.print(
        Panel(
            f"[bold]rotalog[/bold]  v[cyan]{__version__}[/cyan]\n"
            "Daily rotating log file writer with age-based retention.",
            title="Version",
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# archives
# ---------------------------------------------------------------------------


@cli.command(name="archives")
@_writer_options
def archives_command(config_path: str, directory: str | None, filename: str | None) -> None:
    """List rotated backups of the active log file."""
    from rotalog.retention import is_expired, scan_rotated

    config = _resolve_config(config_path, directory, filename)
    if not config.directory.is_dir():
        console.print(f"[yellow]Log directory not found:[/yellow] {config.directory}")
        return

    entries = scan_rotated(config.directory, config.filename)
    if not entries:
        console.print("[yellow]No rotated logs found.[/yellow]")
        return

    now = datetime.now()
    table = Table(title=f"Rotated logs of {config.filename}", box=box.SIMPLE)
    table.add_column("File", style="cyan")
    table.add_column("Rotated at", style="dim", no_wrap=True)
    table.add_column("Size", justify="right")
    table.add_column("Status")

    expired_count = 0
    for entry in entries:
        try:
            size = f"{entry.path.stat().st_size:,}"
        except OSError:
            size = "?"
        if is_expired(entry, now, config.max_age_days):
            expired_count += 1
            status = "[red]expired[/red]"
        else:
            status = "[green]kept[/green]"
        table.add_row(entry.name, entry.timestamp.strftime("%Y-%m-%d %H:%M:%S"), size, status)

    console.print(table)
    console.print(f"  Total backups: [cyan]{len(entries)}[/cyan]  Expired: [cyan]{expired_count}[/cyan]")


# ---------------------------------------------------------------------------
# prune
# ---------------------------------------------------------------------------


@cli.command(name="prune")
@_writer_options
@click.option(
    "--max-age",
    "max_age",
    default=None,
    type=click.IntRange(min=0),
    help="Retention window in days (overrides the config).",
)
def prune_command(
    config_path: str,
    directory: str | None,
    filename: str | None,
    max_age: int | None,
) -> None:
    """Delete rotated backups older than the retention window."""
    from rotalog.retention import purge_expired

    config = _resolve_config(config_path, directory, filename)
    effective_max_age = config.max_age_days if max_age is None else max_age
    if effective_max_age <= 0:
        err_console.print("[yellow]Retention is disabled (max age 0); nothing to prune.[/yellow]")
        sys.exit(2)

    if not config.directory.is_dir():
        console.print(f"[yellow]Log directory not found:[/yellow] {config.directory}")
        return

    removed = purge_expired(config.directory, config.filename, effective_max_age, datetime.now())
    for path in removed:
        console.print(f"  [red]removed[/red] {path.name}")
    console.print(
        f"[green]Pruned[/green] {len(removed)} backup(s) older than "
        f"[cyan]{effective_max_age}[/cyan] day(s) from [bold]{config.directory}[/bold]"
    )


# ---------------------------------------------------------------------------
# rotate
# ---------------------------------------------------------------------------


@cli.command(name="rotate")
@_writer_options
def rotate_command(config_path: str, directory: str | None, filename: str | None) -> None:
    """Force rotation of the active log file."""
    from rotalog.errors import RotalogError
    from rotalog.writer import RotatingWriter

    config = _resolve_config(config_path, directory, filename)
    writer = RotatingWriter.from_config(config)
    before = {entry.path for entry in writer.rotated_files()} if config.directory.is_dir() else set()

    try:
        with writer:
            writer.rotate()
    except RotalogError as exc:
        err_console.print(f"[red]Rotation failed:[/red] {exc}")
        sys.exit(1)

    created = [entry for entry in writer.rotated_files() if entry.path not in before]
    if created:
        console.print(f"[green]Rotated[/green] {writer.active_path} -> [bold]{created[-1].name}[/bold]")
    else:
        console.print(f"[green]Opened[/green] fresh log file [bold]{writer.active_path}[/bold]")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    cli()
