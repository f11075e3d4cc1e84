"""CLI entry point for lms-registry.

Invoked as::

    lms-registry [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m lms.cli.main

Commands
--------
load        Load a patron file and print the sorted listing
check       Report problems in a patron file without listing it
list        Print the sorted listing as text, JSON or YAML
shell       Interactive menu: load, add, remove and print patrons
version     Show version information
"""
from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lms.core.config import RegistryConfig, load_config
from lms.core.errors import ConfigError, SourceUnavailableError
from lms.registry import LoadReport, PatronRegistry

console = Console()
err_console = Console(stderr=True)


def _load_or_exit(registry: PatronRegistry, path: str) -> LoadReport:
    """Load a patron file, exiting on an unreadable source."""
    try:
        return registry.load_from_file(path)
    except SourceUnavailableError as exc:
        err_console.print(
            f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True, highlight=False
        )
        sys.exit(1)


def _print_diagnostics(report: LoadReport, path: str) -> None:
    if not report.diagnostics:
        return
    table = Table(title=f"Skipped lines: {path}", show_lines=True)
    table.add_column("Line", justify="right", min_width=6)
    table.add_column("Code", min_width=8)
    table.add_column("Reason")
    for d in report.diagnostics:
        table.add_row(str(d.line), f"[red]{d.code}[/red]", escape(d.message))
    console.print(table)


def _print_listing(registry: PatronRegistry) -> None:
    from lms.formatter import format_listing

    console.print(
        format_listing(registry.list_sorted_by_id()),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="lms-registry")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="YAML file overriding ID length, fine bounds, delimiter or encoding",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Library patron registry: load, validate, add, remove and list patrons."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = RegistryConfig()
    if config_path is not None:
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            err_console.print(
                f"[red]Config error:[/red] {escape(str(exc))}", soft_wrap=True, highlight=False
            )
            sys.exit(1)
    ctx.obj = config


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from lms import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]lms-registry[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# load command
# ---------------------------------------------------------------------------


@cli.command(name="load")
@click.argument("file", type=click.Path(exists=False))
@click.pass_obj
def load_command(config: RegistryConfig, file: str) -> None:
    """Load a patron file and print the sorted listing.

    FILE is the path to the patron text file.
    """
    registry = PatronRegistry(config)
    report = _load_or_exit(registry, file)
    _print_diagnostics(report, file)
    console.print(f"\n{report.summary}\n", markup=False, highlight=False)
    _print_listing(registry)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("file", type=click.Path(exists=False))
@click.pass_obj
def check_command(config: RegistryConfig, file: str) -> None:
    """Report every line of a patron file that would be skipped.

    FILE is the path to the patron text file.  Exits with status 1 if
    any line is skipped.
    """
    registry = PatronRegistry(config)
    report = _load_or_exit(registry, file)

    if not report.diagnostics:
        console.print(
            f"[green]OK[/green] {escape(file)}: {report.added} patron(s), no issues found",
            soft_wrap=True,
            highlight=False,
        )
        sys.exit(0)

    _print_diagnostics(report, file)
    console.print(
        f"\n[bold]Summary:[/bold] {report.added} valid, {report.skipped} skipped",
        highlight=False,
    )
    sys.exit(1)


# ---------------------------------------------------------------------------
# list command
# ---------------------------------------------------------------------------


@cli.command(name="list")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    help="Listing output format",
)
@click.pass_obj
def list_command(config: RegistryConfig, file: str, output_format: str) -> None:
    """Print the patrons of a file sorted by ID.

    FILE is the path to the patron text file.  Skipped lines are
    reported on stderr only.
    """
    from lms.serializer import PatronSerializer

    registry = PatronRegistry(config)
    report = _load_or_exit(registry, file)
    for d in report.diagnostics:
        err_console.print(f"[yellow]{escape(str(d))}[/yellow]", soft_wrap=True)

    output_format = output_format.lower()
    if output_format == "text":
        _print_listing(registry)
        return

    serializer = PatronSerializer()
    patrons = registry.list_sorted_by_id()
    if output_format == "json":
        text = serializer.to_json(patrons, indent=2)
    else:
        text = serializer.to_yaml(patrons)

    click.echo(text)


# ---------------------------------------------------------------------------
# shell command
# ---------------------------------------------------------------------------


@cli.command(name="shell")
@click.option(
    "--file",
    "file",
    type=click.Path(exists=False),
    default=None,
    help="Patron file to load at startup instead of prompting",
)
@click.pass_obj
def shell_command(config: RegistryConfig, file: str | None) -> None:
    """Run the interactive patron menu."""
    from lms.cli.shell import PatronShell

    PatronShell(PatronRegistry(config), console).run(initial_path=file)


if __name__ == "__main__":
    cli()
