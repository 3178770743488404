"""Typer-based CLI for managing NetSuite SuiteCloud projects."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import ConfigError, ConfigNotFoundError
from .console import OutputSettings, Terminal
from .generator import generate_script
from .project import ExternalToolError, create_project
from .rendering import TemplateRenderError
from .script_types import ScriptType, available_script_types, get_script_type
from .selector import UserCancelled
from .validators import InputValidationError

app = typer.Typer(
    help="A CLI for managing NetSuite projects, including project creation and script scaffolding.",
    no_args_is_help=True,
)


def _configure_logging(level: str, log_file: Path | None) -> None:
    log_console = Console(stderr=True, highlight=False, soft_wrap=True)
    logger.remove()
    logger.add(lambda message: log_console.print(message, end="", markup=False), level=level)
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level="DEBUG")


def _terminal(ctx: typer.Context) -> Terminal:
    if not isinstance(ctx.obj, Terminal):
        ctx.obj = Terminal(OutputSettings())
    return ctx.obj


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"netsuite-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write debug logs to this file"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Manage NetSuite SuiteCloud projects."""

    settings = OutputSettings(verbose=verbose, quiet=quiet)
    _configure_logging(settings.log_level, log_file)
    ctx.obj = Terminal(settings)


@app.command()
def create(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Project name"),
    skip_setup: bool = typer.Option(False, "--skip-setup", "-s", help="Skip account setup step"),
    output: Path = typer.Option(Path("."), "--output", "-o", help="Output directory for the project"),
) -> None:
    """Initialize a new NetSuite project with the SuiteCloud CLI."""

    terminal = _terminal(ctx)
    try:
        result = create_project(name, terminal=terminal, output_dir=output, skip_setup=skip_setup)
    except (ExternalToolError, InputValidationError, TemplateRenderError, OSError) as exc:
        terminal.error(str(exc))
        raise typer.Exit(code=1)

    terminal.success("Initialization complete!")
    terminal.info(f"Project created at: {result.project_dir}")
    terminal.info(f"To get started, run: cd {result.project_dir}")


@app.command()
def add(
    ctx: typer.Context,
    script_type: ScriptType = typer.Argument(..., case_sensitive=False, help="Script category to generate"),
    name: Optional[str] = typer.Argument(None, help="Script name"),
) -> None:
    """Generate a new NetSuite script from a template."""

    terminal = _terminal(ctx)
    try:
        generate_script(script_type, name, terminal=terminal)
    except UserCancelled as exc:
        terminal.info(str(exc))
        raise typer.Exit(code=0)
    except ConfigNotFoundError as exc:
        terminal.error(f"{exc}. Not a project folder, run 'netsuite-cli create' first.")
        raise typer.Exit(code=1)
    except ConfigError as exc:
        terminal.error(f"Configuration error: {exc}")
        raise typer.Exit(code=1)
    except (InputValidationError, TemplateRenderError, OSError) as exc:
        terminal.error(str(exc))
        raise typer.Exit(code=1)


@app.command("list-types")
def list_types(ctx: typer.Context) -> None:
    """Show the script categories accepted by ``add``."""

    terminal = _terminal(ctx)
    table = Table(title="Script types")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Record type")
    table.add_column("Description")
    for script_type in available_script_types():
        definition = get_script_type(script_type)
        table.add_row(script_type.value, definition.record_type or "-", definition.description)
    terminal.console.print(table)


if __name__ == "__main__":
    app()
