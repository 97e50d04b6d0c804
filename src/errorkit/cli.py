"""Typer CLI entrypoint for errorkit configuration checks."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from errorkit.config import (
    ErrorKitConfig,
    ErrorKitConfigError,
    apply_config,
    load_config,
)
from errorkit.identity import generate_error_id

app = typer.Typer(help="errorkit CLI", add_completion=False)
config_app = typer.Typer(help="Inspect errorkit configuration.")
app.add_typer(config_app, name="config")

_CONSOLE = Console()
_LOGGING_CONFIGURED = False
_DEFAULT_CONFIG_FILE = Path(".errorkit") / "config.yaml"

ConfigOption = Annotated[
    Path,
    typer.Option(
        "--config",
        file_okay=True,
        dir_okay=False,
        envvar="ERRORKIT_CONFIG",
        help="Path to errorkit config YAML/JSON file.",
    ),
]


def _configure_logging() -> None:
    """Configure Rich-backed logging once for CLI commands."""
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def _load_or_exit(config_file: Path) -> ErrorKitConfig:
    """Load config, rendering a failure panel and exiting on error.

    Args:
        config_file: Config file path.

    Returns:
        Loaded config.

    Raises:
        Exit: Raised with code 1 when config is invalid.
    """
    try:
        return load_config(config_file)
    except ErrorKitConfigError as exc:
        _CONSOLE.print(
            Panel(
                Text(str(exc)),
                title=f"Invalid config: {config_file}",
                border_style="red",
                expand=True,
            )
        )
        raise typer.Exit(code=1) from exc


@config_app.command("show")
def show_command(config_file: ConfigOption = _DEFAULT_CONFIG_FILE) -> None:
    """Print effective configuration.

    Args:
        config_file: Config file path; defaults apply when it is missing.
    """
    _configure_logging()
    config = _load_or_exit(config_file)
    table = Table(
        title=f"errorkit config ({config_file})",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Setting", style="magenta", no_wrap=True)
    table.add_column("Value")
    table.add_row("identity.backend", config.identity.backend.value)
    table.add_row("identity.token_bytes", str(config.identity.token_bytes))
    table.add_row("description.indent", repr(config.description.indent))
    table.add_row("description.show_identity", str(config.description.show_identity))
    _CONSOLE.print(table)


@config_app.command("sample-id")
def sample_id_command(
    config_file: ConfigOption = _DEFAULT_CONFIG_FILE,
    count: Annotated[
        int,
        typer.Option(min=1, max=100, help="Number of identities to generate."),
    ] = 1,
) -> None:
    """Generate identities with the configured identity source.

    Args:
        config_file: Config file path; defaults apply when it is missing.
        count: Number of identities to print.
    """
    _configure_logging()
    apply_config(_load_or_exit(config_file))
    for _ in range(count):
        typer.echo(str(generate_error_id()))


def main() -> None:
    """Run the errorkit CLI."""
    app()
