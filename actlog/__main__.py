"""Entry point for actlog."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from actlog import __version__
from actlog.commands.batch import batch_command
from actlog.commands.parse import parse_command
from actlog.commands.rules import rules_command
from actlog.core.config import (
    ConfigError,
    default_config_path,
    load_config,
    output_mode_from_config,
    parser_settings,
)
from actlog.core.state import CLIState

app = typer.Typer(
    add_completion=False,
    help="Turn free-text fitness notes into structured activity logs",
    invoke_without_command=True,
)


def configure_logging(console: Console, verbose: bool, quiet: bool) -> None:
    """Route the package logger through rich; DEBUG only with --verbose."""
    logger = logging.getLogger("actlog")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    if quiet:
        logger.setLevel(logging.ERROR)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler = RichHandler(console=console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


@app.callback()
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output JSON where available"),
    plain_output: bool = typer.Option(
        False,
        "--plain",
        help="Output plain text (no rich formatting/tables)",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Quiet output"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Initialize global CLI state."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if json_output and plain_output:
        typer.echo("Options --json and --plain are mutually exclusive.")
        raise typer.Exit(code=2)

    cfg_path = (config or default_config_path()).expanduser().resolve()
    try:
        cfg = load_config(cfg_path)
        settings = parser_settings(cfg)
        default_mode = output_mode_from_config(cfg)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}")
        raise typer.Exit(code=2)

    # Flags win over the configured default mode.
    if not json_output and not plain_output:
        json_output = default_mode == "json"
        plain_output = default_mode == "plain"

    console = Console(
        quiet=quiet,
        no_color=plain_output,
        log_time=False,
        log_path=False,
    )
    configure_logging(Console(stderr=True, no_color=plain_output), verbose=verbose, quiet=quiet)

    ctx.obj = CLIState(
        json_output=json_output,
        plain_output=plain_output,
        verbose=verbose,
        quiet=quiet,
        config_path=cfg_path,
        config=cfg,
        console=console,
        split_multiple=settings.split_multiple,
        min_confidence=settings.min_confidence,
        food_words=settings.food_words,
    )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


app.command("parse")(parse_command)
app.command("batch")(batch_command)
app.command("rules")(rules_command)


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
