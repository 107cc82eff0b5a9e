"""
Deploy Selector — CLI entrypoint.

Usage:
    python -m deploysel.main --help
    python -m deploysel.main select deployed --app shop
    python -m deploysel.main --config ./deploysel.yml select envs --app shop
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from deploysel import __version__
from deploysel.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="deploysel")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to deploysel.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Deploy Selector — pick deployment targets interactively."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
        quiet_third_party=not debug,
    )


# ── Register sub-command groups from deploysel/ui/cli/ ───────────────

from deploysel.ui.cli.select import select  # noqa: E402

cli.add_command(select)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
