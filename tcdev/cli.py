#!/usr/bin/env python3
"""tcdev CLI - Developer tooling for testcontainers-go."""
from typing import Optional

import typer
from rich.console import Console

from tcdev.cli_compose_commands import register_compose_commands
from tcdev.cli_modulegen_commands import register_modulegen_commands
from tcdev.cli_support import set_verbose, setup_file_logging
from tcdev.core import logger as tcdev_logger
from tcdev.core.config import get_config

app = typer.Typer(
    name="tcdev",
    help="""tcdev - Developer tooling for testcontainers-go

Quick start:
  tcdev compose up docker-compose.yml --id myproject   # Start an environment
  tcdev compose down docker-compose.yml --id myproject # Tear it down
  tcdev new --name mongodb --image mongo:6 --as-module  # Scaffold a module

More commands: tcdev --help
""",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    set_verbose(verbose)
    tcdev_logger.set_verbose(verbose)
    log_file = log_file or get_config().log_file
    if log_file:
        setup_file_logging(log_file=log_file, verbose=verbose)


# Attach modular subcommands
register_compose_commands(app, console)
register_modulegen_commands(app, console)

if __name__ == "__main__":
    app()
