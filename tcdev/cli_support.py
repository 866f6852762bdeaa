"""Shared utilities for tcdev CLI modules."""
from __future__ import annotations

from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from tcdev.core.errors import ComposeExecutionError, TcdevError


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up file logging for CLI commands.

    Args:
        log_file: Path to log file (optional)
        verbose: Enable verbose logging
    """
    from tcdev.core.logger import setup_file_logging as _setup_file_logging
    _setup_file_logging(log_file=log_file, verbose=verbose)


def parse_env_pairs(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Turn ``KEY=VALUE`` options into a mapping.

    Raises:
        typer.BadParameter: If an entry has no ``=`` or an empty key
    """
    env: Dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected KEY=VALUE, got '{pair}'", param_hint="--env")
        env[key] = value
    return env


def handle_cli_error(
    e: TcdevError,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback and captured stderr if True
        exit_code: Exit code to use
    """
    print_error(console, escape(str(e)), prefix="Error:")
    if verbose:
        if isinstance(e, ComposeExecutionError) and e.stderr:
            console.print("[dim]Captured stderr:[/dim]")
            console.print(e.stderr.decode(errors="replace"), markup=False)
        console.print_exception()
    raise typer.Exit(exit_code)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting.

    Args:
        console: Rich console for output
        message: Success message
        prefix: Prefix symbol (default: ✓)
    """
    console.print(f"[green]{prefix}[/green] {message}")


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    """Print error message with consistent formatting.

    Args:
        console: Rich console for output
        message: Error message
        prefix: Prefix symbol (default: ✗)
    """
    console.print(f"[red]{prefix}[/red] {message}")


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    """Print info message with consistent formatting."""
    console.print(f"[cyan]{prefix}[/cyan] {message}")


_verbose = False


def set_verbose(verbose: bool) -> None:
    """Remember the global --verbose flag for command error handling."""
    global _verbose
    _verbose = verbose


def is_verbose() -> bool:
    return _verbose
