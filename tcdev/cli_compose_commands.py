"""Docker Compose command group."""
from __future__ import annotations

import shlex
from typing import Dict, List, Optional

import typer
from rich.console import Console

from tcdev.cli_support import handle_cli_error, is_verbose, parse_env_pairs, print_success
from tcdev.core.errors import TcdevError
from tcdev.services.docker_compose import LocalDockerCompose

ComposeApp = typer.Typer(help="Run docker-compose against a set of compose files", add_completion=False)

_console: Console = Console()


def register_compose_commands(app: typer.Typer, console: Console) -> None:
    """Attach compose commands to the primary CLI."""
    global _console
    _console = console
    app.add_typer(ComposeApp, name="compose")


def _build_compose(files: Optional[List[str]], identifier: str, env: Dict[str, str]) -> LocalDockerCompose:
    return LocalDockerCompose(files or [], identifier).with_env(env)


def _run(compose: LocalDockerCompose, action: str, down: bool = False) -> None:
    try:
        if down:
            compose.down()
        else:
            compose.invoke()
    except TcdevError as exc:
        handle_cli_error(exc, _console, verbose=is_verbose())

    print_success(_console, f"{action} finished for project {compose.identifier}")


@ComposeApp.command("up")
def compose_up(
    files: Optional[List[str]] = typer.Argument(None, help="Compose files (defaults to ./docker-compose.yml)"),
    identifier: str = typer.Option(..., "--id", "-i", help="Project name (lower-cased)"),
    env: Optional[List[str]] = typer.Option(None, "--env", "-e", help="Extra KEY=VALUE for docker-compose"),
) -> None:
    """Start the environment in the background (docker-compose up -d)."""
    compose = _build_compose(files, identifier, parse_env_pairs(env))
    compose.with_command(["up", "-d"])
    _run(compose, "up")


@ComposeApp.command("down")
def compose_down(
    files: Optional[List[str]] = typer.Argument(None, help="Compose files (defaults to ./docker-compose.yml)"),
    identifier: str = typer.Option(..., "--id", "-i", help="Project name (lower-cased)"),
    env: Optional[List[str]] = typer.Option(None, "--env", "-e", help="Extra KEY=VALUE for docker-compose"),
) -> None:
    """Stop and remove the environment (docker-compose down)."""
    compose = _build_compose(files, identifier, parse_env_pairs(env))
    _run(compose, "down", down=True)


@ComposeApp.command("invoke")
def compose_invoke(
    files: Optional[List[str]] = typer.Argument(None, help="Compose files (defaults to ./docker-compose.yml)"),
    identifier: str = typer.Option(..., "--id", "-i", help="Project name (lower-cased)"),
    cmd: str = typer.Option(..., "--cmd", "-c", help="docker-compose command, e.g. \"up -d --build\""),
    env: Optional[List[str]] = typer.Option(None, "--env", "-e", help="Extra KEY=VALUE for docker-compose"),
) -> None:
    """Run an arbitrary docker-compose command."""
    compose = _build_compose(files, identifier, parse_env_pairs(env))
    compose.with_command(shlex.split(cmd))
    _run(compose, cmd)
