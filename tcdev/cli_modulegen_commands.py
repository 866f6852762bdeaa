"""Module generator command."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from tcdev.cli_support import handle_cli_error, is_verbose, print_info, print_success
from tcdev.core.config import get_config
from tcdev.core.errors import TcdevError
from tcdev.modulegen import Context, Example, ModuleGenerator
from tcdev.modulegen import mkdocs, tools

_console: Console = Console()


def register_modulegen_commands(app: typer.Typer, console: Console) -> None:
    """Attach the ``new`` command to the primary CLI."""
    global _console
    _console = console
    app.command("new")(new_module)


def new_module(
    name: str = typer.Option(..., "--name", help="Name of the example. Only alphanumerical characters are allowed."),
    image: str = typer.Option(..., "--image", help="Fully-qualified name of the Docker image to be used by the example"),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        help="Title of the example name, used to override the name in the case of mixed casing (Mongodb -> MongoDB).",
    ),
    as_module: bool = typer.Option(
        False,
        "--as-module",
        help="Generate a Go module under modules/ instead of a subdirectory of examples/.",
    ),
    root_dir: Optional[Path] = typer.Option(
        None,
        "--root-dir",
        help="testcontainers-go checkout root (defaults to the parent of the current directory)",
    ),
    go_tools: bool = typer.Option(True, "--go-tools/--no-go-tools", help="Run go mod tidy and go vet afterwards"),
) -> None:
    """Generate a new module or example from templates."""
    root = root_dir.resolve() if root_dir else get_config().resolve_root_dir()
    ctx = Context(root)

    try:
        mkdocs_config = mkdocs.read_config(ctx.mkdocs_config_file())

        example = Example(
            image=image,
            name=name,
            is_module=as_module,
            title_name=title or "",
            tc_version=mkdocs.latest_version(mkdocs_config),
        )
        if title is None:
            example.title_name = example.title()

        ModuleGenerator(ctx).generate(example)

        cmd_dir = ctx.root_dir / example.parent_dir() / example.lower()
        if go_tools:
            tools.go_mod_tidy(cmd_dir)
            tools.go_vet(cmd_dir)
    except TcdevError as exc:
        handle_cli_error(exc, _console, verbose=is_verbose())

    print_success(_console, f"Generated {example.type()} {example.title()} in {cmd_dir}")
    if go_tools:
        print_info(_console, "'go mod tidy' and 'go vet' were executed to synchronize the dependencies")
    _console.print("Commit the modified files and submit a pull request to include them into the project")
    _console.print("Thanks!")
