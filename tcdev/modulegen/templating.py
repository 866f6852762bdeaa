"""Jinja2 environments for the modulegen templates."""
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATE_DIR = Path(__file__).parent / "templates"


def create_environment(template_dir: Optional[Path] = None, **options) -> Environment:
    """Build the environment used to render scaffolding templates.

    Extra keyword arguments are passed to ``jinja2.Environment``, e.g. other
    variable delimiters for files that already contain ``{{ }}``.
    """
    settings = dict(
        loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    settings.update(options)
    return Environment(**settings)


def create_workflow_environment(template_dir: Optional[Path] = None) -> Environment:
    """Environment for GitHub workflow files, whose ``${{ }}`` must survive."""
    return create_environment(
        template_dir,
        variable_start_string="<<",
        variable_end_string=">>",
    )
