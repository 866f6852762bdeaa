"""Go toolchain steps run on freshly generated code."""
from pathlib import Path
from typing import List, Union

from tcdev.core.errors import ToolError
from tcdev.core.logger import get_logger
from tcdev.services.process import execute

logger = get_logger(__name__)

GO_BINARY = "go"


def _run_go(cmd_dir: Union[str, Path], args: List[str]) -> None:
    logger.info(f"Running go {' '.join(args)} in {cmd_dir}")
    result = execute(str(cmd_dir), {}, GO_BINARY, args)
    if result.error is not None:
        raise ToolError(f"go {' '.join(args)} failed in {cmd_dir}: {result.error}", result)


def go_mod_tidy(cmd_dir: Union[str, Path]) -> None:
    """Synchronize go.mod/go.sum of the generated module."""
    _run_go(cmd_dir, ["mod", "tidy"])


def go_vet(cmd_dir: Union[str, Path]) -> None:
    _run_go(cmd_dir, ["vet", "./..."])
