"""Docker Compose execution through the local docker-compose binary.

Example workflow:
    compose = LocalDockerCompose(["./testdata/docker-compose.yml"], "MyProject")
    compose.with_command(["up", "-d"]).invoke()
    ...
    compose.down()
"""
import os
import shutil
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from tcdev.core.config import get_config
from tcdev.core.errors import ComposeExecutionError, ComposeNotFoundError
from tcdev.core.logger import get_logger
from tcdev.services.process import ExecResult, execute

logger = get_logger(__name__)

ENV_PROJECT_NAME = "COMPOSE_PROJECT_NAME"
ENV_COMPOSE_FILE = "COMPOSE_FILE"

DEFAULT_COMPOSE_FILE = "docker-compose.yml"


class DockerCompose(ABC):
    """Contract for running Docker Compose."""

    @abstractmethod
    def down(self) -> ExecResult:
        ...

    @abstractmethod
    def invoke(self) -> ExecResult:
        ...

    @abstractmethod
    def with_command(self, cmd: Sequence[str]) -> "DockerCompose":
        ...

    @abstractmethod
    def with_env(self, env: Dict[str, str]) -> "DockerCompose":
        ...


@dataclass(frozen=True)
class ComposeInvocation:
    """Fully assembled docker-compose call, ready to execute."""

    executable: str
    args: List[str]
    working_dir: str
    env: Dict[str, str] = field(default_factory=dict)


def default_executable() -> str:
    """Return the compose binary name for the host platform."""
    if sys.platform == "win32":
        return "docker-compose.exe"
    return "docker-compose"


class LocalDockerCompose(DockerCompose):
    """Docker Compose execution using the local docker-compose binary.

    Compose file paths are made absolute once, at construction, and never
    re-checked afterwards.
    """

    def __init__(
        self,
        file_paths: Sequence[str],
        identifier: str,
        executable: Optional[str] = None,
    ):
        """
        Args:
            file_paths: Compose files, relative or absolute
            identifier: Project name; lower-cased before use
            executable: Compose binary, defaults to the configured or platform one
        """
        self.executable = (
            executable or get_config().compose_executable or default_executable()
        )
        self.compose_file_paths = list(file_paths)
        self._abs_compose_file_paths = [
            os.path.abspath(path) for path in self.compose_file_paths
        ]
        self.identifier = identifier.lower()
        self.cmd: List[str] = []
        self.env: Dict[str, str] = {}

    @property
    def abs_compose_file_paths(self) -> List[str]:
        return list(self._abs_compose_file_paths)

    def with_command(self, cmd: Sequence[str]) -> "LocalDockerCompose":
        self.cmd = list(cmd)
        return self

    def with_env(self, env: Dict[str, str]) -> "LocalDockerCompose":
        self.env = dict(env)
        return self

    def down(self) -> ExecResult:
        """Run ``docker-compose down``."""
        return self._execute(["down"])

    def invoke(self) -> ExecResult:
        """Run docker-compose with the configured command."""
        return self._execute(self.cmd)

    def compose_environment(self) -> Dict[str, str]:
        """Variables docker-compose needs before the user overlay is applied."""
        compose_file = "".join(
            path + os.pathsep for path in self._abs_compose_file_paths
        )
        return {
            ENV_PROJECT_NAME: self.identifier,
            ENV_COMPOSE_FILE: compose_file,
        }

    def build_invocation(self, args: Sequence[str]) -> ComposeInvocation:
        """Assemble the arguments, working dir and environment for ``args``."""
        environment = self.compose_environment()
        environment.update(self.env)

        cmds: List[str] = []
        working_dir = "."
        if self._abs_compose_file_paths:
            working_dir = str(Path(self._abs_compose_file_paths[0]).parent)
            for path in self._abs_compose_file_paths:
                cmds.extend(["-f", path])
        else:
            cmds.extend(["-f", DEFAULT_COMPOSE_FILE])
        cmds.extend(args)

        return ComposeInvocation(
            executable=self.executable,
            args=cmds,
            working_dir=working_dir,
            env=environment,
        )

    def _execute(self, args: Sequence[str]) -> ExecResult:
        if shutil.which(self.executable) is None:
            raise ComposeNotFoundError(self.executable)

        invocation = self.build_invocation(args)
        logger.info(
            f"Running {self.executable} {' '.join(args)} "
            f"(project {self.identifier})"
        )

        result = execute(
            invocation.working_dir,
            invocation.env,
            invocation.executable,
            invocation.args,
        )
        if result.error is not None:
            raise ComposeExecutionError(
                f"Local Docker compose exited abnormally whilst running "
                f"{self.executable}: [{' '.join(args)}]. {result.error}",
                result,
            )

        return result
