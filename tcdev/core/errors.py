"""Exception types raised by tcdev operations."""
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from tcdev.services.process import ExecResult


class TcdevError(Exception):
    """Base class for every error tcdev surfaces to its callers."""


class ComposeError(TcdevError):
    """A compose operation could not be completed."""


class ComposeNotFoundError(ComposeError):
    """The compose executable is not discoverable on the PATH."""

    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(
            f"Local Docker Compose not found. Is {executable} on the PATH?"
        )


class ComposeExecutionError(ComposeError):
    """The compose process failed to start or exited abnormally.

    The full execution result is kept on ``result`` so callers can inspect
    the captured output.
    """

    def __init__(self, message: str, result: "ExecResult"):
        super().__init__(message)
        self.result = result

    @property
    def stdout(self) -> bytes:
        return self.result.stdout

    @property
    def stderr(self) -> bytes:
        return self.result.stderr


class ValidationError(TcdevError):
    """Invalid input for the module generator."""


class ConfigFileError(TcdevError):
    """A repository config file (mkdocs, dependabot) could not be processed."""


class ToolError(TcdevError):
    """An external Go tool run by modulegen failed."""

    def __init__(self, message: str, result: Optional["ExecResult"] = None):
        super().__init__(message)
        self.result = result


class LayoutError(TcdevError):
    """The library checkout is missing a directory modulegen writes into."""
