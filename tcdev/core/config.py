"""tcdev runtime configuration and settings."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class TcdevConfig:
    """Runtime configuration for tcdev operations.

    Attributes:
        compose_executable: Compose binary to run instead of the platform default
        root_dir: Root of the library checkout that modulegen writes into
        log_file: File to mirror log output into
    """

    compose_executable: Optional[str] = None
    root_dir: Optional[str] = None
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "TcdevConfig":
        """Create config from environment variables.

        Environment variables:
            TCDEV_COMPOSE_EXECUTABLE: Compose binary name or path
            TCDEV_ROOT_DIR: Library checkout root used by modulegen
            TCDEV_LOG_FILE: Log file path

        Returns:
            TcdevConfig instance with values from environment or defaults
        """
        return cls(
            compose_executable=os.getenv("TCDEV_COMPOSE_EXECUTABLE") or None,
            root_dir=os.getenv("TCDEV_ROOT_DIR") or None,
            log_file=os.getenv("TCDEV_LOG_FILE") or None,
        )

    def resolve_root_dir(self) -> Path:
        """Return the modulegen root dir, defaulting to the parent of cwd.

        modulegen is run from a subdirectory of the library checkout, so the
        checkout root is one level up.
        """
        if self.root_dir:
            return Path(self.root_dir).resolve()
        return Path.cwd().resolve().parent


_config: Optional[TcdevConfig] = None


def get_config() -> TcdevConfig:
    """Get the global tcdev configuration.

    Returns:
        TcdevConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = TcdevConfig.from_env()
    return _config


def set_config(config: Optional[TcdevConfig]):
    """Set the global tcdev configuration.

    Args:
        config: TcdevConfig instance to use globally, or None to reload from env
    """
    global _config
    _config = config
