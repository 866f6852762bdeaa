"""Update the dependabot configuration with new Go module directories."""
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from tcdev.core.errors import ConfigFileError
from tcdev.core.logger import get_logger

logger = get_logger(__name__)

UPDATE_INTERVAL = "monthly"
OPEN_PULL_REQUESTS_LIMIT = 3
REBASE_STRATEGY = "disabled"


def read_config(config_file: Union[str, Path]) -> Dict[str, Any]:
    config_file = Path(config_file)
    try:
        with open(config_file) as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigFileError(f"could not read dependabot config {config_file}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigFileError(f"dependabot config {config_file} is not a mapping")
    return config


def write_config(config_file: Union[str, Path], config: Dict[str, Any]) -> None:
    try:
        with open(config_file, "w") as f:
            yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigFileError(f"could not write dependabot config {config_file}: {e}") from e


def new_update(directory: str, package_ecosystem: str) -> Dict[str, Any]:
    return {
        "package-ecosystem": package_ecosystem,
        "directory": directory,
        "schedule": {"interval": UPDATE_INTERVAL},
        "open-pull-requests-limit": OPEN_PULL_REQUESTS_LIMIT,
        "rebase-strategy": REBASE_STRATEGY,
    }


def add_update(config: Dict[str, Any], directory: str, package_ecosystem: str) -> bool:
    """Append an update entry unless one already exists.

    Updates are kept sorted by directory.

    Returns:
        True if the entry was added
    """
    updates = config.setdefault("updates", [])
    for update in updates:
        if (
            update.get("directory") == directory
            and update.get("package-ecosystem") == package_ecosystem
        ):
            return False

    updates.append(new_update(directory, package_ecosystem))
    updates.sort(key=lambda update: update.get("directory", ""))
    return True


def update_config(config_file: Union[str, Path], directory: str, package_ecosystem: str) -> None:
    config = read_config(config_file)
    if add_update(config, directory, package_ecosystem):
        write_config(config_file, config)
        logger.debug(f"Added {package_ecosystem} updates for {directory} to {config_file}")
    else:
        logger.debug(f"{directory} already tracked in {config_file}")
