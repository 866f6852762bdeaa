"""Read and update the MkDocs site configuration."""
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from tcdev.core.errors import ConfigFileError
from tcdev.core.logger import get_logger

logger = get_logger(__name__)


class PythonName(str):
    """Value of a ``!!python/name:`` tag, kept verbatim."""


class _MkdocsLoader(yaml.SafeLoader):
    pass


class _MkdocsDumper(yaml.SafeDumper):
    pass


def _construct_python_name(loader, suffix, node):
    return PythonName(suffix)


def _represent_python_name(dumper, data):
    return dumper.represent_scalar(f"tag:yaml.org,2002:python/name:{data}", "")


# mkdocs-material configs reference emoji helpers with !!python/name tags,
# which safe_load rejects
_MkdocsLoader.add_multi_constructor("tag:yaml.org,2002:python/name:", _construct_python_name)
_MkdocsDumper.add_representer(PythonName, _represent_python_name)


def read_config(config_file: Union[str, Path]) -> Dict[str, Any]:
    """Load mkdocs.yml.

    Raises:
        ConfigFileError: If the file is missing or not valid YAML
    """
    config_file = Path(config_file)
    try:
        with open(config_file) as f:
            config = yaml.load(f, Loader=_MkdocsLoader) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigFileError(f"could not read MkDocs config {config_file}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigFileError(f"MkDocs config {config_file} is not a mapping")
    return config


def write_config(config_file: Union[str, Path], config: Dict[str, Any]) -> None:
    try:
        with open(config_file, "w") as f:
            yaml.dump(
                config,
                f,
                Dumper=_MkdocsDumper,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
    except OSError as e:
        raise ConfigFileError(f"could not write MkDocs config {config_file}: {e}") from e


def latest_version(config: Dict[str, Any]) -> str:
    """Return ``extra.latest_version`` or an empty string."""
    extra = config.get("extra") or {}
    return str(extra.get("latest_version", ""))


def _nav_section(config: Dict[str, Any], title: str) -> List[str]:
    for entry in config.get("nav") or []:
        if isinstance(entry, dict) and title in entry:
            section = entry[title]
            if section is None:
                section = entry[title] = []
            return section

    raise ConfigFileError(f"MkDocs nav has no '{title}' section")


def _page_path(entry: Any) -> str:
    """Path of a nav entry: plain pages are paths, titled pages map title -> path."""
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict) and len(entry) == 1:
        value = next(iter(entry.values()))
        if isinstance(value, str):
            return value
    return ""


def add_example(config: Dict[str, Any], is_module: bool, example_md: str, index_md: str) -> None:
    """Add ``example_md`` to the Modules or Examples nav section.

    The index page stays first, the remaining pages are sorted by path.
    Titled pages are kept with their title; entries without a page path
    (nested sections) go last in their original order.
    """
    title = "Modules" if is_module else "Examples"
    section = _nav_section(config, title)

    pages: List[Any] = []
    others: List[Any] = []
    seen = set()
    for entry in section:
        path = _page_path(entry)
        if not path:
            others.append(entry)
        elif isinstance(entry, str) and path.endswith("index.md"):
            continue
        elif path not in seen:
            seen.add(path)
            pages.append(entry)

    if example_md not in seen:
        pages.append(example_md)

    pages.sort(key=_page_path)
    section[:] = [index_md, *pages, *others]


def update_config(config_file: Union[str, Path], is_module: bool, example_md: str, index_md: str) -> None:
    """Register a new docs page in mkdocs.yml."""
    config = read_config(config_file)
    add_example(config, is_module, example_md, index_md)
    write_config(config_file, config)
    logger.debug(f"Added {example_md} to {config_file}")
