"""Layout of the testcontainers-go checkout that modulegen writes into."""
from pathlib import Path
from typing import List, Union

from tcdev.core.errors import LayoutError


class Context:
    """Resolves well-known paths below the library root directory."""

    def __init__(self, root_dir: Union[str, Path]):
        self.root_dir = Path(root_dir)

    def docs_dir(self) -> Path:
        return self.root_dir / "docs"

    def github_dir(self) -> Path:
        return self.root_dir / ".github"

    def github_workflows_dir(self) -> Path:
        return self.github_dir() / "workflows"

    def mkdocs_config_file(self) -> Path:
        return self.root_dir / "mkdocs.yml"

    def dependabot_config_file(self) -> Path:
        return self.github_dir() / "dependabot.yml"

    def get_examples(self) -> List[str]:
        """Directory names under examples/, sorted."""
        return self._get_modules_by_base_dir("examples")

    def get_modules(self) -> List[str]:
        """Directory names under modules/, sorted."""
        return self._get_modules_by_base_dir("modules")

    def _get_modules_by_base_dir(self, base_dir: str) -> List[str]:
        directory = self.root_dir / base_dir
        if not directory.is_dir():
            raise LayoutError(f"Directory not found: {directory}")

        return sorted(entry.name for entry in directory.iterdir() if entry.is_dir())
