"""Generate the GitHub Actions CI workflow covering every project directory."""
from pathlib import Path
from typing import List, Optional, Union

from tcdev.core.logger import get_logger
from tcdev.modulegen.templating import create_workflow_environment

logger = get_logger(__name__)

WORKFLOW_TEMPLATE = "ci.yml.j2"
WORKFLOW_FILE = "ci.yml"


def project_directories(examples: List[str], modules: List[str]) -> str:
    """Comma separated list used as the CI matrix."""
    directories = [f"examples/{example}" for example in examples]
    directories += [f"modules/{module}" for module in modules]
    return ", ".join(directories)


def generate(
    github_workflows_dir: Union[str, Path],
    examples: List[str],
    modules: List[str],
    template_dir: Optional[Path] = None,
) -> Path:
    """Render ci.yml into ``github_workflows_dir``.

    Returns:
        Path of the written workflow file
    """
    github_workflows_dir = Path(github_workflows_dir)
    github_workflows_dir.mkdir(parents=True, exist_ok=True)

    template = create_workflow_environment(template_dir).get_template(WORKFLOW_TEMPLATE)
    content = template.render(
        project_directories=project_directories(examples, modules),
    )

    workflow_file = github_workflows_dir / WORKFLOW_FILE
    workflow_file.write_text(content)
    logger.debug(f"Wrote CI workflow for {len(examples)} examples and {len(modules)} modules")
    return workflow_file
