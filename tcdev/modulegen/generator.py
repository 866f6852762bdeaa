"""Generate the files of a new testcontainers-go module or example.

A generation run:
1. Renders the source, test, go.mod, Makefile and docs templates
2. Regenerates the CI workflow so the new directory is tested
3. Adds the docs page to the MkDocs navigation
4. Adds the directory to the dependabot updates
"""
from pathlib import Path
from typing import Dict, List, Optional

from tcdev.core.errors import LayoutError
from tcdev.core.logger import get_logger
from tcdev.modulegen import dependabot, mkdocs, workflow
from tcdev.modulegen.context import Context
from tcdev.modulegen.example import Example
from tcdev.modulegen.templating import create_environment

logger = get_logger(__name__)

TEMPLATES = [
    "docs_example.md",
    "example_test.go",
    "example.go",
    "go.mod",
    "Makefile",
]

DOCS_TEMPLATE = "docs_example.md"


def template_functions(example: Example) -> Dict:
    """Helper functions made available inside the templates."""
    return {
        "Entrypoint": example.entrypoint,
        "ContainerName": example.container_name,
        "ExampleType": example.type,
        "ParentDir": example.parent_dir,
        "ToLower": example.lower,
        "Title": example.title,
        "codeinclude": str,
    }


def output_path(example: Example, ctx: Context, template: str) -> Path:
    """Where the file rendered from ``template`` is written."""
    example_lower = example.lower()

    if template.lower() == DOCS_TEMPLATE:
        return ctx.docs_dir() / example.parent_dir() / f"{example_lower}.md"

    return ctx.root_dir / example.parent_dir() / example_lower / template.replace("example", example_lower)


class ModuleGenerator:
    """Renders scaffolding for an Example into a library checkout."""

    def __init__(self, ctx: Context, template_dir: Optional[Path] = None):
        self.ctx = ctx
        self.template_dir = template_dir
        self.jinja_env = create_environment(template_dir)

    def generate(self, example: Example) -> List[Path]:
        """Validate ``example`` and write every generated file.

        Returns:
            Paths of the rendered template files

        Raises:
            ValidationError: If the example name or title is invalid
            LayoutError: If the checkout lacks examples/ or modules/
            ConfigFileError: If mkdocs.yml or dependabot.yml can't be updated
        """
        example.validate()
        self.check_layout()

        logger.info(f"Generating {example.type()} {example.lower()} in {self.ctx.root_dir}")

        example_dir = self.ctx.root_dir / example.parent_dir() / example.lower()
        example_dir.mkdir(mode=0o700, parents=True, exist_ok=True)

        written = [self._render(example, template) for template in TEMPLATES]

        self.generate_workflow()
        self.generate_mkdocs(example)
        self.generate_dependabot_updates(example)

        return written

    def check_layout(self) -> None:
        """Fail before anything is written if the checkout is incomplete."""
        self.ctx.get_examples()
        self.ctx.get_modules()
        mkdocs.read_config(self.ctx.mkdocs_config_file())
        dependabot.read_config(self.ctx.dependabot_config_file())

    def _render(self, example: Example, template: str) -> Path:
        jinja_template = self.jinja_env.get_template(f"{template}.j2")

        target = output_path(example, self.ctx, template)
        content = jinja_template.render(
            **template_functions(example),
            image=example.image,
            name=example.name,
            title_name=example.title_name,
            is_module=example.is_module,
            tc_version=example.tc_version,
        )
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        except OSError as e:
            raise LayoutError(f"could not write {target}: {e}") from e
        logger.debug(f"Rendered {template} -> {target}")
        return target

    def generate_workflow(self) -> Path:
        examples = self.ctx.get_examples()
        modules = self.ctx.get_modules()
        return workflow.generate(
            self.ctx.github_workflows_dir(), examples, modules, self.template_dir
        )

    def generate_mkdocs(self, example: Example) -> None:
        example_md = f"{example.parent_dir()}/{example.lower()}.md"
        index_md = f"{example.parent_dir()}/index.md"
        mkdocs.update_config(self.ctx.mkdocs_config_file(), example.is_module, example_md, index_md)

    def generate_dependabot_updates(self, example: Example) -> None:
        directory = f"/{example.parent_dir()}/{example.lower()}"
        dependabot.update_config(self.ctx.dependabot_config_file(), directory, "gomod")


def generate(example: Example, ctx: Context) -> List[Path]:
    """Generate ``example`` into ``ctx`` with the bundled templates."""
    return ModuleGenerator(ctx).generate(example)
