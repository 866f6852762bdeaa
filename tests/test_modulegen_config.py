"""Tests for mkdocs, dependabot and workflow file updates."""
import pytest
import yaml

from tcdev.core.errors import ConfigFileError, LayoutError
from tcdev.modulegen import Context, dependabot, mkdocs, workflow


class TestContext:
    """Test checkout layout resolution."""

    def test_paths(self, library_root):
        ctx = Context(library_root)

        assert ctx.docs_dir() == library_root / "docs"
        assert ctx.mkdocs_config_file() == library_root / "mkdocs.yml"
        assert ctx.github_workflows_dir() == library_root / ".github" / "workflows"
        assert ctx.dependabot_config_file() == library_root / ".github" / "dependabot.yml"

    def test_lists_directories_sorted(self, library_root):
        (library_root / "modules" / "README.md").write_text("not a module")
        ctx = Context(library_root)

        assert ctx.get_examples() == ["nginx"]
        assert ctx.get_modules() == ["compose", "redis"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(LayoutError, match="Directory not found"):
            Context(tmp_path).get_modules()


class TestMkdocs:
    """Test MkDocs nav updates."""

    def test_read_keeps_python_name_tags(self, library_root):
        config = mkdocs.read_config(library_root / "mkdocs.yml")

        emoji = config["markdown_extensions"][1]["pymdownx.emoji"]
        assert emoji["emoji_generator"] == "materialx.emoji.to_svg"
        assert mkdocs.latest_version(config) == "v0.20.1"

    def test_add_module_keeps_index_first_and_sorts(self, library_root):
        config_file = library_root / "mkdocs.yml"

        mkdocs.update_config(config_file, True, "modules/mongodb.md", "modules/index.md")

        config = mkdocs.read_config(config_file)
        modules = config["nav"][1]["Modules"]
        assert modules == [
            "modules/index.md",
            "modules/compose.md",
            "modules/mongodb.md",
            "modules/redis.md",
        ]
        assert config["nav"][2]["Examples"] == ["examples/index.md", "examples/nginx.md"]

    def test_add_example_is_idempotent(self, library_root):
        config_file = library_root / "mkdocs.yml"

        mkdocs.update_config(config_file, False, "examples/nginx.md", "examples/index.md")

        config = mkdocs.read_config(config_file)
        assert config["nav"][2]["Examples"] == ["examples/index.md", "examples/nginx.md"]

    def test_rewritten_file_keeps_python_name_tag(self, library_root):
        config_file = library_root / "mkdocs.yml"

        mkdocs.update_config(config_file, False, "examples/pulsar.md", "examples/index.md")

        assert "!!python/name:materialx.emoji.to_svg" in config_file.read_text()

    def test_titled_pages_are_kept(self):
        config = {"nav": [{"Modules": [
            "modules/index.md",
            {"Kafka": "modules/kafka.md"},
            "modules/redis.md",
            {"Cloud": ["modules/gcloud.md"]},
        ]}]}

        mkdocs.add_example(config, True, "modules/mongodb.md", "modules/index.md")

        assert config["nav"][0]["Modules"] == [
            "modules/index.md",
            {"Kafka": "modules/kafka.md"},
            "modules/mongodb.md",
            "modules/redis.md",
            {"Cloud": ["modules/gcloud.md"]},
        ]

    def test_titled_page_is_not_added_twice(self):
        config = {"nav": [{"Modules": ["modules/index.md", {"Kafka": "modules/kafka.md"}]}]}

        mkdocs.add_example(config, True, "modules/kafka.md", "modules/index.md")

        assert config["nav"][0]["Modules"] == ["modules/index.md", {"Kafka": "modules/kafka.md"}]

    def test_missing_nav_section(self):
        with pytest.raises(ConfigFileError, match="Modules"):
            mkdocs.add_example({"nav": []}, True, "modules/x.md", "modules/index.md")

    def test_write_failure_is_config_error(self, tmp_path):
        with pytest.raises(ConfigFileError, match="could not write MkDocs config"):
            mkdocs.write_config(tmp_path / "missing" / "mkdocs.yml", {"nav": []})

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigFileError, match="could not read MkDocs config"):
            mkdocs.read_config(tmp_path / "mkdocs.yml")


class TestDependabot:
    """Test dependabot updates."""

    def test_adds_sorted_update(self, library_root):
        config_file = library_root / ".github" / "dependabot.yml"

        dependabot.update_config(config_file, "/examples/pulsar", "gomod")

        updates = yaml.safe_load(config_file.read_text())["updates"]
        assert [u["directory"] for u in updates] == ["/", "/examples/pulsar", "/modules/redis"]
        assert updates[1] == {
            "package-ecosystem": "gomod",
            "directory": "/examples/pulsar",
            "schedule": {"interval": "monthly"},
            "open-pull-requests-limit": 3,
            "rebase-strategy": "disabled",
        }

    def test_write_failure_is_config_error(self, tmp_path):
        with pytest.raises(ConfigFileError, match="could not write dependabot config"):
            dependabot.write_config(tmp_path / "missing" / "dependabot.yml", {"version": 2})

    def test_existing_update_not_duplicated(self):
        config = {"version": 2, "updates": [dependabot.new_update("/modules/redis", "gomod")]}

        assert dependabot.add_update(config, "/modules/redis", "gomod") is False
        assert len(config["updates"]) == 1

    def test_same_directory_other_ecosystem_is_added(self):
        config = {"updates": [dependabot.new_update("/", "gomod")]}

        assert dependabot.add_update(config, "/", "github-actions") is True
        assert len(config["updates"]) == 2


class TestWorkflow:
    """Test CI workflow generation."""

    def test_project_directories(self):
        assert workflow.project_directories(["nginx"], ["compose", "redis"]) == (
            "examples/nginx, modules/compose, modules/redis"
        )

    def test_generate_writes_matrix(self, tmp_path):
        workflow_file = workflow.generate(tmp_path / "workflows", ["nginx"], ["redis"])

        content = workflow_file.read_text()
        assert workflow_file.name == "ci.yml"
        assert "module: [examples/nginx, modules/redis]" in content
        assert "${{ matrix.go-version }}" in content

        parsed = yaml.safe_load(content)
        matrix = parsed["jobs"]["test-projects"]["strategy"]["matrix"]
        assert matrix["module"] == ["examples/nginx", "modules/redis"]
