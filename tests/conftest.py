"""Shared test fixtures for tcdev tests."""
import textwrap
from pathlib import Path

import pytest

from tcdev.core.config import set_config

TESTDATA_DIR = Path(__file__).parent / "testdata"


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from the default configuration."""
    for var in ("TCDEV_COMPOSE_EXECUTABLE", "TCDEV_ROOT_DIR", "TCDEV_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def testdata_dir():
    return TESTDATA_DIR


MKDOCS_YML = textwrap.dedent("""\
    site_name: Testcontainers for Go
    markdown_extensions:
      - admonition
      - pymdownx.emoji:
          emoji_generator: !!python/name:materialx.emoji.to_svg
    nav:
      - Home: index.md
      - Modules:
          - modules/index.md
          - modules/redis.md
          - modules/compose.md
      - Examples:
          - examples/index.md
          - examples/nginx.md
    extra:
      latest_version: v0.20.1
""")

DEPENDABOT_YML = textwrap.dedent("""\
    version: 2
    updates:
      - package-ecosystem: github-actions
        directory: /
        schedule:
          interval: monthly
      - package-ecosystem: gomod
        directory: /modules/redis
        schedule:
          interval: monthly
        open-pull-requests-limit: 3
        rebase-strategy: disabled
""")


@pytest.fixture
def library_root(tmp_path):
    """Minimal testcontainers-go checkout for modulegen."""
    root = tmp_path / "testcontainers-go"
    (root / "examples" / "nginx").mkdir(parents=True)
    (root / "modules" / "redis").mkdir(parents=True)
    (root / "modules" / "compose").mkdir(parents=True)
    (root / "docs" / "modules").mkdir(parents=True)
    (root / "docs" / "examples").mkdir(parents=True)
    (root / ".github" / "workflows").mkdir(parents=True)
    (root / "modulegen").mkdir()

    (root / "mkdocs.yml").write_text(MKDOCS_YML)
    (root / ".github" / "dependabot.yml").write_text(DEPENDABOT_YML)
    return root
