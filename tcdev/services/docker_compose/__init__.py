"""
Docker Compose integration services.

Runs the local docker-compose binary against a set of compose files.
"""

from .local import (
    ENV_COMPOSE_FILE,
    ENV_PROJECT_NAME,
    ComposeInvocation,
    DockerCompose,
    LocalDockerCompose,
)

__all__ = [
    "ENV_COMPOSE_FILE",
    "ENV_PROJECT_NAME",
    "ComposeInvocation",
    "DockerCompose",
    "LocalDockerCompose",
]
