"""Scaffolding for new testcontainers-go modules and examples."""

from .context import Context
from .example import Example
from .generator import ModuleGenerator, generate

__all__ = [
    "Context",
    "Example",
    "ModuleGenerator",
    "generate",
]
