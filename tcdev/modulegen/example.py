"""Naming model for a generated module or example."""
import re
from dataclasses import dataclass

from tcdev.core.errors import ValidationError

_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")


@dataclass
class Example:
    """A module or example to be generated.

    Attributes:
        image: Fully-qualified name of the Docker image
        is_module: Generate under modules/ instead of examples/
        name: Name of the example, alphanumeric
        title_name: Title of the name, e.g. "mongodb" -> "MongoDB"
        tc_version: testcontainers-go version the generated go.mod requires
    """

    image: str
    name: str
    is_module: bool = False
    title_name: str = ""
    tc_version: str = ""

    def container_name(self) -> str:
        """Name of the container struct in the generated code."""
        name = self.lower()

        if self.is_module:
            name = self.title()
        elif self.title_name:
            name = self.title_name[:1].lower() + self.title_name[1:]

        return name + "Container"

    def entrypoint(self) -> str:
        """Constructor function name, exported only for modules."""
        if self.is_module:
            return "RunContainer"
        return "runContainer"

    def lower(self) -> str:
        return self.name.lower()

    def parent_dir(self) -> str:
        if self.is_module:
            return "modules"
        return "examples"

    def title(self) -> str:
        if self.title_name:
            return self.title_name

        lower = self.lower()
        return lower[:1].upper() + lower[1:]

    def type(self) -> str:
        if self.is_module:
            return "module"
        return "example"

    def validate(self) -> None:
        """Check name and title are alphanumeric and start with a letter.

        Raises:
            ValidationError: If either value is invalid
        """
        if not _NAME_RE.fullmatch(self.name):
            raise ValidationError(
                f"invalid name: {self.name}. Only alphanumerical characters are "
                "allowed (leading character must be a letter)"
            )

        if not _NAME_RE.fullmatch(self.title_name):
            raise ValidationError(
                f"invalid title: {self.title_name}. Only alphanumerical characters are "
                "allowed (leading character must be a letter)"
            )
