"""Tests for module/example naming rules."""
import pytest

from tcdev.core.errors import ValidationError
from tcdev.modulegen import Example


class TestExampleNaming:
    """Test names derived from an Example."""

    def test_example_defaults(self):
        example = Example(image="mongo:6", name="MongoDB")

        assert example.lower() == "mongodb"
        assert example.title() == "Mongodb"
        assert example.parent_dir() == "examples"
        assert example.type() == "example"
        assert example.entrypoint() == "runContainer"
        assert example.container_name() == "mongodbContainer"

    def test_example_with_title(self):
        example = Example(image="mongo:6", name="mongodb", title_name="MongoDB")

        assert example.title() == "MongoDB"
        assert example.container_name() == "mongoDBContainer"

    def test_module(self):
        example = Example(image="mongo:6", name="mongodb", is_module=True, title_name="MongoDB")

        assert example.parent_dir() == "modules"
        assert example.type() == "module"
        assert example.entrypoint() == "RunContainer"
        assert example.container_name() == "MongoDBContainer"

    def test_module_without_title(self):
        example = Example(image="redis:7", name="REDIS", is_module=True)

        assert example.title() == "Redis"
        assert example.container_name() == "RedisContainer"


class TestExampleValidation:
    """Test name and title validation."""

    @pytest.mark.parametrize("name", ["mongodb", "Mongo2", "a"])
    def test_valid(self, name):
        Example(image="img", name=name, title_name="Title").validate()

    @pytest.mark.parametrize("name", ["2mongo", "mongo-db", "mongo_db", "", "mongo db", "redis\n"])
    def test_invalid_name(self, name):
        example = Example(image="img", name=name, title_name="Title")

        with pytest.raises(ValidationError) as exc_info:
            example.validate()

        assert str(exc_info.value) == (
            f"invalid name: {name}. Only alphanumerical characters are allowed "
            "(leading character must be a letter)"
        )

    @pytest.mark.parametrize("title", ["Mongo-DB", "1Mongo", "", "Redis\n"])
    def test_invalid_title(self, title):
        example = Example(image="img", name="mongodb", title_name=title)

        with pytest.raises(ValidationError, match="invalid title"):
            example.validate()
