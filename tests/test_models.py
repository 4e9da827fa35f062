import pytest
from pydantic import ValidationError

from cli_helptext import Argument, Command, CommandNotFoundError, Option


class TestCommandLookup:
    """Test resolving commands by path."""

    def test_empty_path_is_root(self, nested_tree):
        assert nested_tree.get([]) is nested_tree

    def test_nested_path(self, nested_tree):
        assert nested_tree.get(["remote", "add"]).description == "Add a remote"

    def test_resolve_returns_chain(self, nested_tree):
        chain = nested_tree.resolve(["remote", "add"])
        assert [c.description for c in chain] == [
            "Version control",
            "Manage remotes",
            "Add a remote",
        ]

    def test_missing_segment(self, nested_tree):
        with pytest.raises(CommandNotFoundError) as exc_info:
            nested_tree.get(["status", "deep"])
        assert exc_info.value.path == ["status", "deep"]
        assert exc_info.value.missing == "deep"


class TestValidation:
    """Test model validation."""

    def test_option_needs_a_name(self):
        with pytest.raises(ValidationError):
            Option(names=[], type="bool")

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            Argument(name="x", optional=True)

    def test_models_are_frozen(self):
        cmd = Command(description="x")
        with pytest.raises(ValidationError):
            cmd.description = "y"

    def test_defaults(self):
        arg = Argument(name="x")
        assert not arg.required and not arg.variadic and arg.description == ""
