#!/usr/bin/env python3
"""
Tests for loading command trees from YAML and JSON documents.
"""
import json

import pytest

from cli_helptext import (
    FileOperationError,
    TreeFormatError,
    command_from_dict,
    load_command_tree,
)

TREE_YAML = """\
description: Package manager
options:
  - names: [q, quiet]
    type: bool
    description: Less output
subcommands:
  install:
    description: Install packages
    arguments:
      - name: package
        required: true
        variadic: true
        description: Packages to install
"""


class TestLoadCommandTree:
    """Test reading tree documents from disk."""

    def test_load_yaml(self, write_file):
        root = load_command_tree(write_file("tree.yaml", TREE_YAML))

        assert root.description == "Package manager"
        assert root.options[0].names == ["q", "quiet"]
        install = root.get(["install"])
        assert install.arguments[0].required and install.arguments[0].variadic

    def test_load_json(self, write_file):
        data = {"description": "d", "subcommands": {"run": {"description": "Run it"}}}
        root = load_command_tree(write_file("tree.json", json.dumps(data)))
        assert root.get(["run"]).description == "Run it"

    def test_empty_document_is_empty_command(self, write_file):
        root = load_command_tree(write_file("tree.yml", ""))
        assert root.subcommands == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileOperationError) as exc_info:
            load_command_tree(tmp_path / "absent.yaml")
        assert exc_info.value.operation == "read"

    def test_unsupported_extension(self, write_file):
        with pytest.raises(TreeFormatError):
            load_command_tree(write_file("tree.txt", TREE_YAML))

    def test_unparsable_yaml(self, write_file):
        with pytest.raises(TreeFormatError) as exc_info:
            load_command_tree(write_file("tree.yaml", "options: [\n"))
        assert exc_info.value.cause is not None

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "tree.yaml"
        path.write_bytes(b"description: \xff\xfe bad\n")
        with pytest.raises(TreeFormatError) as exc_info:
            load_command_tree(path)
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_unparsable_json(self, write_file):
        with pytest.raises(TreeFormatError):
            load_command_tree(write_file("tree.json", "{not json"))

    def test_schema_violation(self, write_file):
        path = write_file("tree.yaml", "options:\n  - names: []\n    type: bool\n")
        with pytest.raises(TreeFormatError) as exc_info:
            load_command_tree(path)
        assert exc_info.value.file_path == path


def test_command_from_dict_rejects_non_mapping():
    with pytest.raises(TreeFormatError):
        command_from_dict(["not", "a", "mapping"])
