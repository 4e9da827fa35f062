#!/usr/bin/env python3
"""
Command tree loading.

Builds a ``Command`` tree from a YAML or JSON document. The document is a
mapping with the same keys as the ``Command`` model; ``subcommands`` maps
names to nested command mappings.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Union

import yaml
from pydantic import ValidationError

from .constants import JSON_EXTENSIONS, YAML_EXTENSIONS
from .exceptions import FileOperationError, TreeFormatError, wrap_exception
from .logging_config import get_logger
from .models import Command

logger = get_logger(__name__)


def command_from_dict(data: Mapping[str, Any], source: str = "<mapping>") -> Command:
    """Validate a mapping into a ``Command`` tree.

    Raises:
        TreeFormatError: if the mapping does not describe a valid tree
    """
    if not isinstance(data, Mapping):
        raise TreeFormatError(
            f"Command tree must be a mapping, got {type(data).__name__}",
            file_path=source,
        )
    try:
        return Command.model_validate(dict(data))
    except ValidationError as e:
        raise TreeFormatError(
            f"Invalid command tree: {e.error_count()} validation error(s)",
            file_path=source,
            cause=e,
        ) from e


def load_command_tree(path: Union[str, Path]) -> Command:
    """Load a command tree from a ``.yaml``/``.yml`` or ``.json`` file.

    Raises:
        FileOperationError: if the file cannot be read
        TreeFormatError: if the file cannot be parsed or validated
    """
    file_path = Path(path)
    suffix = file_path.suffix.lower()

    if suffix not in YAML_EXTENSIONS + JSON_EXTENSIONS:
        raise TreeFormatError(
            f"Unsupported command tree format: {suffix or '(none)'}",
            file_path=str(file_path),
        )

    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileOperationError(
            f"Cannot read command tree: {e.strerror}",
            file_path=str(file_path),
            operation="read",
            cause=e,
        ) from e
    except UnicodeDecodeError as e:
        raise TreeFormatError(
            f"Command tree is not valid UTF-8: {e.reason}",
            file_path=str(file_path),
            cause=e,
        ) from e

    try:
        if suffix in JSON_EXTENSIONS:
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise wrap_exception(
            e,
            f"Cannot parse command tree: {e}",
            TreeFormatError,
            file_path=str(file_path),
        ) from e

    logger.debug("Loaded command tree document from %s", file_path)
    return command_from_dict(data or {}, source=str(file_path))
