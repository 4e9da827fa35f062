#!/usr/bin/env python3
"""Render --help text for hierarchical command-line interfaces.

Typical use::

    from cli_helptext import Command, HelpFormatter

    formatter = HelpFormatter()
    formatter.render("git", root, ["remote", "add"], sys.stdout)
"""
from __future__ import annotations

from .config import HelpTextConfig
from .exceptions import (
    CommandNotFoundError,
    ConfigurationError,
    FileOperationError,
    HelpTextError,
    TemplateCompileError,
    TreeFormatError,
)
from .helptext import HelpFields, HelpFormatter, long_help, render
from .loader import command_from_dict, load_command_tree
from .models import Argument, Command, Option

__version__ = "0.1.0"

__all__ = [
    "Argument",
    "Command",
    "CommandNotFoundError",
    "ConfigurationError",
    "FileOperationError",
    "HelpFields",
    "HelpFormatter",
    "HelpTextConfig",
    "HelpTextError",
    "Option",
    "TemplateCompileError",
    "TreeFormatError",
    "command_from_dict",
    "load_command_tree",
    "long_help",
    "render",
]
