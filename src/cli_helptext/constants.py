#!/usr/bin/env python3
"""Constants for help text rendering.

This module centralizes the decoration formats, layout units, and configuration
defaults used throughout the cli-helptext codebase.
"""
from __future__ import annotations

# ──────────────────────────────────────────────────────────────────────────────
# Layout
# ──────────────────────────────────────────────────────────────────────────────

# One indent unit, fixed at four spaces
INDENT_STR = "    "

# ──────────────────────────────────────────────────────────────────────────────
# Argument and Option Decoration
# ──────────────────────────────────────────────────────────────────────────────

REQUIRED_ARG = "<{}>"
OPTIONAL_ARG = "[<{}>]"
VARIADIC_ARG = "{}..."
OPTION_FLAG = "-{}"
OPTION_TYPE = "({})"

# Separator between option aliases in the flag column
OPTION_NAME_SEPARATOR = ", "

# ──────────────────────────────────────────────────────────────────────────────
# Template Names
# ──────────────────────────────────────────────────────────────────────────────

USAGE_TEMPLATE_NAME = "usage"
LONG_HELP_TEMPLATE_NAME = "long_help"

# ──────────────────────────────────────────────────────────────────────────────
# Configuration
# ──────────────────────────────────────────────────────────────────────────────

# Prefix for environment variable overrides
ENV_PREFIX = "CLI_HELPTEXT_"

# Config file names searched in order when no explicit path is given
CONFIG_FILE_CANDIDATES = (
    "cli-helptext.yml",
    "cli-helptext.yaml",
    ".cli-helptext.yml",
    ".cli-helptext.yaml",
    "~/.cli-helptext.yml",
    "~/.cli-helptext.yaml",
    "~/.config/cli-helptext/config.yml",
    "~/.config/cli-helptext/config.yaml",
)

# Supported command tree document extensions
YAML_EXTENSIONS = (".yaml", ".yml")
JSON_EXTENSIONS = (".json",)

# Root name used by the CLI when none is given
DEFAULT_ROOT_NAME = "cli"

# ──────────────────────────────────────────────────────────────────────────────
# Logging
# ──────────────────────────────────────────────────────────────────────────────

# Default log level
DEFAULT_LOG_LEVEL = "WARNING"

# Maximum log file size in MB
MAX_LOG_FILE_SIZE = 10

# Number of log files to keep in rotation
LOG_FILE_BACKUP_COUNT = 3

# Log format string
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

__all__ = [
    # Layout
    "INDENT_STR",
    # Argument and Option Decoration
    "REQUIRED_ARG",
    "OPTIONAL_ARG",
    "VARIADIC_ARG",
    "OPTION_FLAG",
    "OPTION_TYPE",
    "OPTION_NAME_SEPARATOR",
    # Template Names
    "USAGE_TEMPLATE_NAME",
    "LONG_HELP_TEMPLATE_NAME",
    # Configuration
    "ENV_PREFIX",
    "CONFIG_FILE_CANDIDATES",
    "YAML_EXTENSIONS",
    "JSON_EXTENSIONS",
    "DEFAULT_ROOT_NAME",
    # Logging
    "DEFAULT_LOG_LEVEL",
    "MAX_LOG_FILE_SIZE",
    "LOG_FILE_BACKUP_COUNT",
    "DEFAULT_LOG_FORMAT",
]
