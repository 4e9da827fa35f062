#!/usr/bin/env python3
"""
Command-line front-end for cli-helptext.

Loads a command tree document and prints help for one of its commands:

    cli-helptext tree.yaml remote add --root-name git
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import HelpTextConfig
from .constants import DEFAULT_ROOT_NAME
from .exceptions import HelpTextError
from .helpfmt import DefaultsFormatter
from .helptext import HelpFormatter
from .loader import load_command_tree
from .logging_config import HelpTextLogger, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cli-helptext",
        description="Render --help text for a command described in a YAML or JSON tree",
        formatter_class=DefaultsFormatter,
    )
    parser.add_argument("tree", help="Command tree document (.yaml, .yml or .json)")
    parser.add_argument(
        "path",
        nargs="*",
        help="Subcommand path to render help for (empty for the root command)",
    )
    parser.add_argument(
        "--root-name",
        default=DEFAULT_ROOT_NAME,
        help="Program name shown as the first word of every usage line",
    )
    parser.add_argument(
        "--short",
        action="store_true",
        help="Print only the usage line",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config file (searched in standard locations when omitted)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns a process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = HelpTextConfig.load(args.config)
        HelpTextLogger.set_level(args.log_level or config.log_level)

        formatter = HelpFormatter(config)
        root = load_command_tree(args.tree)
        formatter.render(args.root_name, root, args.path, sys.stdout, short=args.short)
    except HelpTextError as e:
        logger.debug("Help rendering failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0
