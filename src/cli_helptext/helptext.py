#!/usr/bin/env python3
"""
Help text composition.

Resolves a command by path, fills in any section the command does not
override, and renders the result through the help templates.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional, Sequence, TextIO

from .config import HelpTextConfig
from .constants import INDENT_STR
from .logging_config import get_logger
from .models import Command
from .sections import argument_text, option_text, subcommand_text
from .templates import HelpTemplates
from .textutil import indent_lines, indent_string
from .usage import usage_text

logger = get_logger(__name__)


@dataclass
class HelpFields:
    """Everything the templates see for a single render."""

    indent: str = INDENT_STR
    path: str = ""
    arg_usage: str = ""
    tagline: str = ""
    arguments: str = ""
    options: str = ""
    subcommands: str = ""
    description: str = ""


class HelpFormatter:
    """Renders help text for any command in a tree.

    Construction compiles the templates, so a broken template fails here
    rather than on the first ``--help``. Instances hold no per-render state
    and can be shared.
    """

    def __init__(
        self,
        config: Optional[HelpTextConfig] = None,
        usage_template: Optional[str] = None,
        long_help_template: Optional[str] = None,
    ):
        self.config = config or HelpTextConfig()
        self.templates = HelpTemplates(usage_template, long_help_template)

    def fields(self, root_name: str, root: Command, path: Sequence[str]) -> HelpFields:
        """Collect the help fields for the command at ``path``.

        Raises:
            CommandNotFoundError: if ``path`` does not resolve
        """
        chain = root.resolve(path)
        cmd = chain[-1]

        path_str = root_name
        if path:
            path_str += " " + " ".join(path)

        fields = HelpFields(
            path=path_str,
            arg_usage=usage_text(cmd),
            tagline=cmd.description,
            arguments=cmd.argument_help,
            options=cmd.option_help,
            subcommands=cmd.subcommand_help,
            description=cmd.help,
        )

        # autogen fields that are empty
        if not cmd.argument_help:
            fields.arguments = "\n".join(argument_text(cmd))
        if not cmd.option_help:
            sources = chain if self.config.inherit_options else [cmd]
            fields.options = "\n".join(option_text(*sources))
        if not cmd.subcommand_help:
            fields.subcommands = "\n".join(
                subcommand_text(cmd, root_name, path, sort=self.config.sort_subcommands)
            )

        fields.arguments = indent_string(fields.arguments, INDENT_STR)
        fields.options = indent_string(fields.options, INDENT_STR)
        fields.subcommands = indent_string(fields.subcommands, INDENT_STR)
        fields.description = indent_string(fields.description, INDENT_STR)

        return fields

    def long_help(self, root_name: str, root: Command, path: Sequence[str] = ()) -> str:
        """Full help text for the command at ``path``.

        The text opens with a blank line before the usage line and ends with
        an extra newline after the last section.
        """
        logger.debug("Rendering long help for %s %s", root_name, list(path))
        return self.templates.render_long_help(asdict(self.fields(root_name, root, path)))

    def short_help(self, root_name: str, root: Command, path: Sequence[str] = ()) -> str:
        """Just the indented usage line for the command at ``path``."""
        logger.debug("Rendering short help for %s %s", root_name, list(path))
        usage = self.templates.render_usage(asdict(self.fields(root_name, root, path)))
        return indent_lines([usage], INDENT_STR)[0] + "\n"

    def render(
        self,
        root_name: str,
        root: Command,
        path: Sequence[str],
        out: TextIO,
        short: bool = False,
    ) -> None:
        """Write help for the command at ``path`` to ``out`` in a single write.

        The text is rendered in full before anything is written, so an
        unresolvable path leaves ``out`` untouched.
        """
        if short:
            text = self.short_help(root_name, root, path)
        else:
            text = self.long_help(root_name, root, path)
        out.write(text)


def long_help(
    root_name: str,
    root: Command,
    path: Sequence[str] = (),
    formatter: Optional[HelpFormatter] = None,
) -> str:
    """Full help text using ``formatter`` or a default one."""
    return (formatter or HelpFormatter()).long_help(root_name, root, path)


def render(
    root_name: str,
    root: Command,
    path: Sequence[str],
    out: TextIO,
    formatter: Optional[HelpFormatter] = None,
) -> None:
    """Write full help for the command at ``path`` to ``out``."""
    (formatter or HelpFormatter()).render(root_name, root, path, out)
