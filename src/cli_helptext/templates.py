#!/usr/bin/env python3
"""
Help templates.

The ``usage`` template renders the one-line signature of a command and is
included verbatim by the ``long_help`` template, so the same line can be
printed on its own or as the head of the full help.

Templates are compiled once by ``HelpTemplates``; a template that does not
compile raises ``TemplateCompileError`` from the constructor.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import jinja2

from .constants import LONG_HELP_TEMPLATE_NAME, USAGE_TEMPLATE_NAME
from .exceptions import TemplateCompileError
from .logging_config import get_logger

logger = get_logger(__name__)

USAGE_FORMAT = "{{ path }}{% if arg_usage %} {{ arg_usage }}{% endif %} - {{ tagline }}"

LONG_HELP_FORMAT = """
{{ indent }}{% include "usage" %}

{% if arguments %}ARGUMENTS:

{{ indent }}{{ arguments }}

{% endif %}{% if options %}OPTIONS:

{{ indent }}{{ options }}

{% endif %}{% if subcommands %}SUBCOMMANDS:

{{ indent }}{{ subcommands }}

{{ indent }}Use '{{ path }} <subcmd> --help' for more information about each command.

{% endif %}{% if description %}DESCRIPTION:

{{ indent }}{{ description }}

{% endif %}
"""


class HelpTemplates:
    """Compiled ``usage`` and ``long_help`` templates."""

    def __init__(
        self,
        usage_format: Optional[str] = None,
        long_help_format: Optional[str] = None,
    ):
        sources = {
            USAGE_TEMPLATE_NAME: usage_format or USAGE_FORMAT,
            LONG_HELP_TEMPLATE_NAME: long_help_format or LONG_HELP_FORMAT,
        }
        self.env = jinja2.Environment(
            loader=jinja2.DictLoader(sources),
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
            autoescape=False,
        )
        self.usage = self._compile(USAGE_TEMPLATE_NAME)
        self.long_help = self._compile(LONG_HELP_TEMPLATE_NAME)

    def _compile(self, name: str) -> jinja2.Template:
        try:
            template = self.env.get_template(name)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateCompileError(
                f"Template {name!r} failed to compile: {e.message}",
                template_name=name,
                line_number=e.lineno,
                cause=e,
            ) from e
        logger.debug("Compiled template %s", name)
        return template

    def render_usage(self, fields: Dict[str, Any]) -> str:
        return self.usage.render(fields)

    def render_long_help(self, fields: Dict[str, Any]) -> str:
        return self.long_help.render(fields)
