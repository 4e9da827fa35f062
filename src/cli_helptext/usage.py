"""Usage strings for commands and their positional arguments."""
from __future__ import annotations

from .constants import OPTIONAL_ARG, REQUIRED_ARG, VARIADIC_ARG
from .models import Argument, Command


def arg_usage_text(arg: Argument) -> str:
    """Decorate one argument: ``<name>``, ``[<name>]``, then ``...`` if variadic."""
    s = REQUIRED_ARG.format(arg.name) if arg.required else OPTIONAL_ARG.format(arg.name)

    if arg.variadic:
        s = VARIADIC_ARG.format(s)

    return s


def usage_text(cmd: Command) -> str:
    """Space-joined argument usage of ``cmd``; empty when it takes no arguments."""
    return " ".join(arg_usage_text(arg) for arg in cmd.arguments)
