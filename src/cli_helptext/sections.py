#!/usr/bin/env python3
"""Default ARGUMENTS / OPTIONS / SUBCOMMANDS blocks.

Each generator returns one block per entry. A block is the entry's heading
line, a newline, and its description indented one unit beneath it, followed
by a trailing newline; callers join blocks with ``"\\n"`` so entries are
separated by a blank line.
"""
from __future__ import annotations

from typing import List, Sequence

from .constants import INDENT_STR, OPTION_FLAG, OPTION_NAME_SEPARATOR, OPTION_TYPE
from .models import Command, Option
from .textutil import align, indent_string
from .usage import arg_usage_text, usage_text


def _entry(heading: str, description: str) -> str:
    return indent_string(f"{heading}\n{description}", INDENT_STR) + "\n"


def argument_text(cmd: Command) -> List[str]:
    """One block per argument, in declaration order."""
    return [_entry(arg_usage_text(arg), arg.description) for arg in cmd.arguments]


def option_text(*cmds: Command) -> List[str]:
    """One block per option across ``cmds``, in order.

    Several commands may be passed so that options inherited from ancestors
    are listed in the same aligned table as the command's own.
    """
    options: List[Option] = [opt for cmd in cmds for opt in cmd.options]

    # Flag column: pass j appends each option's j-th alias, aligning after
    # every pass so each alias, and finally the type, starts at one column.
    lines = [""] * len(options)
    j = 0
    while True:
        done = True
        for i, opt in enumerate(options):
            if len(opt.names) > j:
                lines[i] += OPTION_FLAG.format(opt.names[j])
            if len(opt.names) > j + 1:
                lines[i] += OPTION_NAME_SEPARATOR
                done = False

        lines = align(lines)
        if done:
            break
        j += 1

    lines = align([f"{line} {OPTION_TYPE.format(opt.type)}" for line, opt in zip(lines, options)])

    return [_entry(line, opt.description) for line, opt in zip(lines, options)]


def subcommand_text(
    cmd: Command,
    root_name: str,
    path: Sequence[str],
    sort: bool = True,
) -> List[str]:
    """One block per subcommand: its full invocation, then its tagline.

    Subcommands are listed by name when ``sort`` is set, otherwise in the
    order they were declared.
    """
    prefix = " ".join([root_name, *path])
    names = sorted(cmd.subcommands) if sort else list(cmd.subcommands)

    blocks = []
    for name in names:
        sub = cmd.subcommands[name]
        heading = f"{prefix} {name}"
        usage = usage_text(sub)
        if usage:
            heading += f" {usage}"
        blocks.append(_entry(heading, sub.description))

    return blocks
