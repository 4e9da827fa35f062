#!/usr/bin/env python3
"""
Command tree representation for cli-helptext.

These models describe the shape of a command-line interface: each ``Command``
carries its help metadata, positional arguments, options, and named
subcommands. The renderer only reads them.

Using Pydantic for validation and loading from plain mappings.
"""
from __future__ import annotations

from typing import Dict, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import CommandNotFoundError


class TreeModel(BaseModel):
    """Base class for all command tree models."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Argument(TreeModel):
    """A positional argument."""

    name: str
    required: bool = False
    variadic: bool = False
    description: str = ""


class Option(TreeModel):
    """A flag with one or more aliases, e.g. ``names=["v", "verbose"]``."""

    names: List[str] = Field(min_length=1)
    type: str = ""
    description: str = ""


class Command(TreeModel):
    """A node in the command tree.

    ``argument_help``, ``option_help`` and ``subcommand_help`` are hand-written
    overrides; when non-empty the matching section is not generated.
    """

    description: str = ""
    help: str = ""
    argument_help: str = ""
    option_help: str = ""
    subcommand_help: str = ""
    arguments: List[Argument] = Field(default_factory=list)
    options: List[Option] = Field(default_factory=list)
    subcommands: Dict[str, Command] = Field(default_factory=dict)

    def resolve(self, path: Sequence[str]) -> List[Command]:
        """Return the chain of commands from this one down to ``path``.

        Raises:
            CommandNotFoundError: if any segment of ``path`` is not a subcommand
        """
        chain = [self]
        for segment in path:
            sub = chain[-1].subcommands.get(segment)
            if sub is None:
                raise CommandNotFoundError(path, missing=segment)
            chain.append(sub)
        return chain

    def get(self, path: Sequence[str]) -> Command:
        """Return the command at ``path``, or this command for an empty path."""
        return self.resolve(path)[-1]


Command.model_rebuild()

__all__ = ["Argument", "Option", "Command"]
