import os

import pytest

from cli_helptext import Argument, Command, HelpFormatter, Option
from cli_helptext.constants import ENV_PREFIX


@pytest.fixture
def tool_tree():
    # one required argument, one option, one subcommand, no overrides
    return Command(
        description="A test tool",
        help="Longer help.",
        arguments=[Argument(name="name", required=True, description="The name")],
        options=[Option(names=["f"], type="string", description="A file")],
        subcommands={"list": Command(description="List things")},
    )


@pytest.fixture
def nested_tree():
    return Command(
        description="Version control",
        options=[Option(names=["debug"], type="bool", description="Debug output")],
        subcommands={
            "remote": Command(
                description="Manage remotes",
                options=[Option(names=["v", "verbose"], type="bool", description="Be verbose")],
                subcommands={
                    "add": Command(
                        description="Add a remote",
                        arguments=[
                            Argument(name="name", required=True),
                            Argument(name="url", required=True),
                        ],
                    ),
                    "remove": Command(
                        description="Remove a remote",
                        arguments=[Argument(name="name", required=True, variadic=True)],
                    ),
                },
            ),
            "status": Command(description="Show status"),
        },
    )


@pytest.fixture
def formatter():
    return HelpFormatter()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no config files in reach and no CLI_HELPTEXT_* variables."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    return tmp_path


@pytest.fixture
def write_file(tmp_path):
    def _w(name: str, text: str) -> str:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return str(p)

    return _w
