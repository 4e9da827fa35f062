"""Column alignment and indentation helpers."""
from __future__ import annotations

from typing import List, Sequence


def align(lines: Sequence[str]) -> List[str]:
    """Right-pad every non-empty line to the width of the longest one.

    Empty lines stay empty. Applied once per column while building a table,
    so each pass lines up whatever is appended next.
    """
    longest = max((len(line) for line in lines), default=0)
    return [line.ljust(longest) if line else line for line in lines]


def indent_string(text: str, prefix: str) -> str:
    """Insert ``prefix`` after every newline in ``text``.

    The first line is left alone; the caller (or the template) supplies its
    indent. Applying this twice double-prefixes, so each block is indented
    exactly once.
    """
    return text.replace("\n", "\n" + prefix)


def indent_lines(lines: Sequence[str], prefix: str) -> List[str]:
    """Indent every line of every entry, the first line included."""
    return [prefix + indent_string(line, prefix) for line in lines]
