"""Argparse help formatter for the cli-helptext command itself.

This combines:
- ArgumentDefaultsHelpFormatter → appends default values to help text.
- RawTextHelpFormatter → preserves newlines in help strings.
"""

from __future__ import annotations

import argparse


class DefaultsFormatter(
    argparse.ArgumentDefaultsHelpFormatter,
    argparse.RawTextHelpFormatter,
):
    """Argparse help formatter with a wider option column."""

    def __init__(self, *a, **k):
        k.setdefault("max_help_position", 30)
        k.setdefault("width", 100)
        super().__init__(*a, **k)
