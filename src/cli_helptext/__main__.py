#!/usr/bin/env python3
"""
Main entry point for running cli-helptext as a module.

This allows running: python -m cli_helptext
"""
from __future__ import annotations

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
