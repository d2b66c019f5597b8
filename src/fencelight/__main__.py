#!/usr/bin/env python3
#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Entry point for running fencelight as a module.

This allows the package to be executed as:
    python -m fencelight [arguments]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
