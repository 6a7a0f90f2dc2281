#!/usr/bin/env python3
"""Run the generator from a source checkout: ``python main.py taillard 20 5 873654221``."""

import sys

from fspgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
