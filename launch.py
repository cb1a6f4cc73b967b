#!/usr/bin/env python3

"""fencat launch script for running from a source checkout."""

import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from fencat.cli import run

if __name__ == '__main__':
    run()
