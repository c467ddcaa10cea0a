"""
Module execution entry point.

Allows running with: python -m textsign
"""

import sys
from textsign.cli import main

if __name__ == "__main__":
    sys.exit(main())
