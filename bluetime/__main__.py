"""
bluetime/__main__.py

Entry point for ``python -m bluetime``.
"""

import sys

from bluetime.cli import main

if __name__ == "__main__":
    sys.exit(main())
