"""
SemNet CLI entry point.

Usage:
    python -m semnet.cli demo
    python -m semnet.cli build --concept john:Person --concept book:Object \
        --slot john:owns:book --show john
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
