"""
Module execution entry point.

Allows running with: python -m schnorr_cli
"""

import sys
from schnorr_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
