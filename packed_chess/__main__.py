"""
Main entry point for running the board round-trip demo.

Usage:
    python -m packed_chess [BOARD_FILE ...]
"""

import sys

from packed_chess.cli import main

if __name__ == "__main__":
    sys.exit(main())
