"""
Command line demo: parse board text and print it back.

Usage:
    packed-chess                       # round-trip the starting position
    packed-chess boards/a.txt b.txt    # round-trip each file
    packed-chess --verbose boards/a.txt
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from packed_chess.board.transcoder import STARTING_POSITION, parse, render
from packed_chess.errors import BoardCodecError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def roundtrip(text: str) -> str:
    """Parse board text and render it again."""
    return render(parse(text))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = argparse.ArgumentParser(
        description="Parse chess board text into packed bytes and print it back",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "boards",
        nargs="*",
        help="Board text file(s), 8 rows of 8 characters (default: starting position)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    sources = []
    for board_str in args.boards:
        board_path = Path(board_str)
        if not board_path.exists():
            print(f"Error: Board file not found: {board_path}")
            return 1
        try:
            text = board_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: Cannot read board file {board_path}: {e}")
            return 1
        sources.append((str(board_path), text))

    if not sources:
        sources.append(("<starting position>", STARTING_POSITION))

    for name, text in sources:
        logger.debug(f"Transcoding {name}")
        try:
            output = roundtrip(text)
        except BoardCodecError as e:
            print(f"Error: {name}: {e}")
            return 1
        print(output)

    return 0
