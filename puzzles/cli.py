from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from puzzles.core.errors import PuzzleError
from puzzles.core.reader import open_input
from puzzles.engine.dispatcher import dispatch

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="puzzles", description="Run one day/part of the puzzle solvers")
    parser.add_argument("day", type=int, help="The puzzle day (1-25)")
    parser.add_argument("part", type=int, help="The day's question part (1-2)")
    parser.add_argument(
        "input_data_file",
        nargs="?",
        default=None,
        help="Optional path to input file. If not provided, data will be read from stdin.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    try:
        stream = open_input(args.input_data_file)
        try:
            result = dispatch(args.day, args.part, stream)
        finally:
            if args.input_data_file is not None:
                stream.close()
    except PuzzleError as exc:
        logger.error("%s", exc)
        return 1

    print(result)
    return 0
