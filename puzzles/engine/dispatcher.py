"""
Dispatcher — the single entry point for running a puzzle.

Looks up the solver for a (day, part) pair, feeds it the input stream
and wraps whatever it returns in a PuzzleResult.
"""

from __future__ import annotations

import logging
from typing import IO

from puzzles.core.registry import get_solver
from puzzles.core.result import PuzzleResult

logger = logging.getLogger(__name__)


def dispatch(day: int, part: int, stream: IO[bytes]) -> PuzzleResult:
    """
    Run the solver for *day* / *part* on *stream*.

    Parameters
    ----------
    day : int
        Puzzle day (1-7 are implemented).
    part : int
        Puzzle part, 1 or 2.
    stream : binary file-like
        The puzzle input; consumed entirely.

    Returns
    -------
    PuzzleResult

    Raises
    ------
    InvalidDayOrPartArg
        If no solver exists for the pair.
    PuzzleError
        Whatever the selected solver raises for malformed input.
    """
    entry = get_solver(day, part)
    logger.info("Dispatching day %d part %d to %s", day, part, entry.name)

    result = PuzzleResult.wrap(entry.kind, entry.func(stream))

    logger.info("Day %d part %d -> %s", day, part, result)
    return result
