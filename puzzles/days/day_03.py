"""
Day 3 — Toboggan Trajectory.

The map is a grid of open squares (``.``) and trees (``#``) that repeats
endlessly to the right.  Starting at the top-left we step ``dx`` right and
``dy`` down until we fall off the bottom, counting trees hit.
"""

from __future__ import annotations

import logging
import math
from typing import IO

import numpy as np

from puzzles.core.errors import InvalidInput
from puzzles.core.reader import read_lines

logger = logging.getLogger(__name__)

TREE = "#"
OPEN = "."

# (dx, dy) slopes checked by part 2
SLOPES: tuple[tuple[int, int], ...] = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


class Area:
    """The tree map as a boolean NumPy array (True = tree)."""

    def __init__(self, trees: np.ndarray) -> None:
        self.trees = trees

    @property
    def height(self) -> int:
        return int(self.trees.shape[0])

    @property
    def width(self) -> int:
        return int(self.trees.shape[1]) if self.trees.ndim == 2 else 0

    @classmethod
    def from_lines(cls, lines: list[str]) -> "Area":
        if not lines:
            return cls(np.zeros((0, 0), dtype=bool))

        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise InvalidInput(
                "all lines in input must have the same length. "
                f"Currently measured length: {width}"
            )
        for line in lines:
            bad = set(line) - {TREE, OPEN}
            if bad:
                raise InvalidInput(f"Invalid input for Land: {sorted(bad)!r}")

        trees = np.array([[ch == TREE for ch in line] for line in lines], dtype=bool)
        logger.debug("Parsed area %dx%d", width, len(lines))
        return cls(trees)

    def count_trees(self, dx: int, dy: int) -> int:
        """Trees hit on the way down along slope (dx, dy)."""
        if dy <= 0:
            raise InvalidInput(f"Slope must move downwards, got dy={dy}")
        if self.width == 0:
            return 0
        rows = np.arange(dy, self.height, dy)
        cols = (np.arange(1, len(rows) + 1) * dx) % self.width
        return int(self.trees[rows, cols].sum())


def get_area(stream: IO[bytes]) -> Area:
    return Area.from_lines(read_lines(stream))


def part_1(stream: IO[bytes]) -> int:
    return get_area(stream).count_trees(3, 1)


def part_2(stream: IO[bytes]) -> int:
    area = get_area(stream)
    return math.prod(area.count_trees(dx, dy) for dx, dy in SLOPES)
