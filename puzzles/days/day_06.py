"""Day 6 — Custom Customs."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import IO

from puzzles.core.errors import InvalidInput
from puzzles.core.reader import read_text, split_blocks


@dataclass(frozen=True)
class Group:
    any_yes_answers: frozenset[str]
    all_yes_answers: frozenset[str]

    @classmethod
    def parse(cls, text: str) -> "Group":
        people = [frozenset(line) for line in text.splitlines()]
        if not people:
            raise InvalidInput(f"Group must have at least one answer: {text!r}")
        return cls(
            any_yes_answers=reduce(frozenset.union, people),
            all_yes_answers=reduce(frozenset.intersection, people),
        )


def get_groups(stream: IO[bytes]) -> list[Group]:
    return [Group.parse(block) for block in split_blocks(read_text(stream))]


def part_1(stream: IO[bytes]) -> int:
    return sum(len(group.any_yes_answers) for group in get_groups(stream))


def part_2(stream: IO[bytes]) -> int:
    return sum(len(group.all_yes_answers) for group in get_groups(stream))
