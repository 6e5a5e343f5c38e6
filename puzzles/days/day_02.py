"""Day 2 — Password Philosophy."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO

from puzzles.core.errors import InvalidInput
from puzzles.core.reader import U8_MAX, parse_uint, read_lines

# eg: `1-3 a: abcde`
POLICY_RE = re.compile(
    r"""
    (?P<range_low>\d+)-(?P<range_high>\d+)
    \s+
    # char
    (?P<char>[a-zA-Z]):
    \s+
    # password
    (?P<password>[a-zA-Z\d]+)
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class Policy:
    low: int
    high: int
    char: str

    def is_valid(self, password: str) -> bool:
        """Old rule: *char* occurs between *low* and *high* times, inclusive."""
        return self.low <= password.count(self.char) <= self.high

    def is_valid_by_position(self, password: str) -> bool:
        """New rule: exactly one of the 1-based positions *low*, *high* holds *char*."""
        return (self._char_at(password, self.low) == self.char) != (
            self._char_at(password, self.high) == self.char
        )

    @staticmethod
    def _char_at(password: str, position: int) -> str:
        if 1 <= position <= len(password):
            return password[position - 1]
        return ""


def parse_line(line: str) -> tuple[Policy, str]:
    caps = POLICY_RE.search(line)
    if caps is None:
        raise InvalidInput(f"Invalid password policy line: {line!r}")
    policy = Policy(
        low=parse_uint(caps["range_low"], U8_MAX),
        high=parse_uint(caps["range_high"], U8_MAX),
        char=caps["char"],
    )
    return policy, caps["password"]


def get_policies(stream: IO[bytes]) -> list[tuple[Policy, str]]:
    return [parse_line(line) for line in read_lines(stream)]


def part_1(stream: IO[bytes]) -> int:
    return sum(1 for policy, password in get_policies(stream) if policy.is_valid(password))


def part_2(stream: IO[bytes]) -> int:
    return sum(
        1
        for policy, password in get_policies(stream)
        if policy.is_valid_by_position(password)
    )
