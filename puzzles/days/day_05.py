"""
Day 5 — Binary Boarding.

A boarding pass like ``FBFBBFFRLR`` is a 10-bit binary number: the first
seven letters pick the row (F=0, B=1), the last three the column (L=0,
R=1).  Seat id = row * 8 + column.
"""

from __future__ import annotations

from itertools import pairwise
from typing import IO

from puzzles.core.errors import InvalidInput, InvalidState
from puzzles.core.reader import read_lines

PASS_LENGTH = 10
ROW_LENGTH = 7

ROW_BITS = {"F": "0", "B": "1"}
SEAT_BITS = {"L": "0", "R": "1"}


def decode(instructions: str, bits: dict[str, str]) -> int:
    """Read *instructions* as a binary number, most significant letter first."""
    try:
        return int("".join(bits[ch] for ch in instructions), 2)
    except KeyError as exc:
        raise InvalidInput(
            f"invalid character encountered: {exc.args[0]!r}; expected one of {sorted(bits)}"
        ) from exc


def get_seat_id(boarding_pass: str) -> int:
    if len(boarding_pass) != PASS_LENGTH:
        raise InvalidInput(
            f"SeatAssignment must be created from a str of length {PASS_LENGTH}, "
            f"not {len(boarding_pass)}"
        )
    row = decode(boarding_pass[:ROW_LENGTH], ROW_BITS)
    column = decode(boarding_pass[ROW_LENGTH:], SEAT_BITS)
    return row * 8 + column


def get_seat_ids(stream: IO[bytes]) -> list[int]:
    return [get_seat_id(line) for line in read_lines(stream)]


def part_1(stream: IO[bytes]) -> int:
    seat_ids = get_seat_ids(stream)
    if not seat_ids:
        raise InvalidState("no valid seat id's can be derived from input")
    return max(seat_ids)


def part_2(stream: IO[bytes]) -> int:
    """Our seat is the only gap whose two neighbouring ids are taken."""
    for low, high in pairwise(sorted(get_seat_ids(stream))):
        if high - low == 2:
            return low + 1
    raise InvalidState("no free seat with occupied neighbours found")
