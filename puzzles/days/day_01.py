"""Day 1 — Report Repair: find the expense entries that sum to 2020."""

from __future__ import annotations

from typing import IO, Optional

from puzzles.core.reader import parse_uint, read_lines

TARGET_SUM = 2020


def get_receipts(stream: IO[bytes]) -> list[int]:
    """Parse one entry per line, sorted ascending."""
    return sorted(parse_uint(line) for line in read_lines(stream))


def search_combinations(
    receipts: list[int], start: int = 0, extra: int = 0
) -> Optional[int]:
    """
    Two-pointer search over sorted *receipts[start:]* for a pair that,
    together with *extra*, sums to TARGET_SUM.  Returns the pair's product.
    """
    end = len(receipts) - 1
    while start < end:
        total = receipts[start] + receipts[end] + extra
        if total > TARGET_SUM:
            end -= 1
        elif total < TARGET_SUM:
            start += 1
        else:
            return receipts[start] * receipts[end]
    return None


def part_1(stream: IO[bytes]) -> Optional[int]:
    return search_combinations(get_receipts(stream))


def part_2(stream: IO[bytes]) -> Optional[int]:
    receipts = get_receipts(stream)
    for i, receipt in enumerate(receipts):
        product = search_combinations(receipts, start=i + 1, extra=receipt)
        if product is not None:
            return product * receipt
    return None
