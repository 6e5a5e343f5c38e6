"""
Solver Registry — maps a (day, part) pair to its solver function.

The set of puzzles is closed and known up front, so this is a plain
table rather than anything discovered at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Any, Callable

from puzzles.core.errors import InvalidDayOrPartArg
from puzzles.core.result import ResultKind
from puzzles.days import day_01, day_02, day_03, day_04, day_05, day_06, day_07

SolverFn = Callable[[IO[bytes]], Any]


@dataclass(frozen=True)
class SolverEntry:
    """A solver function plus the result variant its output is wrapped in."""

    func: SolverFn
    kind: ResultKind

    @property
    def name(self) -> str:
        return f"{self.func.__module__}.{self.func.__name__}"


# ── Default registry ───────────────────────────────────────────────

_REGISTRY: dict[tuple[int, int], SolverEntry] = {
    (1, 1): SolverEntry(day_01.part_1, ResultKind.U32_ITEM_OPT),
    (1, 2): SolverEntry(day_01.part_2, ResultKind.U32_ITEM_OPT),
    (2, 1): SolverEntry(day_02.part_1, ResultKind.U32_ITEM),
    (2, 2): SolverEntry(day_02.part_2, ResultKind.U32_ITEM),
    (3, 1): SolverEntry(day_03.part_1, ResultKind.U32_ITEM),
    (3, 2): SolverEntry(day_03.part_2, ResultKind.U64_ITEM),
    (4, 1): SolverEntry(day_04.part_1, ResultKind.USIZE_ITEM),
    (4, 2): SolverEntry(day_04.part_2, ResultKind.USIZE_ITEM),
    (5, 1): SolverEntry(day_05.part_1, ResultKind.U32_ITEM),
    (5, 2): SolverEntry(day_05.part_2, ResultKind.U32_ITEM),
    (6, 1): SolverEntry(day_06.part_1, ResultKind.U32_ITEM),
    (6, 2): SolverEntry(day_06.part_2, ResultKind.U32_ITEM),
    (7, 1): SolverEntry(day_07.part_1, ResultKind.U32_ITEM),
    (7, 2): SolverEntry(day_07.part_2, ResultKind.U32_ITEM),
}


def get_solver(day: int, part: int) -> SolverEntry:
    """
    Look up the solver for *day* / *part*.

    Raises InvalidDayOrPartArg if the pair is not implemented.
    """
    try:
        return _REGISTRY[(day, part)]
    except KeyError:
        raise InvalidDayOrPartArg(day, part) from None


def list_solvers() -> list[tuple[int, int, SolverEntry]]:
    """Return every supported (day, part, entry), ordered by day then part."""
    return [(day, part, entry) for (day, part), entry in sorted(_REGISTRY.items())]
