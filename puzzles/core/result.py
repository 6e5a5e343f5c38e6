"""
PuzzleResult — the single value every solver's answer is wrapped in.

Some puzzles answer with a plain count, some with a product that needs
64 bits, some with "maybe a number".  Running them all from one entry
point means harmonizing these shapes into one closed union.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Union

ResultValue = Union[int, None, tuple[int, ...]]


class ResultKind(str, Enum):
    """One member per concrete result shape a solver can produce."""

    U32_ITEM = "u32_item"
    U64_ITEM = "u64_item"
    USIZE_ITEM = "usize_item"
    U32_ITEM_OPT = "u32_item_opt"
    U32_LIST = "u32_list"
    USIZE_LIST = "usize_list"

    @property
    def is_list(self) -> bool:
        return self in (ResultKind.U32_LIST, ResultKind.USIZE_LIST)


@dataclass(frozen=True)
class PuzzleResult:
    """
    Tagged union over the result kinds.

    Attributes
    ----------
    kind : ResultKind
        Which variant is populated; decided by the solver that ran.
    value : int | None | tuple[int, ...]
        The answer.  List variants hold an immutable tuple so two results
        compare equal exactly when kind and contents match.
    """

    kind: ResultKind
    value: ResultValue

    # ── Normalizer ─────────────────────────────────────────────────

    @classmethod
    def wrap(cls, kind: ResultKind, value: Any) -> "PuzzleResult":
        """Wrap a solver's native output under *kind*."""
        if kind.is_list:
            return cls(kind, tuple(value))
        if kind is ResultKind.U32_ITEM_OPT and value is None:
            return cls(kind, None)
        return cls(kind, int(value))

    # ── Named constructors ─────────────────────────────────────────

    @classmethod
    def u32_item(cls, value: int) -> "PuzzleResult":
        return cls.wrap(ResultKind.U32_ITEM, value)

    @classmethod
    def u64_item(cls, value: int) -> "PuzzleResult":
        return cls.wrap(ResultKind.U64_ITEM, value)

    @classmethod
    def usize_item(cls, value: int) -> "PuzzleResult":
        return cls.wrap(ResultKind.USIZE_ITEM, value)

    @classmethod
    def u32_item_opt(cls, value: Optional[int]) -> "PuzzleResult":
        return cls.wrap(ResultKind.U32_ITEM_OPT, value)

    @classmethod
    def u32_list(cls, values: Iterable[int]) -> "PuzzleResult":
        return cls.wrap(ResultKind.U32_LIST, values)

    @classmethod
    def usize_list(cls, values: Iterable[int]) -> "PuzzleResult":
        return cls.wrap(ResultKind.USIZE_LIST, values)

    # ── Serialization ──────────────────────────────────────────────

    def to_payload(self) -> dict[str, Any]:
        """Return a JSON-friendly dict (tuples rendered as lists)."""
        value = list(self.value) if isinstance(self.value, tuple) else self.value
        return {"kind": self.kind.value, "value": value}

    def __str__(self) -> str:
        if self.value is None:
            return "None"
        if isinstance(self.value, tuple):
            return ", ".join(str(v) for v in self.value)
        return str(self.value)
