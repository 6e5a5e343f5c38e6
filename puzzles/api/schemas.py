"""
Pydantic schemas for the FastAPI endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PuzzleInput(BaseModel):
    """Raw puzzle input, exactly as it would appear in the input file."""

    input: str = Field(..., description="Puzzle input text")


class PuzzleAnswer(BaseModel):
    """A solved puzzle part."""

    day: int
    part: int
    kind: str = Field(..., description="Result variant, e.g. u32_item")
    value: int | list[int] | None


class SolverSummary(BaseModel):
    """One supported (day, part) pair."""

    day: int
    part: int
    kind: str
    solver: str
