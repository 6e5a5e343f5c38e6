"""
FastAPI routes exposing the dispatcher.
"""

from __future__ import annotations

import io
import logging

from fastapi import APIRouter, HTTPException

from puzzles.api.schemas import PuzzleAnswer, PuzzleInput, SolverSummary
from puzzles.core.errors import InvalidDayOrPartArg, PuzzleError
from puzzles.core.registry import list_solvers
from puzzles.engine.dispatcher import dispatch

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/puzzles", response_model=list[SolverSummary])
async def list_puzzles() -> list[SolverSummary]:
    """List every supported (day, part) and the result kind it returns."""
    return [
        SolverSummary(day=day, part=part, kind=entry.kind.value, solver=entry.name)
        for day, part, entry in list_solvers()
    ]


@router.post("/puzzles/{day}/{part}", response_model=PuzzleAnswer)
async def solve_puzzle(day: int, part: int, payload: PuzzleInput) -> PuzzleAnswer:
    """Solve one puzzle part against the posted input text."""
    try:
        result = dispatch(day, part, io.BytesIO(payload.input.encode("utf-8")))
    except InvalidDayOrPartArg as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except PuzzleError as exc:
        logger.error("Day %d part %d failed: %s", day, part, exc)
        raise HTTPException(status_code=400, detail=str(exc))

    return PuzzleAnswer(day=day, part=part, **result.to_payload())
