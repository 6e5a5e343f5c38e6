"""
Puzzle Solver — HTTP front end
==============================

FastAPI entry point.
Start with:  uvicorn main:app --reload
"""

import logging

from fastapi import FastAPI

from puzzles.api.routes import router

# ── Logging ────────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

# ── App ────────────────────────────────────────────────────────────
app = FastAPI(
    title="Puzzle Solver",
    description=(
        "Day-by-day puzzle solvers.  Post a puzzle input to "
        "/api/puzzles/{day}/{part} and get the answer back."
    ),
    version="0.1.0",
)

# Mount all routes
app.include_router(router, prefix="/api")


@app.get("/")
async def root():
    return {
        "name": "Puzzle Solver",
        "version": "0.1.0",
        "status": "running",
        "docs": "/docs",
    }
