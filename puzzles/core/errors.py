"""
Error types raised by the puzzle solvers and the dispatcher.

Every failure surfaces as a ``PuzzleError`` subclass so the outer layers
(CLI, HTTP routes) can translate it without knowing which day raised it.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error the solvers raise."""


class InvalidInput(PuzzleError, ValueError):
    """Text that does not match the line grammar of a puzzle."""


class InvalidState(PuzzleError, RuntimeError):
    """An internal consistency violation detected during computation."""


class InvalidDayOrPartArg(PuzzleError, LookupError):
    """The dispatcher has no solver for the requested (day, part)."""

    def __init__(self, day: int, part: int) -> None:
        super().__init__(f"Invalid Day or Part: day: `{day}`, part: `{part}`")
        self.day = day
        self.part = part


class ParseIntError(PuzzleError, ValueError):
    """A substring expected to be a non-negative integer failed to parse."""

    def __init__(self, text: str, reason: str = "invalid digit") -> None:
        super().__init__(f"cannot parse {text!r} as integer: {reason}")
        self.text = text


class InputReadError(PuzzleError):
    """The input stream could not be read to completion."""
