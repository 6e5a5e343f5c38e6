"""
Input helpers shared by every day's solver.

Solvers receive a readable stream (a file opened in binary mode, stdin's
buffer, or an in-memory ``io.BytesIO``) and read it whole: puzzle inputs
are small, static files.
"""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import IO, AnyStr

from puzzles.core.errors import InputReadError, ParseIntError

logger = logging.getLogger(__name__)

U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFF_FFFF

_DIGITS = re.compile(r"\+?[0-9]+")


def open_input(path: str | Path | None) -> IO[bytes]:
    """
    Resolve an optional path into a readable byte stream.

    ``None`` selects standard input.
    """
    if path is None:
        return sys.stdin.buffer
    try:
        return open(path, "rb")
    except OSError as exc:
        raise InputReadError(f"cannot open input file {str(path)!r}: {exc}") from exc


def read_text(stream: IO[AnyStr]) -> str:
    """Read *stream* to the end and return its text with ``\\n`` line endings."""
    try:
        data = stream.read()
    except OSError as exc:
        raise InputReadError(f"failed to read input: {exc}") from exc

    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InputReadError(f"input is not valid UTF-8: {exc}") from exc

    logger.debug("Read %d characters of input", len(data))
    return data.replace("\r\n", "\n")


def read_lines(stream: IO[AnyStr]) -> list[str]:
    """Read *stream* and split it into lines without their terminators."""
    return read_text(stream).splitlines()


def split_blocks(text: str) -> list[str]:
    """Split *text* on blank lines (``\\n\\n``), the separator used by record inputs."""
    return text.split("\n\n")


def parse_uint(text: str, max_value: int = U32_MAX) -> int:
    """
    Parse a non-negative decimal integer that must fit in ``0..=max_value``.

    Raises ParseIntError for anything else (signs, blanks, overflow).
    """
    if not _DIGITS.fullmatch(text):
        raise ParseIntError(text)
    value = int(text)
    if value > max_value:
        raise ParseIntError(text, "number too large to fit in target type")
    return value
