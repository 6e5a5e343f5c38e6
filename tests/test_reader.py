"""Tests for the input helpers."""

import io

import pytest

from puzzles.core.errors import InputReadError, ParseIntError
from puzzles.core.reader import (
    U8_MAX,
    open_input,
    parse_uint,
    read_lines,
    read_text,
    split_blocks,
)


def test_read_lines_strips_terminators():
    assert read_lines(io.BytesIO(b"a\r\nb\nc\n")) == ["a", "b", "c"]


def test_read_text_accepts_text_streams():
    assert read_text(io.StringIO("x\n")) == "x\n"


def test_read_text_rejects_invalid_utf8():
    with pytest.raises(InputReadError):
        read_text(io.BytesIO(b"\xff\xfe"))


def test_split_blocks():
    assert split_blocks("a\nb\n\nc\n") == ["a\nb", "c\n"]


def test_parse_uint():
    assert parse_uint("255", U8_MAX) == 255
    assert parse_uint("+7") == 7
    for bad in ("", "-1", "1.5", " 3", "abc"):
        with pytest.raises(ParseIntError):
            parse_uint(bad)
    with pytest.raises(ParseIntError):
        parse_uint("256", U8_MAX)


def test_open_input_missing_file(tmp_path):
    with pytest.raises(InputReadError):
        open_input(tmp_path / "missing.txt")


def test_open_input_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("42\n")
    with open_input(path) as stream:
        assert read_lines(stream) == ["42"]
