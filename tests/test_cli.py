"""Tests for the command line entry point."""

import io
import os
import sys

from puzzles.cli import main

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), "..", "samples")


def sample_path(name: str) -> str:
    return os.path.join(SAMPLES_DIR, name)


def test_cli_solves_file(capsys):
    assert main(["7", "2", sample_path("day_07.txt")]) == 0
    assert capsys.readouterr().out.strip() == "32"


def test_cli_reads_stdin(monkeypatch, capsys):
    fake_stdin = io.TextIOWrapper(io.BytesIO(b"1721\n979\n366\n299\n675\n1456\n"))
    monkeypatch.setattr(sys, "stdin", fake_stdin)
    assert main(["1", "1"]) == 0
    assert capsys.readouterr().out.strip() == "514579"


def test_cli_unknown_day(capsys):
    assert main(["99", "1", sample_path("day_01.txt")]) == 1
    assert capsys.readouterr().out == ""


def test_cli_missing_file(tmp_path):
    assert main(["1", "1", str(tmp_path / "nope.txt")]) == 1
