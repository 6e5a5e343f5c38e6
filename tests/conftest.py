"""Shared fixtures: sample inputs live in ../samples."""

import os

import pytest

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), "..", "samples")


def sample_path(name: str) -> str:
    return os.path.join(SAMPLES_DIR, name)


@pytest.fixture
def sample():
    """Open a sample input file as a binary stream."""
    opened = []

    def _open(name: str):
        f = open(sample_path(name), "rb")
        opened.append(f)
        return f

    yield _open
    for f in opened:
        f.close()
