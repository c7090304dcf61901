"""Pytest fixtures shared by the decoder tests."""

import logging
from pathlib import Path

import pytest

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def load_test_file():
    """Return the raw bytes of a file under tests/testdata."""

    def _load(name: str) -> bytes:
        return (TESTDATA / name).read_bytes()

    return _load


@pytest.fixture
def testdata_path():
    return TESTDATA


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by the command line front end."""
    handlers = logging.root.handlers[:]
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
