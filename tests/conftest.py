from __future__ import annotations

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"

A000001_TEXT = (
    "%I A000001\n"
    "%S A000001 1,1,2,5,14,42,\n"
    "%N A000001 Number of groups of order n.\n"
    "%A A000001 N. Sloane\n"
    "%O A000001 0,1\n"
    "%K A000001 nonn,nice\n"
)


@pytest.fixture
def pascal_bytes() -> bytes:
    return (DATA_DIR / "A007318.seq").read_bytes()


@pytest.fixture
def pascal_path() -> Path:
    return DATA_DIR / "A007318.seq"


@pytest.fixture
def a000001_text() -> str:
    return A000001_TEXT
