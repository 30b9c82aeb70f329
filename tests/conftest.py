from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


class CountingInverter:
    """Test double for the inversion primitive that records its calls."""

    def __init__(self, error: Exception | None = None):
        self.calls = []
        self.error = error

    def __call__(self, matrix, **kwargs):
        self.calls.append((matrix, kwargs))
        if self.error is not None:
            raise self.error
        return np.linalg.inv(np.asarray(matrix, dtype=float))

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counting_inverter():
    return CountingInverter()


@pytest.fixture
def notices():
    messages = []
    return messages, messages.append


@pytest.fixture
def diagonal_matrix():
    return np.array([[2.0, 0.0], [0.0, 2.0]])


@pytest.fixture
def singular_matrix():
    return np.array([[1.0, 2.0], [2.0, 4.0]])
