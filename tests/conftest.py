"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


# Six patients: time in years, 0 = censored
#   R:
#     tt <- c(7, 6, 6, 5, 2, 4)
#     cens <- c(0, 1, 0, 0, 1, 1)
SIX_TIME = np.array([7, 6, 6, 5, 2, 4], dtype=np.float64)
SIX_EVENT = np.array([0, 1, 0, 0, 1, 1], dtype=np.float64)

# Same patients with backward recurrence times (diagnosis to entry)
#   R:
#     backTime <- c(-2, -5, -3, -3, -2, -5)
#     tm_Enter <- -backTime
#     tm_Exit <- tt - backTime
SIX_ENTRY = np.array([2, 5, 3, 3, 2, 5], dtype=np.float64)
SIX_EXIT = SIX_TIME + SIX_ENTRY


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def six_patients():
    """Right-censored six-patient sample."""
    return SIX_TIME.copy(), SIX_EVENT.copy()


@pytest.fixture
def six_truncated():
    """Left-truncated version: (entry, exit, event)."""
    return SIX_ENTRY.copy(), SIX_EXIT.copy(), SIX_EVENT.copy()


@pytest.fixture
def exponential_sample(rng):
    """200 exponential survival times with ~40% random censoring."""
    n = 200
    t = rng.exponential(10.0, n)
    c = rng.exponential(15.0, n)
    time = np.minimum(t, c)
    event = (t <= c).astype(np.float64)
    return time, event
