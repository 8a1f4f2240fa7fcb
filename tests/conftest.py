import os
import tempfile

# Keep test logs out of the package tree; must run before emotion_detection imports
os.environ.setdefault("ED_LOG_DIR", tempfile.mkdtemp(prefix="ed-logs-"))
os.environ.setdefault("ED_BACKEND", "keyword")

import pytest


class ConstantRandom:
    """uniform(low, high) always returns the same fraction of the range."""

    def __init__(self, fraction: float = 0.0):
        self.fraction = fraction
        self.calls = 0

    def uniform(self, low, high):
        self.calls += 1
        return low + (high - low) * self.fraction


class FailingRandom:
    def __init__(self):
        self.calls = 0

    def uniform(self, low, high):
        self.calls += 1
        raise RuntimeError("random source exploded")


@pytest.fixture
def zero_rng():
    return ConstantRandom(0.0)


@pytest.fixture
def failing_rng():
    return FailingRandom()


@pytest.fixture
def constant_rng():
    return ConstantRandom
