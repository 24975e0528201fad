import pytest
from datetime import datetime


@pytest.fixture
def now():
    return datetime(2025, 1, 15, 12, 0, 0)


@pytest.fixture
def clock(now):
    return lambda: now
