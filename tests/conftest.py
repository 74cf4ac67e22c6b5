"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime

import pytest


@pytest.fixture
def fixed_clock():
    """
    Zero-argument clock frozen at 15:35 local time.
    """
    moment = datetime(2024, 3, 1, 15, 35, 42)
    return lambda: moment


@pytest.fixture
def canonical_pairs():
    """Every (hour, minute) pair of a 24 hour day."""
    return [(h, m) for h in range(24) for m in range(60)]
