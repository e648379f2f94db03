"""Shared fixtures: the exception policy is process-wide, so every test
starts and ends with the defaults."""
import pytest

from numintervals import NumberInterval, reset_policy


@pytest.fixture(autouse=True)
def default_policy():
    reset_policy()
    yield
    reset_policy()


def iv(lo, hi=None):
    """Shorthand for the interval [lo, hi], or the point [lo, lo]."""
    if hi is None:
        return NumberInterval(lo)
    return NumberInterval(lo=lo, hi=hi)
