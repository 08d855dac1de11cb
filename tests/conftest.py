"""Shared pytest fixtures."""

import pytest

from statuspage.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits() -> None:
    """Every test starts with an empty rate limit window."""
    limiter.reset()
