"""Hypothesis profiles and pytest fixtures for paycycle."""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from paycycle.logging_config import reset_logging

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


@pytest.fixture(autouse=True)
def clean_logging():
    """Every test starts and ends with the paycycle loggers unconfigured."""
    reset_logging()
    yield
    reset_logging()
