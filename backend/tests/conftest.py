"""Shared test configuration and fixtures."""

import numpy as np
import pytest

from samples import GHOST_POSTING, LEGIT_POSTING
from services.pipeline.scorer_registry import clear as clear_registry


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI app through TestClient"
    )


@pytest.fixture(autouse=True)
def _reset_registry():
    """Clear scorer registry before each test."""
    clear_registry()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def legit_posting():
    return LEGIT_POSTING


@pytest.fixture
def ghost_posting():
    return GHOST_POSTING
