"""Shared dependencies for API routes."""

import numpy as np

from services.pipeline.orchestrator import make_rng


def get_rng() -> np.random.Generator:
    """Fresh generator per request, seeded from settings when a seed is configured."""
    return make_rng()
