"""Lazy registry for the six ensemble scorers.

Global singleton dict, populated on first use. Scorers are stateless, so a
single instance per name is shared by every analysis.
"""

import logging

from services.pipeline.base import BaseScorer

logger = logging.getLogger(__name__)

# Order in which predictions appear in an AnalysisResult
ENSEMBLE_ORDER: tuple[str, ...] = (
    "m1_logistic",
    "m2_random_forest",
    "m3_xgboost",
    "m4_bert",
    "m5_distilbert",
    "m6_embeddings",
)

_registry: dict[str, BaseScorer] = {}


def _create_scorer(name: str) -> BaseScorer:
    """Factory: create a scorer by name with deferred imports."""
    if name == "m1_logistic":
        from services.pipeline.m1_logistic import LogisticScorer
        return LogisticScorer()
    elif name == "m2_random_forest":
        from services.pipeline.m2_random_forest import RandomForestScorer
        return RandomForestScorer()
    elif name == "m3_xgboost":
        from services.pipeline.m3_xgboost import XGBoostScorer
        return XGBoostScorer()
    elif name == "m4_bert":
        from services.pipeline.m4_bert import BertScorer
        return BertScorer()
    elif name == "m5_distilbert":
        from services.pipeline.m5_distilbert import DistilBertScorer
        return DistilBertScorer()
    elif name == "m6_embeddings":
        from services.pipeline.m6_embeddings import EmbeddingsScorer
        return EmbeddingsScorer()
    else:
        raise ValueError(f"Unknown scorer: {name}")


def get_scorer(name: str) -> BaseScorer:
    """Get a scorer by name, creating it on first access."""
    if name not in _registry:
        _registry[name] = _create_scorer(name)
        logger.info("Registered scorer: %s", name)
    return _registry[name]


def ensemble_scorers() -> list[BaseScorer]:
    """All ensemble scorers in reporting order."""
    return [get_scorer(name) for name in ENSEMBLE_ORDER]


def clear() -> None:
    """Drop all scorer instances. Useful for testing."""
    _registry.clear()
