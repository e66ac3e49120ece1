"""Pipeline orchestrator: wires feature extraction, scorers and reporting.

Flow:
    description
      ├─ feature_extractor.extract(text)       → FeatureAnalysis
      │       ↓
      ├─ M1..M6.predict(features, text, rng)   → ModelPrediction x6 (independent)
      │       ↓
      ├─ ensemble.aggregate(predictions)       → EnsembleVerdict
      │       ↓
      ├─ conditions.evaluate(features, text)   → ConditionSet
      └─ report.summarize / recommend / detail
                       ↓
         AnalysisResult (frozen)

Pure and synchronous. The only randomness is scorer confidence jitter (and the
optional simulated posting pattern), all drawn from one generator so a seeded
generator reproduces a result exactly.
"""

import logging

import numpy as np

from config import settings
from models.responses import AnalysisResult
from services import conditions, feature_extractor, report
from services.pipeline.ensemble import aggregate
from services.pipeline.scorer_registry import ensemble_scorers

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Generator seeded from ``seed``, else ``settings.random_seed``, else OS entropy."""
    if seed is None:
        seed = settings.random_seed
    return np.random.default_rng(seed)


def analyze(description: str, rng: np.random.Generator | None = None) -> AnalysisResult:
    """Analyze one job posting and return the full verdict."""
    if rng is None:
        rng = make_rng()

    features = feature_extractor.extract(
        description,
        rng if settings.simulate_posting_pattern else None,
    )
    predictions = tuple(scorer.predict(features, description, rng) for scorer in ensemble_scorers())
    verdict = aggregate(predictions)
    condition_set = conditions.evaluate(features, description)

    logger.info(
        "Analyzed posting: ghost=%s score=%.1f risk=%s",
        verdict.is_ghost_job, verdict.ensemble_score, verdict.risk_level,
    )
    logger.debug("Features: %s", features.model_dump())

    return AnalysisResult(
        is_ghost_job=verdict.is_ghost_job,
        confidence=verdict.confidence,
        risk_level=verdict.risk_level,
        overall_score=round(verdict.ensemble_score),
        model_predictions=predictions,
        feature_analysis=features,
        ensemble_score=verdict.ensemble_score,
        ghost_conditions=condition_set.ghost_conditions,
        legitimate_conditions=condition_set.legitimate_conditions,
        summary=report.summarize(verdict.is_ghost_job, verdict.confidence, verdict.ensemble_score),
        recommendations=report.recommend(verdict.is_ghost_job, features),
        detailed_analysis=report.detail(features, description),
    )
