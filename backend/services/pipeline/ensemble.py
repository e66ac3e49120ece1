"""Ensemble aggregation: weighted scorer outputs -> one legitimacy score.

Each prediction becomes a legitimacy on [0, 100] (its confidence when it says
"Legitimate Job", 100 - confidence otherwise). These are averaged with the
scorers' own weights, normalised by their sum.

Risk tiers are deliberately one-sided. Critical, High and Medium all sit
below 50 (ghost side) and every legitimate verdict is "Low", however close
to 50 the score is.
"""

from collections.abc import Sequence

import numpy as np

from models.schemas.ensemble_verdict import EnsembleVerdict, RiskLevel
from models.schemas.model_prediction import ModelPrediction

NEUTRAL_SCORE = 50.0


def legitimacy(prediction: ModelPrediction) -> float:
    if prediction.is_legitimate:
        return prediction.confidence
    return 100.0 - prediction.confidence


def ensemble_score(predictions: Sequence[ModelPrediction]) -> float:
    weights = np.array([p.weight for p in predictions], dtype=float)
    if weights.size == 0 or weights.sum() <= 0:
        return NEUTRAL_SCORE
    scores = np.array([legitimacy(p) for p in predictions], dtype=float)
    # 6 places: all-neutral predictions must come out at exactly 50.0
    return round(float(np.average(scores, weights=weights)), 6)


def risk_level(score: float) -> RiskLevel:
    if score < 20:
        return "Critical"
    if score < 35:
        return "High"
    if score < 50:
        return "Medium"
    return "Low"


def aggregate(predictions: Sequence[ModelPrediction]) -> EnsembleVerdict:
    score = ensemble_score(predictions)
    return EnsembleVerdict(
        ensemble_score=score,
        is_ghost_job=score < 50,
        confidence=abs(score - 50) * 2,
        risk_level=risk_level(score),
    )
