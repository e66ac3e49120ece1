"""Scorer 4: BERT stand-in.

Reads the raw text rather than the feature bundle and scores keyword
co-occurrence: section words a real posting carries add points, pressure
phrases subtract them.
"""

from models.schemas.features import FeatureAnalysis
from services.pipeline.base import ThresholdScorer
from services.vocabulary import (
    CONTEXTUAL_NEGATIVE,
    CONTEXTUAL_POSITIVE,
    CONTEXTUAL_SALARY_POINTS,
)


def contextual_score(text: str) -> int:
    lowered = text.lower()
    positive = sum(points for phrase, points in CONTEXTUAL_POSITIVE.items() if phrase in lowered)
    if "salary" in lowered or "$" in lowered:
        positive += CONTEXTUAL_SALARY_POINTS
    negative = sum(points for phrase, points in CONTEXTUAL_NEGATIVE.items() if phrase in lowered)
    return positive - negative


class BertScorer(ThresholdScorer):
    model_name = "m4_bert"
    display_name = "BERT Transformer"
    weight = 0.25
    features = ("Contextual semantics", "Language patterns", "Deep text understanding")
    reasoning = "Transformer architecture with bidirectional context and attention mechanisms"

    threshold = 30.0
    confidence_base = 88.0
    confidence_spread = 7.0
    confidence_floor = 80.0

    def raw_score(self, features: FeatureAnalysis, text: str) -> float:
        return float(contextual_score(text))
