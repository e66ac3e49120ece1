"""Scorer 2: Random Forest stand-in.

Equal-weight vote over the structural elements of a posting.
"""

from models.schemas.features import FeatureAnalysis
from services.pipeline.base import ThresholdScorer


class RandomForestScorer(ThresholdScorer):
    model_name = "m2_random_forest"
    display_name = "Random Forest"
    weight = 0.20
    features = ("Requirement clarity", "Application process", "Text specificity")
    reasoning = "Ensemble of decision trees analyzing structural job posting elements"

    threshold = 45.0
    confidence_base = 80.0
    confidence_spread = 15.0
    confidence_floor = 70.0

    def raw_score(self, features: FeatureAnalysis, text: str) -> float:
        return 0.25 * (
            features.text_features.specificity_score
            + features.meta_features.requirement_clarity
            + features.behavioral_features.application_process_clarity
            + features.linguistic_features.clarity_index
        )
