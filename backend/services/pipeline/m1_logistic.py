"""Scorer 1: Logistic Regression stand-in.

Linear blend of transparency and professionalism signals.
"""

from models.schemas.features import FeatureAnalysis
from services.pipeline.base import ThresholdScorer


class LogisticScorer(ThresholdScorer):
    model_name = "m1_logistic"
    display_name = "Logistic Regression"
    weight = 0.15
    features = ("Salary transparency", "Contact info", "Professional tone")
    reasoning = "Linear combination of key transparency and professionalism indicators"

    threshold = 50.0
    confidence_base = 70.0
    confidence_spread = 20.0
    confidence_floor = 65.0

    def raw_score(self, features: FeatureAnalysis, text: str) -> float:
        tf = features.text_features
        meta = features.meta_features
        ling = features.linguistic_features
        return (
            0.3 * tf.specificity_score
            + 0.2 * meta.salary_transparency
            + 0.2 * meta.contact_info_score
            + 0.3 * ling.professional_tone
        )
