"""Scorer 3: XGBoost stand-in."""

from models.schemas.features import FeatureAnalysis
from services.pipeline.base import ThresholdScorer


class XGBoostScorer(ThresholdScorer):
    model_name = "m3_xgboost"
    display_name = "XGBoost"
    weight = 0.25
    features = ("TF-IDF analysis", "Company legitimacy", "Timeline realism")
    reasoning = "Gradient boosting with advanced feature engineering and regularization"

    threshold = 48.0
    confidence_base = 85.0
    confidence_spread = 10.0
    confidence_floor = 75.0

    def raw_score(self, features: FeatureAnalysis, text: str) -> float:
        return 0.2 * (
            features.text_features.tfidf_score
            + features.text_features.specificity_score
            + features.meta_features.company_legitimacy
            + features.behavioral_features.timeline_realism
            + features.linguistic_features.grammar_quality
        )
