"""Scorer 5: DistilBERT stand-in.

Always adopts the BERT scorer's label and only perturbs its confidence, so the
two can never disagree on the same posting.
"""

import numpy as np

from models.schemas.features import FeatureAnalysis
from models.schemas.model_prediction import ModelPrediction
from services.pipeline.base import NO_SIGNAL_CONFIDENCE, BaseScorer, has_signal
from services.pipeline.m4_bert import BertScorer


class DistilBertScorer(BaseScorer):
    model_name = "m5_distilbert"
    display_name = "DistilBERT"
    weight = 0.10
    features = ("Compressed semantics", "Efficient attention", "Knowledge distillation")
    reasoning = "Distilled transformer model balancing accuracy with computational efficiency"

    def __init__(self) -> None:
        self._bert = BertScorer()

    def predict(
        self,
        features: FeatureAnalysis,
        text: str,
        rng: np.random.Generator,
    ) -> ModelPrediction:
        bert = self._bert.predict(features, text, rng)
        if not has_signal(text):
            return self._prediction(bert.is_legitimate, NO_SIGNAL_CONFIDENCE)

        confidence = bert.confidence - 5 + float(rng.uniform()) * 10
        return self._prediction(bert.is_legitimate, max(75.0, min(95.0, confidence)))
