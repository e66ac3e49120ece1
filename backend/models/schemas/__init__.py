"""Pydantic contracts passed between analysis stages."""

from models.schemas.features import (
    BehavioralFeatures,
    FeatureAnalysis,
    LinguisticFeatures,
    MetaFeatures,
    TextFeatures,
)
from models.schemas.model_prediction import ModelPrediction
from models.schemas.ensemble_verdict import EnsembleVerdict
from models.schemas.condition import ConditionResult, ConditionSet
from models.schemas.detailed_analysis import DetailedAnalysis
from models.schemas.quick_check import QuickCheckResult

__all__ = [
    "TextFeatures",
    "MetaFeatures",
    "BehavioralFeatures",
    "LinguisticFeatures",
    "FeatureAnalysis",
    "ModelPrediction",
    "EnsembleVerdict",
    "ConditionResult",
    "ConditionSet",
    "DetailedAnalysis",
    "QuickCheckResult",
]
