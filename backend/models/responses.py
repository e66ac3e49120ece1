from models.schemas.base import CamelModel
from models.schemas.condition import ConditionResult
from models.schemas.detailed_analysis import DetailedAnalysis
from models.schemas.ensemble_verdict import RiskLevel
from models.schemas.features import FeatureAnalysis
from models.schemas.model_prediction import ModelPrediction


class AnalysisResult(CamelModel):
    is_ghost_job: bool = False
    confidence: float = 0.0
    risk_level: RiskLevel = "Low"
    overall_score: int = 50
    model_predictions: tuple[ModelPrediction, ...] = ()
    feature_analysis: FeatureAnalysis = FeatureAnalysis()
    ensemble_score: float = 50.0
    ghost_conditions: tuple[ConditionResult, ...] = ()
    legitimate_conditions: tuple[ConditionResult, ...] = ()
    summary: str = ""
    recommendations: tuple[str, ...] = ()
    detailed_analysis: DetailedAnalysis = DetailedAnalysis()
