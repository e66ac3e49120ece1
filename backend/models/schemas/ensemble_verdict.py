"""Aggregated ensemble output."""

from typing import Literal

from models.schemas.base import CamelModel

RiskLevel = Literal["Low", "Medium", "High", "Critical"]


class EnsembleVerdict(CamelModel):
    ensemble_score: float = 50.0  # 0-100 legitimacy
    is_ghost_job: bool = False
    confidence: float = 0.0
    risk_level: RiskLevel = "Low"
