"""Red and green flags evaluated independently of the ensemble verdict."""

from typing import Literal

from pydantic import Field

from models.schemas.base import CamelModel


class ConditionResult(CamelModel):
    condition: str
    detected: bool = False
    confidence: float = Field(default=0.0, ge=0, le=100)
    impact: Literal["low", "medium", "high"] = "low"
    category: str = ""
    description: str = ""
    feature_contribution: float = 0.0


class ConditionSet(CamelModel):
    """Ghost-side and legitimate-side conditions, never reconciled with each other."""
    ghost_conditions: tuple[ConditionResult, ...] = ()
    legitimate_conditions: tuple[ConditionResult, ...] = ()
