"""Output of the lightweight factor-table check."""

from typing import Literal

from models.schemas.base import CamelModel


class Factor(CamelModel):
    factor: str
    status: Literal["good", "warning", "bad"]
    description: str
    weight: int = 0  # points awarded toward the category maximum


class FactorCategory(CamelModel):
    category: str
    items: tuple[Factor, ...] = ()


class QuickCheckResult(CamelModel):
    is_ghost_job: bool = False
    confidence: int = 0
    score_percentage: int = 0
    trusted_company: str | None = None
    factors: tuple[FactorCategory, ...] = ()
    summary: str = ""
    recommendations: tuple[str, ...] = ()
