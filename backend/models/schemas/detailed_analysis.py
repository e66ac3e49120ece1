"""Diagnostic breakdown reformatted from the feature bundle."""

from models.schemas.base import CamelModel


class TextAnalysis(CamelModel):
    word_count: int = 0
    sentiment_score: float = 50.0
    buzzword_density: float = 0.0
    specificity_score: float = 0.0
    readability_score: float = 0.0


class TemporalAnalysis(CamelModel):
    estimated_posting_age: str = "Unable to determine from description"
    urgency_indicators: float = 0.0  # count of urgent terms, capped at 4
    timeline_clarity: float = 50.0


class CompanyAnalysis(CamelModel):
    company_mentioned: bool = False
    contact_info_provided: bool = False
    branding_consistency: float = 50.0
    legitimacy_score: float = 50.0


class RequirementAnalysis(CamelModel):
    clarity_score: float = 0.0
    specificity_level: float = 0.0
    experience_requirements: str = "Not specified"
    skills_specificity: float = 0.0


class DetailedAnalysis(CamelModel):
    text_analysis: TextAnalysis = TextAnalysis()
    temporal_analysis: TemporalAnalysis = TemporalAnalysis()
    company_analysis: CompanyAnalysis = CompanyAnalysis()
    requirement_analysis: RequirementAnalysis = RequirementAnalysis()
