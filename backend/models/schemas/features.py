"""Feature bundle: four groups of numeric signals extracted from a posting."""

from models.schemas.base import CamelModel


class TextFeatures(CamelModel):
    """Lexical signals. All fields are percentages except technical_terms_count."""
    tfidf_score: float = 0.0
    vagueness_density: float = 0.0
    buzzword_ratio: float = 0.0
    specificity_score: float = 0.0
    sentiment_polarity: float = 50.0
    readability_index: float = 0.0
    keyword_diversity: float = 0.0
    technical_terms_count: int = 0  # raw hit count, unbounded


class MetaFeatures(CamelModel):
    description_length: float = 20.0  # length-curve score, not a char count
    salary_transparency: float = 10.0
    contact_info_score: float = 0.0
    company_legitimacy: float = 50.0
    posting_urgency: float = 0.0
    requirement_clarity: float = 0.0
    benefits_specificity: float = 0.0


class BehavioralFeatures(CamelModel):
    posting_pattern_score: float = 50.0  # simulated placeholder, not text-derived
    response_time_indicator: float = 25.0
    application_process_clarity: float = 0.0
    interview_process_mentioned: float = 20.0
    timeline_realism: float = 50.0


class LinguisticFeatures(CamelModel):
    grammar_quality: float = 80.0
    professional_tone: float = 50.0
    emotional_language: float = 0.0
    persuasion_tactics: float = 0.0
    clarity_index: float = 0.0


class FeatureAnalysis(CamelModel):
    """The full feature bundle consumed by scorers, conditions and reports."""
    text_features: TextFeatures = TextFeatures()
    meta_features: MetaFeatures = MetaFeatures()
    behavioral_features: BehavioralFeatures = BehavioralFeatures()
    linguistic_features: LinguisticFeatures = LinguisticFeatures()
