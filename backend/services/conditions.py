"""Condition evaluation: named red and green flags over the feature bundle.

Each condition is an independent threshold test on one feature. The two sets
are evaluated without looking at the ensemble verdict, so a posting judged
legitimate can still carry detected ghost conditions (and vice versa); callers
get both sets untouched.
"""

from typing import Literal

from models.schemas.condition import ConditionResult, ConditionSet
from models.schemas.features import FeatureAnalysis


def _pct(value: float) -> float:
    return float(max(0.0, min(100.0, value)))


def _condition(
    name: str,
    detected: bool,
    confidence: float,
    contribution: float,
    impact: Literal["low", "medium", "high"],
    category: str,
    description: str,
) -> ConditionResult:
    return ConditionResult(
        condition=name,
        detected=detected,
        confidence=_pct(confidence),
        impact=impact,
        category=category,
        description=description,
        feature_contribution=_pct(contribution),
    )


def ghost_conditions(features: FeatureAnalysis) -> list[ConditionResult]:
    tf = features.text_features
    meta = features.meta_features
    ling = features.linguistic_features

    return [
        _condition(
            "High vagueness density detected",
            tf.vagueness_density > 15,
            min(95.0, tf.vagueness_density * 5),
            tf.vagueness_density,
            "high", "Text Analysis",
            "Job description contains excessive vague terms",
        ),
        _condition(
            "Excessive buzzword usage",
            tf.buzzword_ratio > 10,
            min(90.0, tf.buzzword_ratio * 8),
            tf.buzzword_ratio,
            "medium", "Language Analysis",
            "High concentration of marketing buzzwords without substance",
        ),
        _condition(
            "Poor salary transparency",
            meta.salary_transparency < 40,
            100 - meta.salary_transparency,
            100 - meta.salary_transparency,
            "high", "Compensation",
            "No clear salary information or range provided",
        ),
        _condition(
            "Missing contact information",
            meta.contact_info_score < 30,
            100 - meta.contact_info_score,
            100 - meta.contact_info_score,
            "high", "Contact Info",
            "No clear contact person or method provided",
        ),
        _condition(
            "Urgent language indicators",
            meta.posting_urgency > 50,
            meta.posting_urgency,
            meta.posting_urgency,
            "medium", "Language Analysis",
            "Uses urgent language common in ghost jobs",
        ),
        _condition(
            "Low requirement clarity",
            meta.requirement_clarity < 40,
            100 - meta.requirement_clarity,
            100 - meta.requirement_clarity,
            "high", "Requirements",
            "Vague or missing job requirements and qualifications",
        ),
        _condition(
            "High persuasion tactics usage",
            ling.persuasion_tactics > 40,
            ling.persuasion_tactics,
            ling.persuasion_tactics,
            "medium", "Language Analysis",
            "Uses high-pressure sales tactics instead of professional language",
        ),
        _condition(
            "Poor professional tone",
            ling.professional_tone < 40,
            100 - ling.professional_tone,
            100 - ling.professional_tone,
            "medium", "Language Analysis",
            "Lacks professional business communication style",
        ),
    ]


def legitimate_conditions(features: FeatureAnalysis) -> list[ConditionResult]:
    tf = features.text_features
    meta = features.meta_features
    behav = features.behavioral_features
    ling = features.linguistic_features

    return [
        _condition(
            "High text specificity",
            tf.specificity_score > 60,
            tf.specificity_score,
            tf.specificity_score,
            "high", "Content Quality",
            "Detailed and specific job description with clear requirements",
        ),
        _condition(
            "Good salary transparency",
            meta.salary_transparency > 60,
            meta.salary_transparency,
            meta.salary_transparency,
            "high", "Compensation",
            "Clear salary range or compensation information provided",
        ),
        _condition(
            "Comprehensive contact information",
            meta.contact_info_score > 60,
            meta.contact_info_score,
            meta.contact_info_score,
            "medium", "Contact Info",
            "Multiple contact methods and clear point of contact",
        ),
        _condition(
            "Clear requirement specifications",
            meta.requirement_clarity > 60,
            meta.requirement_clarity,
            meta.requirement_clarity,
            "high", "Requirements",
            "Detailed qualifications and experience requirements",
        ),
        _condition(
            "Professional communication tone",
            ling.professional_tone > 60,
            ling.professional_tone,
            ling.professional_tone,
            "medium", "Language Analysis",
            "Uses professional business language and terminology",
        ),
        _condition(
            "High technical content",
            tf.technical_terms_count > 3,
            min(90.0, tf.technical_terms_count * 20),
            tf.technical_terms_count * 10,
            "medium", "Technical Requirements",
            "Mentions specific technical skills and tools",
        ),
        _condition(
            "Realistic timeline expectations",
            behav.timeline_realism > 60,
            behav.timeline_realism,
            behav.timeline_realism,
            "medium", "Timeline",
            "Provides realistic start dates and hiring timeline",
        ),
        _condition(
            "Interview process mentioned",
            behav.interview_process_mentioned > 50,
            behav.interview_process_mentioned,
            behav.interview_process_mentioned,
            "low", "Process Transparency",
            "Mentions interview process or hiring stages",
        ),
    ]


def evaluate(features: FeatureAnalysis, text: str = "") -> ConditionSet:
    """Evaluate both condition sets. No current condition reads ``text`` directly."""
    return ConditionSet(
        ghost_conditions=ghost_conditions(features),
        legitimate_conditions=legitimate_conditions(features),
    )
