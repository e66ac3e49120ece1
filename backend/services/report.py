"""Report generation: summary text, recommendations and diagnostic breakdown.

Template-based, no scoring happens here; everything is read off the verdict
and the feature bundle.
"""

from models.schemas.detailed_analysis import (
    CompanyAnalysis,
    DetailedAnalysis,
    RequirementAnalysis,
    TemporalAnalysis,
    TextAnalysis,
)
from models.schemas.features import FeatureAnalysis

GHOST_SUMMARIES = (
    "High confidence ghost job detection. Multiple ML models agree this posting "
    "shows strong indicators of being fake or misleading.",
    "Moderate confidence ghost job detection. Several concerning patterns detected "
    "across multiple analysis dimensions.",
    "Low confidence ghost job detection. Some suspicious indicators present but "
    "results are mixed.",
)

LEGITIMATE_SUMMARIES = (
    "High confidence legitimate job detection. Strong positive indicators across "
    "all analysis categories.",
    "Moderate confidence legitimate job detection. Generally positive indicators "
    "with some areas for improvement.",
    "Low confidence legitimate job detection. Mixed signals require careful evaluation.",
)

GHOST_RECOMMENDATIONS = (
    "Research the company thoroughly on LinkedIn and their official website",
    "Look for employee reviews on Glassdoor and similar platforms",
    "Check if the same job is posted across multiple platforms with identical text",
    "Verify the recruiter's profile and company association",
    "Be cautious about providing personal information early in the process",
)

LEGITIMATE_RECOMMENDATIONS = (
    "This appears to be a legitimate opportunity worth pursuing",
    "Prepare a tailored application highlighting relevant experience",
    "Research the company culture and recent news to show genuine interest",
    "Follow up appropriately after applying, typically within 1-2 weeks",
    "Prepare for interviews by reviewing the specific requirements mentioned",
    "Consider reaching out to current employees on LinkedIn for insights",
)


def summarize(is_ghost_job: bool, confidence: float, ensemble_score: float) -> str:
    """Pick a summary template by label and confidence band (>80, >60, else)."""
    templates = GHOST_SUMMARIES if is_ghost_job else LEGITIMATE_SUMMARIES
    if confidence > 80:
        return templates[0]
    if confidence > 60:
        return templates[1]
    return templates[2]


def recommend(is_ghost_job: bool, features: FeatureAnalysis) -> tuple[str, ...]:
    if not is_ghost_job:
        return LEGITIMATE_RECOMMENDATIONS

    recs = list(GHOST_RECOMMENDATIONS)
    if features.meta_features.salary_transparency < 40:
        recs.append("Request specific salary range before proceeding with application")
    if features.meta_features.contact_info_score < 30:
        recs.append("Ask for direct contact information and verify company email domain")
    if features.linguistic_features.persuasion_tactics > 40:
        recs.append("Be wary of high-pressure tactics and unrealistic promises")
    return tuple(recs)


def detail(features: FeatureAnalysis, text: str) -> DetailedAnalysis:
    tf = features.text_features
    meta = features.meta_features
    behav = features.behavioral_features

    return DetailedAnalysis(
        text_analysis=TextAnalysis(
            word_count=len(text.split()),
            sentiment_score=tf.sentiment_polarity,
            buzzword_density=tf.buzzword_ratio,
            specificity_score=tf.specificity_score,
            readability_score=tf.readability_index,
        ),
        temporal_analysis=TemporalAnalysis(
            urgency_indicators=meta.posting_urgency / 25,
            timeline_clarity=behav.timeline_realism,
        ),
        company_analysis=CompanyAnalysis(
            company_mentioned=meta.company_legitimacy > 50,
            contact_info_provided=meta.contact_info_score > 40,
            branding_consistency=meta.company_legitimacy,
            legitimacy_score=meta.company_legitimacy,
        ),
        requirement_analysis=RequirementAnalysis(
            clarity_score=meta.requirement_clarity,
            specificity_level=tf.specificity_score,
            experience_requirements="Specified" if meta.requirement_clarity > 50 else "Not specified",
            skills_specificity=min(100.0, tf.technical_terms_count * 20.0),
        ),
    )
