"""Tests for summary, recommendation and detail generation."""

import pytest

from models.schemas.features import (
    FeatureAnalysis,
    LinguisticFeatures,
    MetaFeatures,
    TextFeatures,
)
from services.report import (
    GHOST_RECOMMENDATIONS,
    LEGITIMATE_RECOMMENDATIONS,
    detail,
    recommend,
    summarize,
)


class TestSummarize:
    @pytest.mark.parametrize("confidence,prefix", [
        (95, "High confidence"), (80.5, "High confidence"),
        (80, "Moderate confidence"), (61, "Moderate confidence"),
        (60, "Low confidence"), (0, "Low confidence"),
    ])
    def test_bands(self, confidence, prefix):
        assert summarize(True, confidence, 0).startswith(prefix + " ghost job")
        assert summarize(False, confidence, 100).startswith(prefix + " legitimate job")


class TestRecommend:
    def test_legitimate_baseline(self):
        recs = recommend(False, FeatureAnalysis())
        assert recs == LEGITIMATE_RECOMMENDATIONS

    def test_ghost_all_appends(self):
        features = FeatureAnalysis(
            meta_features=MetaFeatures(salary_transparency=10, contact_info_score=0),
            linguistic_features=LinguisticFeatures(persuasion_tactics=75),
        )
        recs = recommend(True, features)
        assert recs[:5] == GHOST_RECOMMENDATIONS
        assert len(recs) == 8
        assert any("salary range" in r for r in recs)
        assert any("email domain" in r for r in recs)
        assert any("high-pressure" in r for r in recs)

    def test_ghost_no_appends(self):
        features = FeatureAnalysis(
            meta_features=MetaFeatures(salary_transparency=90, contact_info_score=60),
        )
        assert recommend(True, features) == GHOST_RECOMMENDATIONS


class TestDetail:
    def test_reformats_features(self):
        features = FeatureAnalysis(
            text_features=TextFeatures(technical_terms_count=7, specificity_score=50),
            meta_features=MetaFeatures(
                posting_urgency=75, company_legitimacy=70,
                contact_info_score=60, requirement_clarity=62.5,
            ),
        )
        result = detail(features, "one two three")
        assert result.text_analysis.word_count == 3
        assert result.temporal_analysis.urgency_indicators == 3
        assert result.company_analysis.company_mentioned is True
        assert result.company_analysis.contact_info_provided is True
        assert result.requirement_analysis.experience_requirements == "Specified"
        assert result.requirement_analysis.skills_specificity == 100.0

    def test_empty_text(self):
        result = detail(FeatureAnalysis(), "")
        assert result.text_analysis.word_count == 0
        assert result.company_analysis.company_mentioned is False
        assert result.requirement_analysis.experience_requirements == "Not specified"
