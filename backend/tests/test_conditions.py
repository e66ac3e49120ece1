"""Tests for red/green flag evaluation."""

import pytest

from models.schemas.features import (
    FeatureAnalysis,
    LinguisticFeatures,
    MetaFeatures,
    TextFeatures,
)
from samples import GHOST_POSTING, LEGIT_POSTING, PATHOLOGICAL_INPUTS
from services.conditions import evaluate
from services.feature_extractor import extract


def _by_name(conditions):
    return {c.condition: c for c in conditions}


class TestConditionSets:
    def test_eight_each(self):
        result = evaluate(extract(LEGIT_POSTING), LEGIT_POSTING)
        assert len(result.ghost_conditions) == 8
        assert len(result.legitimate_conditions) == 8

    def test_condition_names(self):
        result = evaluate(extract(""))
        assert [c.condition for c in result.ghost_conditions] == [
            "High vagueness density detected",
            "Excessive buzzword usage",
            "Poor salary transparency",
            "Missing contact information",
            "Urgent language indicators",
            "Low requirement clarity",
            "High persuasion tactics usage",
            "Poor professional tone",
        ]
        assert [c.condition for c in result.legitimate_conditions] == [
            "High text specificity",
            "Good salary transparency",
            "Comprehensive contact information",
            "Clear requirement specifications",
            "Professional communication tone",
            "High technical content",
            "Realistic timeline expectations",
            "Interview process mentioned",
        ]

    def test_names_disjoint(self):
        result = evaluate(extract(""))
        ghost = {c.condition for c in result.ghost_conditions}
        legit = {c.condition for c in result.legitimate_conditions}
        assert not ghost & legit

    @pytest.mark.parametrize("text", [LEGIT_POSTING, GHOST_POSTING, *PATHOLOGICAL_INPUTS])
    def test_confidence_in_range(self, text):
        result = evaluate(extract(text), text)
        for cond in result.ghost_conditions + result.legitimate_conditions:
            assert 0 <= cond.confidence <= 100
            assert 0 <= cond.feature_contribution <= 100


class TestGhostConditions:
    def test_urgent_language_detected(self):
        result = evaluate(extract(GHOST_POSTING), GHOST_POSTING)
        ghost = _by_name(result.ghost_conditions)
        assert ghost["Urgent language indicators"].detected is True
        assert ghost["Urgent language indicators"].confidence == 100.0
        assert ghost["High persuasion tactics usage"].detected is True
        assert ghost["Poor salary transparency"].detected is True

    def test_pressure_phrases_with_suspicious_email(self):
        text = "Contact jobs@quickjobs-online.biz. urgent immediate easy money"
        features = extract(text)
        assert features.meta_features.posting_urgency == 75.0
        cond = _by_name(evaluate(features, text).ghost_conditions)["Urgent language indicators"]
        assert cond.detected is True
        assert cond.confidence == 75.0

    def test_two_pressure_phrases_not_enough(self):
        text = "urgent easy money"
        cond = _by_name(evaluate(extract(text), text).ghost_conditions)["Urgent language indicators"]
        assert cond.detected is False

    def test_vagueness_confidence_capped(self):
        features = FeatureAnalysis(text_features=TextFeatures(vagueness_density=100))
        cond = _by_name(evaluate(features).ghost_conditions)["High vagueness density detected"]
        assert cond.detected is True
        assert cond.confidence == 95.0

    def test_inverted_confidence(self):
        features = FeatureAnalysis(meta_features=MetaFeatures(salary_transparency=10))
        cond = _by_name(evaluate(features).ghost_conditions)["Poor salary transparency"]
        assert cond.confidence == 90.0
        assert cond.impact == "high"
        assert cond.category == "Compensation"

    def test_tone_threshold(self):
        features = FeatureAnalysis(linguistic_features=LinguisticFeatures(professional_tone=40))
        cond = _by_name(evaluate(features).ghost_conditions)["Poor professional tone"]
        assert cond.detected is False


class TestLegitimateConditions:
    def test_legit_posting_flags(self):
        result = evaluate(extract(LEGIT_POSTING), LEGIT_POSTING)
        legit = _by_name(result.legitimate_conditions)
        assert legit["Good salary transparency"].detected is True
        assert legit["High text specificity"].detected is True
        assert legit["High technical content"].detected is True
        assert legit["Interview process mentioned"].detected is True

    def test_technical_content_clamped(self):
        features = FeatureAnalysis(text_features=TextFeatures(technical_terms_count=15))
        cond = _by_name(evaluate(features).legitimate_conditions)["High technical content"]
        assert cond.confidence == 90.0
        assert cond.feature_contribution == 100.0

    def test_not_reconciled_with_each_other(self):
        # a posting can raise flags on both sides at once
        text = "Urgent! Immediate start, apply now, start today. Salary: $90,000. Interview next week."
        result = evaluate(extract(text), text)
        ghost = _by_name(result.ghost_conditions)
        legit = _by_name(result.legitimate_conditions)
        assert ghost["Urgent language indicators"].detected is True
        assert legit["Good salary transparency"].detected is True
