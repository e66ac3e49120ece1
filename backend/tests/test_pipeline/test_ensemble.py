"""Tests for ensemble aggregation."""

import pytest
from pydantic import ValidationError

from models.schemas.model_prediction import GHOST, LEGITIMATE, ModelPrediction
from services.pipeline.ensemble import aggregate, ensemble_score, legitimacy, risk_level


def _pred(label, confidence, weight):
    return ModelPrediction(name="test", prediction=label, confidence=confidence, weight=weight)


class TestLegitimacy:
    def test_legitimate_uses_confidence(self):
        assert legitimacy(_pred(LEGITIMATE, 80, 0.5)) == 80

    def test_ghost_inverts_confidence(self):
        assert legitimacy(_pred(GHOST, 80, 0.5)) == 20


class TestEnsembleScore:
    def test_weighted_average(self):
        preds = [_pred(LEGITIMATE, 80, 0.5), _pred(GHOST, 60, 0.5)]
        assert ensemble_score(preds) == pytest.approx(60.0)

    def test_normalised_by_weight_sum(self):
        # weights sum to 0.4, not 1
        preds = [_pred(LEGITIMATE, 90, 0.3), _pred(GHOST, 90, 0.1)]
        assert ensemble_score(preds) == pytest.approx((90 * 0.3 + 10 * 0.1) / 0.4)

    def test_empty_is_neutral(self):
        assert ensemble_score([]) == 50.0

    def test_all_neutral_is_exactly_fifty(self):
        weights = [0.15, 0.20, 0.25, 0.25, 0.10, 0.05]
        preds = [_pred(GHOST, 50, w) for w in weights]
        assert ensemble_score(preds) == 50.0


class TestRiskLevel:
    @pytest.mark.parametrize("score,expected", [
        (0.0, "Critical"), (19.99, "Critical"),
        (20.0, "High"), (34.99, "High"),
        (35.0, "Medium"), (49.99, "Medium"),
        (50.0, "Low"), (50.01, "Low"), (100.0, "Low"),
    ])
    def test_bands(self, score, expected):
        assert risk_level(score) == expected


class TestAggregate:
    def test_barely_legitimate_is_low_risk(self):
        verdict = aggregate([_pred(LEGITIMATE, 51, 1.0)])
        assert verdict.is_ghost_job is False
        assert verdict.risk_level == "Low"
        assert verdict.confidence == pytest.approx(2.0)

    def test_ghost_side(self):
        verdict = aggregate([_pred(GHOST, 90, 0.25), _pred(GHOST, 70, 0.25)])
        assert verdict.ensemble_score == pytest.approx(20.0)
        assert verdict.is_ghost_job is True
        assert verdict.risk_level == "High"
        assert verdict.confidence == pytest.approx(60.0)

    def test_midpoint_is_not_ghost(self):
        verdict = aggregate([_pred(LEGITIMATE, 50, 0.1)])
        assert verdict.is_ghost_job is False
        assert verdict.confidence == 0.0


class TestModelPredictionSchema:
    def test_confidence_bounds_enforced(self):
        with pytest.raises(ValidationError):
            _pred(GHOST, 120, 0.5)

    def test_weight_must_be_positive(self):
        with pytest.raises(ValidationError):
            _pred(GHOST, 50, 0)

    def test_label_restricted(self):
        with pytest.raises(ValidationError):
            _pred("Maybe", 50, 0.5)
