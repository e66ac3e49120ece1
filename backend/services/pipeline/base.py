"""Abstract base classes for the ensemble scorers."""

from abc import ABC, abstractmethod
import logging

import numpy as np

from models.schemas.features import FeatureAnalysis
from models.schemas.model_prediction import GHOST, LEGITIMATE, ModelPrediction

logger = logging.getLogger(__name__)

# Confidence reported when the posting has no text to score. It maps to a
# legitimacy of 50 whichever label is attached.
NO_SIGNAL_CONFIDENCE = 50.0


def has_signal(text: str) -> bool:
    return bool(text and text.strip())


class BaseScorer(ABC):
    """Base class for ensemble scorers.

    Scorers are named after the model families they stand in for, but each is
    a fixed heuristic: nothing is trained or loaded. Subclasses set:
        - model_name: identifier used in scorer_registry
        - display_name, weight, features, reasoning: copied into the prediction
    and implement predict().
    """

    model_name: str = ""
    display_name: str = ""
    weight: float = 0.0
    features: tuple[str, ...] = ()
    reasoning: str = ""

    @abstractmethod
    def predict(
        self,
        features: FeatureAnalysis,
        text: str,
        rng: np.random.Generator,
    ) -> ModelPrediction:
        """Score one posting. Must not raise for any input, including empty text."""

    def _prediction(self, legitimate: bool, confidence: float) -> ModelPrediction:
        return ModelPrediction(
            name=self.display_name,
            prediction=LEGITIMATE if legitimate else GHOST,
            confidence=confidence,
            weight=self.weight,
            features=tuple(self.features),
            reasoning=self.reasoning,
        )


class ThresholdScorer(BaseScorer):
    """Scorer that compares one raw score against a fixed threshold.

    Confidence is simulated: ``base + U(0, 1) * spread`` clamped to
    ``[floor, 95]``, drawn from the injected generator. It is only
    reproducible when that generator is seeded.
    """

    threshold: float = 50.0
    confidence_base: float = 80.0
    confidence_spread: float = 10.0
    confidence_floor: float = 70.0
    confidence_ceiling: float = 95.0

    @abstractmethod
    def raw_score(self, features: FeatureAnalysis, text: str) -> float:
        """Deterministic score compared against ``threshold``."""

    def predict(
        self,
        features: FeatureAnalysis,
        text: str,
        rng: np.random.Generator,
    ) -> ModelPrediction:
        score = self.raw_score(features, text)
        legitimate = score > self.threshold
        if not has_signal(text):
            return self._prediction(legitimate, NO_SIGNAL_CONFIDENCE)

        confidence = self.confidence_base + float(rng.uniform()) * self.confidence_spread
        confidence = max(self.confidence_floor, min(self.confidence_ceiling, confidence))
        logger.debug("%s score=%.2f threshold=%.1f", self.model_name, score, self.threshold)
        return self._prediction(legitimate, confidence)
