"""Scorer 6: OpenAI embeddings stand-in.

Whole-token overlap with small legitimate and ghost word lists. Independent
of the feature bundle.
"""

from models.schemas.features import FeatureAnalysis
from services.pipeline.base import ThresholdScorer
from services.vocabulary import EMBEDDING_GHOST_TOKENS, EMBEDDING_LEGITIMATE_TOKENS


def overlap_score(text: str) -> float:
    """(legit - ghost) token share in percent, shifted so 50 is neutral."""
    tokens = text.lower().split()
    if not tokens:
        return 50.0
    legit = sum(1 for t in tokens if t in EMBEDDING_LEGITIMATE_TOKENS)
    ghost = sum(1 for t in tokens if t in EMBEDDING_GHOST_TOKENS)
    return (legit - ghost) / len(tokens) * 100 + 50


class EmbeddingsScorer(ThresholdScorer):
    model_name = "m6_embeddings"
    display_name = "OpenAI Embeddings"
    weight = 0.05
    features = ("Semantic embeddings", "Contextual similarity", "Pre-trained knowledge")
    reasoning = "Large-scale pre-trained embeddings with semantic similarity matching"

    threshold = 50.0
    confidence_base = 83.0
    confidence_spread = 12.0
    confidence_floor = 78.0

    def raw_score(self, features: FeatureAnalysis, text: str) -> float:
        return overlap_score(text)
