"""Output of a single ensemble scorer."""

from typing import Literal

from pydantic import Field

from models.schemas.base import CamelModel

GHOST = "Ghost Job"
LEGITIMATE = "Legitimate Job"

Label = Literal["Ghost Job", "Legitimate Job"]


class ModelPrediction(CamelModel):
    """Label, confidence and fixed ensemble weight reported by one scorer.

    ``features`` names the signals the scorer leans on and ``reasoning``
    describes the heuristic. Neither is used in aggregation.
    """
    name: str
    prediction: Label
    confidence: float = Field(ge=0, le=100)
    weight: float = Field(gt=0, le=1)
    features: tuple[str, ...] = ()
    reasoning: str = ""

    @property
    def is_legitimate(self) -> bool:
        return self.prediction == LEGITIMATE
