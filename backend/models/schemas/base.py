"""Shared base for all analysis records."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable record serialised with camelCase keys (``isGhostJob``, ``riskLevel``, ...).

    Fields are declared in snake_case and accept either spelling on input.
    """
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }
