from pydantic import BaseModel, Field

from config import settings


class AnalyzeRequest(BaseModel):
    description: str = Field(
        ...,
        max_length=settings.max_description_length,
        description="Raw job posting text",
    )
