"""Free-trial summarization schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TrialSummary(BaseModel):
    """Condensed summary returned to anonymous free-trial users."""

    key_points: list[str] = Field(..., min_length=1)
    summary: str
    document_type: str = "Legal Document"
    document_title: str
    language: Literal["english", "hindi"] = "english"

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
