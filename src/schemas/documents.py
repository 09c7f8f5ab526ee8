"""Document API schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .summaries import SummaryRead


class DocumentRead(BaseModel):
    """Document metadata as returned by the API (extracted text omitted)."""

    id: UUID
    file_name: str
    file_type: str
    file_size: int
    processing_error: str | None = None
    summary_id: UUID | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class DocumentWithSummary(DocumentRead):
    summary: SummaryRead | None = Field(
        default=None, description="Generated summary, if any"
    )
