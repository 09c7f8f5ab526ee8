"""Structured legal summary schemas.

`StructuredSummary` is the contract between the summarizer, the translation
pipeline and the HTTP layer. Field names are snake_case in Python and
camelCase on the wire.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StructuredSummary(BaseModel):
    """Six-section summary of a legal document.

    Instances are immutable; translation produces a new instance with the
    same shape.
    """

    document_overview: str = Field(..., description="Two or three sentence overview")
    key_parties: list[str] = Field(..., min_length=1)
    important_clauses: list[str] = Field(..., min_length=1)
    obligations: dict[str, Any] = Field(
        default_factory=dict,
        description="Retired section, kept for response compatibility",
    )
    critical_dates: list[str] = Field(..., min_length=1)
    potential_concerns: list[str] = Field(..., min_length=1)
    plain_language_summary: str

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    def string_fields(self) -> dict[str, str | list[str]]:
        """Return the translatable text fields keyed by attribute name."""
        return {
            "document_overview": self.document_overview,
            "key_parties": self.key_parties,
            "important_clauses": self.important_clauses,
            "critical_dates": self.critical_dates,
            "potential_concerns": self.potential_concerns,
            "plain_language_summary": self.plain_language_summary,
        }


class SummaryRead(StructuredSummary):
    """Persisted summary as returned by the API."""

    id: UUID
    document_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        from_attributes=True,
    )


class TranslatedSummaryResponse(BaseModel):
    """Payload of the summary translation endpoint."""

    document_id: UUID
    original_language: str = "English"
    target_language: str = "Hindi"
    translated_summary: StructuredSummary
    fields_needing_refinement: int = 0

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
