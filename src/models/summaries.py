"""Persisted structured summary model."""

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Summary(Base):
    """The six summary sections of one document, list fields stored as JSON."""

    __tablename__ = "summaries"

    id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    document_id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey(
            "documents.id", name="fk_summaries_document_id", ondelete="CASCADE"
        ),
        nullable=False,
        index=True,
    )
    document_overview: Mapped[str] = mapped_column(Text, nullable=False)
    key_parties: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    important_clauses: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    obligations: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=dict
    )
    critical_dates: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    potential_concerns: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    plain_language_summary: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    def __repr__(self) -> str:
        return f"<Summary(id={self.id}, document_id={self.document_id})>"
