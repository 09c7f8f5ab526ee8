"""CRUD operations for persisted summaries."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.summaries import Summary
from schemas.summaries import StructuredSummary


async def create_summary(
    db: AsyncSession, document_id: UUID, summary: StructuredSummary
) -> Summary:
    """Store a StructuredSummary for a document.

    Args:
        db: Database session
        document_id: Owning document
        summary: Parsed summary sections

    Returns:
        Created Summary instance
    """
    record = Summary(
        document_id=document_id,
        document_overview=summary.document_overview,
        key_parties=list(summary.key_parties),
        important_clauses=list(summary.important_clauses),
        obligations=dict(summary.obligations),
        critical_dates=list(summary.critical_dates),
        potential_concerns=list(summary.potential_concerns),
        plain_language_summary=summary.plain_language_summary,
    )

    db.add(record)
    await db.commit()
    await db.refresh(record)

    return record


async def get_summary(db: AsyncSession, summary_id: UUID) -> Summary | None:
    result = await db.execute(select(Summary).where(Summary.id == summary_id))
    return result.scalar_one_or_none()


async def delete_summaries_for_document(db: AsyncSession, document_id: UUID) -> None:
    """Remove every summary that belongs to a document (caller commits)."""
    await db.execute(delete(Summary).where(Summary.document_id == document_id))


def to_structured(record: Summary) -> StructuredSummary:
    """Rebuild the immutable schema object from a stored row."""
    return StructuredSummary(
        document_overview=record.document_overview,
        key_parties=list(record.key_parties),
        important_clauses=list(record.important_clauses),
        obligations=dict(record.obligations or {}),
        critical_dates=list(record.critical_dates),
        potential_concerns=list(record.potential_concerns),
        plain_language_summary=record.plain_language_summary,
    )
