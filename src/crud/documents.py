"""CRUD operations for uploaded documents."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.documents import Document


async def create_document(
    db: AsyncSession,
    file_name: str,
    file_type: str,
    file_path: str,
    file_size: int,
    content: str,
    processing_error: str | None = None,
) -> Document:
    """Persist a new document record.

    Args:
        db: Database session
        file_name: Original file name supplied by the client
        file_type: Declared media type
        file_path: Location of the stored upload on disk
        file_size: Size in bytes
        content: Extracted text (may be an extraction sentinel)
        processing_error: Sentinel text when extraction failed

    Returns:
        Created Document instance
    """
    document = Document(
        file_name=file_name,
        file_type=file_type,
        file_path=file_path,
        file_size=file_size,
        content=content,
        processing_error=processing_error,
    )

    db.add(document)
    await db.commit()
    await db.refresh(document)

    return document


async def get_document(db: AsyncSession, document_id: UUID) -> Document | None:
    result = await db.execute(select(Document).where(Document.id == document_id))
    return result.scalar_one_or_none()


async def list_documents(db: AsyncSession) -> list[Document]:
    """Return all documents, newest first."""
    result = await db.execute(select(Document).order_by(Document.created_at.desc()))
    return list(result.scalars().all())


async def link_summary(
    db: AsyncSession, document: Document, summary_id: UUID
) -> Document:
    document.summary_id = summary_id
    await db.commit()
    await db.refresh(document)
    return document


async def delete_document(db: AsyncSession, document: Document) -> None:
    await db.delete(document)
    await db.commit()
