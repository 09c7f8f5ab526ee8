"""API endpoints for document upload and summarization."""

import asyncio
import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings, get_settings
from core.exceptions import DocumentNotFoundError, UnsupportedFileTypeError
from crud import documents as documents_crud
from crud import summaries as summaries_crud
from dependencies.db import get_db
from models.documents import Document
from schemas.api import ApiResponse
from schemas.documents import DocumentRead, DocumentWithSummary
from schemas.summaries import SummaryRead
from services.documents.storage import remove_file, save_upload, upload_dir
from services.documents.text_extraction import (
    ALLOWED_MEDIA_TYPES,
    extract_text,
    is_extraction_failure,
)
from services.summarization.orchestrator import (
    SummarizationOrchestrator,
    get_summarization_orchestrator,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])

PARTIAL_EXTRACTION_WARNING = (
    "Document was uploaded but text extraction was partial or failed"
)


async def get_document_or_404(db: AsyncSession, document_id: UUID) -> Document:
    document = await documents_crud.get_document(db, document_id)
    if document is None:
        raise DocumentNotFoundError(str(document_id))
    return document


@router.post(
    "/upload",
    summary="Upload a legal document",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[DocumentRead],
    responses={
        201: {"description": "Document stored; message carries extraction warnings"},
        400: {"description": "Unsupported file type"},
        413: {"description": "File exceeds the upload size limit"},
    },
)
async def upload_document(
    file: Annotated[UploadFile, File(description="PDF, DOC, DOCX, TXT or RTF")],
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ApiResponse[DocumentRead]:
    """Store an upload, extract its text and record any extraction failure."""
    media_type = file.content_type or ""
    if media_type not in ALLOWED_MEDIA_TYPES:
        raise UnsupportedFileTypeError(media_type or "unknown")

    stored = await save_upload(file, upload_dir(settings), settings.MAX_UPLOAD_BYTES)
    try:
        content = await asyncio.to_thread(extract_text, stored.path, media_type)
        processing_error = content if is_extraction_failure(content) else None
        document = await documents_crud.create_document(
            db,
            file_name=stored.original_name,
            file_type=media_type,
            file_path=str(stored.path),
            file_size=stored.size,
            content=content,
            processing_error=processing_error,
        )
    except Exception:
        # Don't leave orphaned uploads behind
        await asyncio.to_thread(remove_file, stored.path)
        raise

    if processing_error:
        logger.warning("Text extraction failed for document %s", document.id)
        message = PARTIAL_EXTRACTION_WARNING
    else:
        message = "Document uploaded successfully"

    return ApiResponse(data=DocumentRead.model_validate(document), message=message)


@router.get(
    "",
    summary="List documents",
    response_model=ApiResponse[list[DocumentRead]],
)
async def list_documents(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[DocumentRead]]:
    documents = await documents_crud.list_documents(db)
    return ApiResponse(
        data=[DocumentRead.model_validate(d) for d in documents],
        message="Documents retrieved successfully",
    )


@router.get(
    "/{document_id}",
    summary="Get a document with its summary",
    response_model=ApiResponse[DocumentWithSummary],
    responses={404: {"description": "Document not found"}},
)
async def get_document(
    document_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[DocumentWithSummary]:
    document = await get_document_or_404(db, document_id)
    return ApiResponse(
        data=DocumentWithSummary.model_validate(document),
        message="Document retrieved successfully",
    )


@router.post(
    "/{document_id}/summarize",
    summary="Generate a structured summary",
    response_model=ApiResponse[SummaryRead],
    responses={
        200: {"description": "Summary already existed"},
        201: {"description": "Summary generated"},
        404: {"description": "Document not found"},
        502: {"description": "Language model unavailable"},
    },
)
async def summarize_document(
    document_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    orchestrator: Annotated[
        SummarizationOrchestrator, Depends(get_summarization_orchestrator)
    ],
) -> JSONResponse:
    """Return the stored summary, or generate one (201) if none exists."""
    document = await get_document_or_404(db, document_id)
    outcome = await orchestrator.generate_document_summary(db, document)

    if not outcome.created:
        message = "Summary already exists"
    elif document.processing_error:
        message = "Limited summary generated for document with processing issues"
    else:
        message = "Summary generated successfully"

    body = ApiResponse(data=SummaryRead.model_validate(outcome.summary), message=message)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED if outcome.created else status.HTTP_200_OK,
        content=body.model_dump(mode="json", by_alias=True),
    )


@router.delete(
    "/{document_id}",
    summary="Delete a document",
    response_model=ApiResponse[None],
    responses={404: {"description": "Document not found"}},
)
async def delete_document(
    document_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    """Delete the document's summaries, its stored file and the record."""
    document = await get_document_or_404(db, document_id)

    await summaries_crud.delete_summaries_for_document(db, document.id)
    await asyncio.to_thread(remove_file, document.file_path)
    await documents_crud.delete_document(db, document)

    return ApiResponse(message="Document deleted successfully")
