"""API endpoints for Hindi translation of summaries, text and legal terms."""

import json
import logging
from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import SummaryNotFoundError
from crud import summaries as summaries_crud
from dependencies.db import get_db
from schemas.api import ApiResponse
from schemas.summaries import TranslatedSummaryResponse
from schemas.translation import (
    TermTranslationRequest,
    TermTranslationResponse,
    TextTranslationRequest,
    TextTranslationResponse,
)
from services.translation.orchestrator import (
    SummaryTranslationOrchestrator,
    count_untranslated_fields,
    get_translation_orchestrator,
)

from .documents import get_document_or_404


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/translate", tags=["translation"])

Orchestrator = Annotated[
    SummaryTranslationOrchestrator, Depends(get_translation_orchestrator)
]


@router.get(
    "/documents/{document_id}",
    summary="Translate a document summary to Hindi",
    response_model=ApiResponse[TranslatedSummaryResponse],
    responses={404: {"description": "Document or summary not found"}},
)
async def translate_document_summary(
    document_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    orchestrator: Orchestrator,
) -> ApiResponse[TranslatedSummaryResponse]:
    """Translate the stored summary, insisting on Devanagari-only output."""
    document = await get_document_or_404(db, document_id)
    record = (
        await summaries_crud.get_summary(db, document.summary_id)
        if document.summary_id
        else None
    )
    if record is None:
        raise SummaryNotFoundError(str(document_id))

    logger.info("Translating summary for document %s", document_id)
    translated = await orchestrator.translate_summary(
        summaries_crud.to_structured(record), enforce_complete=True
    )

    remaining = count_untranslated_fields(translated)
    message = (
        f"Summary translated with {remaining} fields needing additional refinement"
        if remaining
        else "Summary completely translated to Hindi successfully"
    )
    return ApiResponse(
        data=TranslatedSummaryResponse(
            document_id=document.id,
            translated_summary=translated,
            fields_needing_refinement=remaining,
        ),
        message=message,
    )


@router.post(
    "/documents/{document_id}/text",
    summary="Translate document text to Hindi",
    response_model=ApiResponse[TextTranslationResponse],
    responses={
        400: {"description": "No content to translate"},
        404: {"description": "Document not found"},
    },
)
async def translate_document_text(
    document_id: UUID,
    request: TextTranslationRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    orchestrator: Orchestrator,
) -> ApiResponse[TextTranslationResponse]:
    """Translate the given text, or the document's extracted content."""
    document = await get_document_or_404(db, document_id)
    content = request.text or document.content
    if not content or not content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No content found to translate",
        )

    translated = await orchestrator.translate_text(content, request.enforce_complete)
    return ApiResponse(
        data=TextTranslationResponse(translated_text=translated),
        message="Text translated successfully",
    )


def _parse_structured_term(term: str) -> Any | None:
    """Decode a JSON object/array term, or None for plain text."""
    if not term.startswith(("{", "[")):
        return None
    try:
        parsed = json.loads(term)
    except json.JSONDecodeError:
        logger.info("Term looks like JSON but does not parse, treating as text")
        return None
    return parsed if isinstance(parsed, dict | list) else None


@router.post(
    "/term",
    summary="Translate a legal term to Hindi",
    response_model=ApiResponse[TermTranslationResponse],
)
async def translate_term(
    request: TermTranslationRequest,
    orchestrator: Orchestrator,
) -> ApiResponse[TermTranslationResponse]:
    """Translate a term or phrase; JSON objects and arrays are translated value-wise."""
    structured = _parse_structured_term(request.term)
    if structured is not None:
        translated_obj = await orchestrator.translate_values(
            structured, use_ai=request.use_ai
        )
        translated = json.dumps(translated_obj, ensure_ascii=False)
    elif request.use_ai:
        translated = await orchestrator.translate_text(request.term)
    else:
        translated = orchestrator.translator.dictionary.lookup(request.term)

    return ApiResponse(
        data=TermTranslationResponse(
            original_term=request.term, translated_term=translated
        ),
        message="Term translated successfully",
    )
