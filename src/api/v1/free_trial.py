"""Anonymous, rate-limited single-shot summarization."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

from fastapi import (
    APIRouter,
    BackgroundTasks,
    Depends,
    File,
    Form,
    Query,
    Request,
    UploadFile,
    status,
)
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings, get_settings
from core.error_handler import get_correlation_id
from core.exceptions import UnsupportedFileTypeError
from crud.free_trial_logs import create_free_trial_log
from dependencies.db import get_db
from schemas.api import ApiResponse, ErrorResponse
from schemas.free_trial import TrialSummary
from services.ai.exceptions import AIServiceError
from services.documents.storage import (
    remove_file,
    remove_file_later,
    save_upload,
    upload_dir,
)
from services.documents.text_extraction import ALLOWED_EXTENSIONS, media_type_for
from services.free_trial import summarize_trial_file
from services.summarization.orchestrator import (
    SummarizationOrchestrator,
    get_summarization_orchestrator,
)
from services.translation.ai_translator import AITranslator, get_ai_translator


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/free-trial", tags=["free-trial"])

SUMMARY_FAILED_MESSAGE = (
    "Unable to generate summary for this document. "
    "Please try a different file or format."
)


@router.post(
    "/upload",
    summary="Summarize a document without an account",
    response_model=ApiResponse[TrialSummary],
    responses={
        400: {"description": "Unsupported file extension"},
        413: {"description": "File exceeds the upload size limit"},
        422: {"description": "The document could not be summarized"},
        429: {"description": "Free-trial limit reached for this client"},
    },
)
async def upload_trial_document(
    request: Request,
    background_tasks: BackgroundTasks,
    document: Annotated[UploadFile, File(description="PDF, DOC, DOCX, TXT or RTF")],
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    summarizer: Annotated[
        SummarizationOrchestrator, Depends(get_summarization_orchestrator)
    ],
    translator: Annotated[AITranslator, Depends(get_ai_translator)],
    language_query: Annotated[str | None, Query(alias="language")] = None,
    language_form: Annotated[str | None, Form(alias="language")] = None,
) -> ApiResponse[TrialSummary] | JSONResponse:
    """Summarize an upload, optionally in Hindi (``language=hindi``).

    Usage is logged even when summarization fails. The temporary file is
    removed shortly after the response is sent.
    """
    file_name = Path(document.filename or "").name
    extension = Path(file_name).suffix.lower()
    media_type = media_type_for(file_name)
    if extension not in ALLOWED_EXTENSIONS or media_type is None:
        raise UnsupportedFileTypeError(extension or "none")

    translate_to_hindi = "hindi" in {language_query, language_form}

    stored = await save_upload(
        document, upload_dir(settings, trial=True), settings.MAX_UPLOAD_BYTES
    )
    client_ip = request.client.host if request.client else "unknown"
    await create_free_trial_log(
        db,
        ip_address=client_ip,
        document_name=stored.original_name,
        document_size=stored.size,
        document_type=extension.lstrip("."),
    )

    try:
        summary = await summarize_trial_file(
            stored.path,
            stored.original_name,
            media_type,
            translate_to_hindi,
            summarizer=summarizer,
            translator=translator,
        )
    except AIServiceError as exc:
        logger.warning(
            "Free-trial summarization failed (%s): %s", exc.error_code, exc.message
        )
        await asyncio.to_thread(remove_file, stored.path)
        body = ErrorResponse(
            message=SUMMARY_FAILED_MESSAGE,
            error={"correlation_id": get_correlation_id(), "type": exc.error_code},
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=body.model_dump(),
        )

    background_tasks.add_task(
        remove_file_later, stored.path, settings.TRIAL_FILE_RETENTION_SECONDS
    )
    return ApiResponse(data=summary, message="Document summarized successfully")
