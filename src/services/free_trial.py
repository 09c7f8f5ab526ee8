"""Single-shot summarization for anonymous free-trial uploads.

Nothing but a usage log row is persisted. The document is summarized from
at most `TRIAL_INPUT_CHAR_LIMIT` characters and condensed to a handful of
key points, optionally translated to Hindi.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from core.config import get_settings
from schemas.free_trial import TrialSummary
from services.ai.exceptions import TextExtractionError
from services.documents.text_extraction import (
    extract_text,
    is_extraction_failure,
    read_raw_text,
)
from services.summarization.orchestrator import (
    SummarizationOrchestrator,
    get_summarization_orchestrator,
)
from services.translation.ai_translator import AITranslator, get_ai_translator
from services.translation.residue import has_residue


logger = logging.getLogger(__name__)

NO_KEY_POINTS = "No key points could be extracted from this document."
NO_SUMMARY = "No summary could be generated for this document."
TRIAL_DOCUMENT_TYPE = "Legal Document"
KEY_CLAUSE_COUNT = 3


async def extract_trial_text(path: Path, media_type: str) -> str:
    """Extract text, falling back to a raw UTF-8 read on a sentinel result.

    Raises:
        TextExtractionError: if nothing readable remains.
    """
    text = await asyncio.to_thread(extract_text, path, media_type)
    if is_extraction_failure(text):
        logger.info("Extraction sentinel for %s, reading raw file", path.name)
        text = await asyncio.to_thread(read_raw_text, path)

    if not text.strip():
        raise TextExtractionError()
    return text


def condense(text: str, limit: int) -> str:
    return f"{text[:limit]}..." if len(text) > limit else text


async def summarize_trial_file(
    path: Path,
    file_name: str,
    media_type: str,
    translate_to_hindi: bool = False,
    *,
    summarizer: SummarizationOrchestrator | None = None,
    translator: AITranslator | None = None,
) -> TrialSummary:
    """Summarize a temporary upload for the free-trial endpoint.

    Raises:
        TextExtractionError: if no text could be read from the file.
        UpstreamError: if the summarization model call fails.
    """
    summarizer = summarizer or get_summarization_orchestrator()
    limit = get_settings().TRIAL_INPUT_CHAR_LIMIT

    text = await extract_trial_text(path, media_type)
    full = await summarizer.summarize_text(condense(text, limit))

    candidates = (full.document_overview, *full.important_clauses[:KEY_CLAUSE_COUNT])
    key_points = [point for point in candidates if point]
    trial = TrialSummary(
        key_points=key_points or [NO_KEY_POINTS],
        summary=full.plain_language_summary or NO_SUMMARY,
        document_type=TRIAL_DOCUMENT_TYPE,
        document_title=file_name,
    )

    if not translate_to_hindi:
        return trial

    translator = translator or get_ai_translator()
    translated_points = [
        await translator.translate(point, enforce_complete=True)
        for point in trial.key_points
    ]
    translated_summary = await translator.translate(
        trial.summary, enforce_complete=True
    )

    remaining = sum(
        1 for field in (*translated_points, translated_summary) if has_residue(field)
    )
    if remaining:
        logger.warning(
            "Translation completed, but %d field(s) still contain English words",
            remaining,
        )

    return trial.model_copy(
        update={
            "key_points": translated_points,
            "summary": translated_summary,
            "language": "hindi",
        }
    )
