"""Summarization orchestration.

Composes prompt construction, the text generator and section extraction, and
hands finished summaries to a store. The store is a protocol with a CRUD
backed default so the API layer and tests can swap it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from core.observability import get_tracer
from crud import documents as documents_crud
from crud import summaries as summaries_crud
from models.documents import Document
from models.summaries import Summary
from schemas.summaries import StructuredSummary
from services.ai.exceptions import SummaryGenerationError
from services.ai.generation import TextGenerator, get_summary_generator
from services.summarization.prompts import build_summary_prompt
from services.summarization.section_extractor import extract


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


PROCESSING_ERROR_SUMMARY = StructuredSummary(
    document_overview=(
        "This document could not be fully processed due to format issues or damage."
    ),
    key_parties=["Cannot be determined from the document content"],
    important_clauses=["Document content extraction was limited or failed"],
    obligations={},
    critical_dates=["Not available due to processing limitations"],
    potential_concerns=[
        "Document may be damaged, corrupted or in an unsupported format",
        "Consider uploading a different version of this document",
        "The file may be password-protected or encrypted",
    ],
    plain_language_summary=(
        "This document could not be properly analyzed because our system "
        "encountered issues extracting the text content. This could be due to "
        "password protection, encryption, damage to the file, or an unsupported "
        "format. Consider uploading a different version of the document if "
        "possible."
    ),
)


class SummaryStoreProtocol(Protocol):
    """Persistence hand-off for generated summaries."""

    async def get_existing(
        self, db: AsyncSession, document: Document
    ) -> Summary | None:
        ...

    async def save(
        self, db: AsyncSession, document: Document, summary: StructuredSummary
    ) -> Summary:
        ...


class CrudSummaryStore:
    """Default store backed by the CRUD modules."""

    async def get_existing(
        self, db: AsyncSession, document: Document
    ) -> Summary | None:
        if document.summary_id is None:
            return None
        return await summaries_crud.get_summary(db, document.summary_id)

    async def save(
        self, db: AsyncSession, document: Document, summary: StructuredSummary
    ) -> Summary:
        record = await summaries_crud.create_summary(db, document.id, summary)
        await documents_crud.link_summary(db, document, record.id)
        return record


@dataclass(slots=True)
class SummaryOutcome:
    """Result of `generate_document_summary`."""

    summary: Summary
    created: bool


class SummarizationOrchestrator:
    def __init__(
        self,
        generator: TextGenerator,
        store: SummaryStoreProtocol | None = None,
        extractor: Callable[[str], StructuredSummary] = extract,
    ) -> None:
        self._generator = generator
        self._store = store or CrudSummaryStore()
        self._extract = extractor

    async def summarize_text(self, text: str) -> StructuredSummary:
        """Summarize raw document text into a StructuredSummary.

        Raises:
            SummaryGenerationError: if there is no text to summarize.
            UpstreamError: if the model call fails.
        """
        if not text or not text.strip():
            raise SummaryGenerationError("Document has no text to summarize")

        with tracer.start_as_current_span("summarization.summarize_text") as span:
            span.set_attribute("summarization.input_chars", len(text))
            response = await self._generator.generate(build_summary_prompt(text))
            span.set_attribute("summarization.response_chars", len(response))

        return self._extract(response)

    async def generate_document_summary(
        self, db: AsyncSession, document: Document
    ) -> SummaryOutcome:
        """Return the document's summary, creating and storing it if needed.

        Documents whose extraction failed get a fixed explanatory summary
        instead of a model call.
        """
        existing = await self._store.get_existing(db, document)
        if existing is not None:
            return SummaryOutcome(summary=existing, created=False)

        if document.processing_error:
            logger.info(
                "Document %s has a processing error, storing fallback summary",
                document.id,
            )
            structured = PROCESSING_ERROR_SUMMARY
        else:
            structured = await self.summarize_text(document.content)

        record = await self._store.save(db, document, structured)
        logger.info("Stored summary %s for document %s", record.id, document.id)
        return SummaryOutcome(summary=record, created=True)


def get_summarization_orchestrator() -> SummarizationOrchestrator:
    """FastAPI dependency returning the default orchestrator."""
    return SummarizationOrchestrator(get_summary_generator())


async def summarize_text(text: str) -> StructuredSummary:
    return await get_summarization_orchestrator().summarize_text(text)
