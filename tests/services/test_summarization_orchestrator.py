"""Tests for the summarization orchestrator."""

from __future__ import annotations

import uuid
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from schemas.summaries import StructuredSummary
from services.ai.exceptions import SummaryGenerationError, UpstreamError
from services.summarization.orchestrator import (
    PROCESSING_ERROR_SUMMARY,
    CrudSummaryStore,
    SummarizationOrchestrator,
)
from services.summarization.prompts import SUMMARY_PROMPT


RESPONSE = (
    "Document Overview\nA gift deed.\n"
    "Key Parties\n- Donor: Lata\n- Donee: Arjun\n"
    "Important Clauses\n- Clause 1: Transfer is irrevocable\n"
    "Critical Dates\n- 2 May 2023: Execution\n"
    "Potential Concerns\n- Stamp duty not mentioned\n"
    "Plain Language Summary\nLata gives property to Arjun."
)


class ScriptedGenerator:
    def __init__(self, response: str = RESPONSE, error: Exception | None = None):
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt, settings=None):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


def _document(**overrides):
    values = {
        "id": uuid.uuid4(),
        "content": "This deed of gift is made on 2 May 2023...",
        "processing_error": None,
        "summary_id": None,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def _store(existing=None):
    store = MagicMock()
    store.get_existing = AsyncMock(return_value=existing)
    store.save = AsyncMock(
        side_effect=lambda db, document, summary: SimpleNamespace(
            id=uuid.uuid4(), structured=summary
        )
    )
    return store


@pytest.mark.asyncio
async def test_summarize_text_builds_prompt_and_extracts():
    generator = ScriptedGenerator()
    orchestrator = SummarizationOrchestrator(generator, store=_store())

    summary = await orchestrator.summarize_text("Deed text")

    assert generator.prompts == [SUMMARY_PROMPT + "Deed text"]
    assert summary.key_parties == ["Donor: Lata", "Donee: Arjun"]
    assert summary.plain_language_summary == "Lata gives property to Arjun."


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   \n\t"])
async def test_summarize_text_rejects_blank_text(text):
    generator = ScriptedGenerator()
    orchestrator = SummarizationOrchestrator(generator, store=_store())

    with pytest.raises(SummaryGenerationError):
        await orchestrator.summarize_text(text)
    assert generator.prompts == []


@pytest.mark.asyncio
async def test_summarize_text_propagates_upstream_failure():
    generator = ScriptedGenerator(error=UpstreamError("quota exceeded"))
    orchestrator = SummarizationOrchestrator(generator, store=_store())

    with pytest.raises(UpstreamError):
        await orchestrator.summarize_text("Deed text")


@pytest.mark.asyncio
async def test_existing_summary_is_returned_without_model_call():
    existing = SimpleNamespace(id=uuid.uuid4())
    generator = ScriptedGenerator()
    store = _store(existing=existing)
    orchestrator = SummarizationOrchestrator(generator, store=store)

    outcome = await orchestrator.generate_document_summary(
        MagicMock(), _document(summary_id=existing.id)
    )

    assert outcome.created is False
    assert outcome.summary is existing
    assert generator.prompts == []
    store.save.assert_not_awaited()


@pytest.mark.asyncio
async def test_new_summary_is_generated_and_saved():
    generator = ScriptedGenerator()
    store = _store()
    orchestrator = SummarizationOrchestrator(generator, store=store)
    db = MagicMock()
    document = _document()

    outcome = await orchestrator.generate_document_summary(db, document)

    assert outcome.created is True
    assert len(generator.prompts) == 1
    saved_db, saved_document, saved_summary = store.save.await_args.args
    assert saved_db is db
    assert saved_document is document
    assert saved_summary.key_parties == ["Donor: Lata", "Donee: Arjun"]


@pytest.mark.asyncio
async def test_processing_error_document_gets_fixed_summary():
    generator = ScriptedGenerator()
    store = _store()
    orchestrator = SummarizationOrchestrator(generator, store=store)

    outcome = await orchestrator.generate_document_summary(
        MagicMock(),
        _document(
            processing_error="Error processing PDF file",
            content="Error processing PDF file",
        ),
    )

    assert outcome.created is True
    assert generator.prompts == []
    assert store.save.await_args.args[2] == PROCESSING_ERROR_SUMMARY


@pytest.mark.asyncio
async def test_custom_extractor_is_used():
    fixed = StructuredSummary(
        document_overview="o",
        key_parties=["p"],
        important_clauses=["c"],
        critical_dates=["d"],
        potential_concerns=["x"],
        plain_language_summary="s",
    )
    orchestrator = SummarizationOrchestrator(
        ScriptedGenerator(), store=_store(), extractor=lambda _raw: fixed
    )

    assert await orchestrator.summarize_text("text") is fixed


class TestCrudSummaryStore:
    @pytest.mark.asyncio
    async def test_get_existing_without_summary_id(self):
        with patch(
            "services.summarization.orchestrator.summaries_crud.get_summary",
            new=AsyncMock(),
        ) as get_summary:
            result = await CrudSummaryStore().get_existing(MagicMock(), _document())

        assert result is None
        get_summary.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_save_creates_and_links(self):
        document = _document()
        record = SimpleNamespace(id=uuid.uuid4())
        db = MagicMock()

        with (
            patch(
                "services.summarization.orchestrator.summaries_crud.create_summary",
                new=AsyncMock(return_value=record),
            ) as create_summary,
            patch(
                "services.summarization.orchestrator.documents_crud.link_summary",
                new=AsyncMock(),
            ) as link_summary,
        ):
            result = await CrudSummaryStore().save(
                db, document, PROCESSING_ERROR_SUMMARY
            )

        assert result is record
        create_summary.assert_awaited_once_with(
            db, document.id, PROCESSING_ERROR_SUMMARY
        )
        link_summary.assert_awaited_once_with(db, document, record.id)
