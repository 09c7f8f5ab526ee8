"""Tests for summary and structural translation."""

from __future__ import annotations

import asyncio

import pytest

from schemas.summaries import StructuredSummary
from services.translation.orchestrator import (
    SummaryTranslationOrchestrator,
    cleanup_markers,
    count_untranslated_fields,
)
from services.translation.term_dictionary import TermDictionary


class FakeTranslator:
    """Prefixes text with a Hindi marker and records every call."""

    def __init__(self, table: dict[str, str] | None = None, delay=None):
        self.table = table or {}
        self.delay = delay
        self.calls: list[tuple[str, bool]] = []
        self.dictionary = TermDictionary({"lease": "पट्टा"})

    async def translate(self, text: str, enforce_complete: bool = True) -> str:
        self.calls.append((text, enforce_complete))
        if self.delay is not None:
            await asyncio.sleep(self.delay(text))
        return self.table.get(text, f"हिं {text}")


@pytest.fixture
def summary() -> StructuredSummary:
    return StructuredSummary(
        document_overview="A lease deed",
        key_parties=["Landlord", "Tenant"],
        important_clauses=["Clause 1"],
        critical_dates=["2024"],
        potential_concerns=["No repairs clause"],
        plain_language_summary="You rent a flat",
    )


@pytest.mark.asyncio
async def test_translate_summary_translates_each_leaf(summary):
    translator = FakeTranslator()
    orchestrator = SummaryTranslationOrchestrator(translator)

    translated = await orchestrator.translate_summary(summary, enforce_complete=True)

    assert translated.document_overview == "हिं A lease deed"
    assert translated.key_parties == ["हिं Landlord", "हिं Tenant"]
    assert translated.plain_language_summary == "हिं You rent a flat"
    assert translated.obligations == {}
    assert len(translator.calls) == 7
    assert all(enforce for _text, enforce in translator.calls)


@pytest.mark.asyncio
async def test_translate_summary_leaves_original_untouched(summary):
    before = summary.model_dump()
    orchestrator = SummaryTranslationOrchestrator(FakeTranslator())

    translated = await orchestrator.translate_summary(summary)

    assert summary.model_dump() == before
    assert translated is not summary


@pytest.mark.asyncio
async def test_translate_summary_strips_markers(summary):
    translator = FakeTranslator({"Landlord": "**मकान मालिक**", "2024": "# 2024"})
    orchestrator = SummaryTranslationOrchestrator(translator)

    translated = await orchestrator.translate_summary(summary)

    assert translated.key_parties[0] == "मकान मालिक"
    assert translated.critical_dates == [" 2024"]


@pytest.mark.asyncio
async def test_concurrent_items_keep_source_order():
    items = ["slow", "medium", "fast"]
    delays = {"slow": 0.03, "medium": 0.02, "fast": 0.0}
    translator = FakeTranslator(delay=lambda text: delays[text])
    orchestrator = SummaryTranslationOrchestrator(translator, max_concurrency=3)

    result = await orchestrator._translate_items(items, translator.translate)

    assert result == ["हिं slow", "हिं medium", "हिं fast"]


def test_max_concurrency_must_be_positive():
    with pytest.raises(ValueError):
        SummaryTranslationOrchestrator(FakeTranslator(), max_concurrency=0)


class TestTranslateObjectComplete:
    @pytest.mark.asyncio
    async def test_translates_keys_and_nested_values(self):
        translator = FakeTranslator()
        orchestrator = SummaryTranslationOrchestrator(translator)

        result = await orchestrator.translate_object_complete(
            {"Tenant": {"Duty": ["Pay rent", 5]}, "count": None}
        )

        assert result == {
            "हिं Tenant": {"हिं Duty": ["हिं Pay rent", 5]},
            "हिं count": None,
        }

    @pytest.mark.asyncio
    async def test_devanagari_keys_are_not_retranslated(self):
        translator = FakeTranslator()
        orchestrator = SummaryTranslationOrchestrator(translator)

        result = await orchestrator.translate_object_complete(
            {"किरायेदार": "Pay rent"}, enforce_complete=False
        )

        assert result == {"किरायेदार": "हिं Pay rent"}
        assert translator.calls == [("Pay rent", False)]

    @pytest.mark.asyncio
    async def test_non_string_scalars_pass_through(self):
        orchestrator = SummaryTranslationOrchestrator(FakeTranslator())
        assert await orchestrator.translate_object_complete(42) == 42


class TestTranslateValues:
    @pytest.mark.asyncio
    async def test_dictionary_mode_makes_no_model_call(self):
        translator = FakeTranslator()
        orchestrator = SummaryTranslationOrchestrator(translator)

        result = await orchestrator.translate_values(
            {"lease": ["the lease", {"term": "lease"}]}, use_ai=False
        )

        assert result == {"lease": ["the पट्टा", {"term": "पट्टा"}]}
        assert translator.calls == []

    @pytest.mark.asyncio
    async def test_ai_mode_keeps_keys(self):
        translator = FakeTranslator()
        orchestrator = SummaryTranslationOrchestrator(translator)

        result = await orchestrator.translate_values({"lease": "deed"}, use_ai=True)

        assert result == {"lease": "हिं deed"}


def test_cleanup_markers_last_key_wins():
    assert cleanup_markers({"**a**": 1, "a": 2, "b": ["_x_", 3]}) == {
        "a": 2,
        "b": ["x", 3],
    }


def test_count_untranslated_fields(summary):
    partially = summary.model_copy(
        update={
            "document_overview": "एक पट्टा",
            "key_parties": ["मकान मालिक", "Tenant"],
        }
    )
    # "Tenant", "Clause 1", the concern and the plain summary; "2024" has no letters
    assert count_untranslated_fields(partially) == 4
