"""Walks summaries and nested data, translating each text leaf.

Summaries are translated field by field without touching field names. The
structural entry points recurse into arbitrary mappings and sequences;
`translate_object_complete` also translates mapping keys, except keys that
already contain Devanagari.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any

from core.config import get_settings
from schemas.summaries import StructuredSummary
from services.translation.ai_translator import AITranslator, get_ai_translator
from services.translation.residue import (
    contains_devanagari,
    has_residue,
    strip_formatting_markers,
)


logger = logging.getLogger(__name__)

TextTranslator = Callable[[str], Awaitable[str]]


def cleanup_markers(value: Any) -> Any:
    """Strip formatting markers from every string leaf and mapping key.

    When two keys collapse to the same cleaned key the later one wins.
    """
    if isinstance(value, str):
        return strip_formatting_markers(value)
    if isinstance(value, Mapping):
        cleaned: dict[Any, Any] = {}
        for key, item in value.items():
            new_key = strip_formatting_markers(key) if isinstance(key, str) else key
            cleaned[new_key] = cleanup_markers(item)
        return cleaned
    if isinstance(value, list | tuple):
        return [cleanup_markers(item) for item in value]
    return value


def count_untranslated_fields(summary: StructuredSummary) -> int:
    """Count string fields (list items included) that still contain English."""
    count = 0
    for value in summary.string_fields().values():
        items = [value] if isinstance(value, str) else value
        count += sum(1 for item in items if has_residue(item))
    return count


class SummaryTranslationOrchestrator:
    """Apply an AITranslator across summaries and nested structures.

    Args:
        translator: Translator used for every text leaf.
        max_concurrency: Upper bound on simultaneous list item translations;
            1 translates items strictly one after another.
    """

    def __init__(self, translator: AITranslator, max_concurrency: int = 1) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        self._translator = translator
        self._max_concurrency = max_concurrency

    @property
    def translator(self) -> AITranslator:
        return self._translator

    async def translate_text(self, text: str, enforce_complete: bool = True) -> str:
        return await self._translator.translate(text, enforce_complete)

    async def _translate_items(
        self, items: Sequence[str], translate: TextTranslator
    ) -> list[str]:
        if self._max_concurrency == 1:
            return [await translate(item) for item in items]

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def bounded(item: str) -> str:
            async with semaphore:
                return await translate(item)

        # gather preserves source order
        return list(await asyncio.gather(*(bounded(item) for item in items)))

    async def translate_summary(
        self, summary: StructuredSummary, enforce_complete: bool = True
    ) -> StructuredSummary:
        """Return a translated copy of `summary`; the input is left untouched."""

        async def translate(text: str) -> str:
            return await self._translator.translate(text, enforce_complete)

        logger.info(
            "Translating summary with enforce_complete=%s", enforce_complete
        )
        translated = StructuredSummary(
            document_overview=await translate(summary.document_overview),
            key_parties=await self._translate_items(summary.key_parties, translate),
            important_clauses=await self._translate_items(
                summary.important_clauses, translate
            ),
            obligations=await self.translate_object_complete(
                summary.obligations, enforce_complete
            ),
            critical_dates=await self._translate_items(
                summary.critical_dates, translate
            ),
            potential_concerns=await self._translate_items(
                summary.potential_concerns, translate
            ),
            plain_language_summary=await translate(summary.plain_language_summary),
        )

        return StructuredSummary.model_validate(
            cleanup_markers(translated.model_dump())
        )

    async def translate_object_complete(
        self, obj: Any, enforce_complete: bool = True
    ) -> Any:
        """Translate keys and values of nested data.

        Keys already containing Devanagari are kept as they are. Non-string
        scalars pass through unchanged.
        """
        if isinstance(obj, str):
            return await self._translator.translate(obj, enforce_complete)

        if isinstance(obj, Mapping):
            result: dict[Any, Any] = {}
            for key, value in obj.items():
                if isinstance(key, str) and not contains_devanagari(key):
                    new_key = await self._translator.translate(key, enforce_complete)
                else:
                    new_key = key
                result[new_key] = await self.translate_object_complete(
                    value, enforce_complete
                )
            return result

        if isinstance(obj, list | tuple):
            return [
                await self.translate_object_complete(item, enforce_complete)
                for item in obj
            ]

        return obj

    async def translate_values(self, obj: Any, use_ai: bool = False) -> Any:
        """Translate string values of nested data, leaving keys untouched.

        With `use_ai` false the term dictionary is used and no model call is
        made.
        """
        if isinstance(obj, str):
            if use_ai:
                return await self._translator.translate(obj)
            return self._translator.dictionary.substitute(obj)

        if isinstance(obj, Mapping):
            return {
                key: await self.translate_values(value, use_ai)
                for key, value in obj.items()
            }

        if isinstance(obj, list | tuple):
            return [await self.translate_values(item, use_ai) for item in obj]

        return obj


def get_translation_orchestrator() -> SummaryTranslationOrchestrator:
    """FastAPI dependency returning an orchestrator over the shared translator."""
    return SummaryTranslationOrchestrator(
        get_ai_translator(), get_settings().TRANSLATION_MAX_CONCURRENCY
    )


async def translate_summary(
    summary: StructuredSummary, enforce_complete: bool = True
) -> StructuredSummary:
    return await get_translation_orchestrator().translate_summary(
        summary, enforce_complete
    )


async def translate_object_complete(obj: Any, enforce_complete: bool = True) -> Any:
    return await get_translation_orchestrator().translate_object_complete(
        obj, enforce_complete
    )
