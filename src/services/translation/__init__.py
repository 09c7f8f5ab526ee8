"""Hindi translation of summaries and free text."""

from .ai_translator import AITranslator, translate_with_ai
from .orchestrator import (
    SummaryTranslationOrchestrator,
    translate_object_complete,
    translate_summary,
)
from .term_dictionary import TermDictionary, get_term_dictionary


__all__ = [
    "AITranslator",
    "SummaryTranslationOrchestrator",
    "TermDictionary",
    "get_term_dictionary",
    "translate_object_complete",
    "translate_summary",
    "translate_with_ai",
]
