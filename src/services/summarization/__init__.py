"""Legal document summarization."""

from .orchestrator import SummarizationOrchestrator, summarize_text
from .section_extractor import extract


__all__ = ["SummarizationOrchestrator", "extract", "summarize_text"]
