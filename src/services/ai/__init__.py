"""Init file for AI services."""

from .exceptions import (
    AIServiceError,
    SummaryGenerationError,
    TextExtractionError,
    UpstreamError,
)
from .generation import AgentTextGenerator, TextGenerator


__all__ = [
    "AIServiceError",
    "AgentTextGenerator",
    "SummaryGenerationError",
    "TextExtractionError",
    "TextGenerator",
    "UpstreamError",
]
