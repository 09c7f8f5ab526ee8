"""Domain exceptions for the summarization and translation pipeline.

Only failures that the pipeline cannot absorb are modelled as exceptions.
A garbled section heading is handled by placeholder substitution and an
incompletely translated string is returned as a best-effort result; neither
raises. Each exception carries a stable `error_code` for log/metric tagging
and for the API error envelope.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class AIServiceError(Exception):
    """Base class for AI pipeline errors."""

    message: str
    error_code: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.error_code}: {self.message}"


class UpstreamError(AIServiceError):
    """The generative model call failed entirely (quota, network, model fault)."""

    def __init__(self, message: str = "Generative model call failed") -> None:
        super().__init__(message=message, error_code="upstream_failed")


class SummaryGenerationError(AIServiceError):
    def __init__(self, message: str = "Failed to generate summary") -> None:
        super().__init__(message=message, error_code="summary_failed")


class TextExtractionError(AIServiceError):
    def __init__(
        self, message: str = "Failed to extract text from document"
    ) -> None:
        super().__init__(message=message, error_code="extraction_failed")
