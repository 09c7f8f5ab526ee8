"""Text generation boundary used by summarization and translation.

The pipeline only ever needs "prompt in, text out". `TextGenerator` captures
that contract so orchestrators can be exercised with scripted fakes, while
`AgentTextGenerator` provides the production implementation on top of a
pydantic-ai text agent.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache
from typing import Protocol

from pydantic_ai import Agent
from pydantic_ai.models import Model
from pydantic_ai.settings import ModelSettings

from core.observability import get_tracer
from services.ai.exceptions import UpstreamError
from services.ai.model_factory import get_summary_model, get_translation_model


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


class TextGenerator(Protocol):
    """Protocol for an opaque, fallible text completion function."""

    async def generate(
        self, prompt: str, settings: ModelSettings | None = None
    ) -> str:
        """Return the model's text response; raise UpstreamError on failure."""
        ...


class AgentTextGenerator:
    """TextGenerator backed by a pydantic-ai Agent with plain text output.

    The agent is created on first use so that importing the application does
    not require provider credentials. No retries happen here; callers that
    want another attempt build a new prompt.
    """

    def __init__(self, model_factory: Callable[[], Model], name: str) -> None:
        self._model_factory = model_factory
        self._name = name
        self._agent: Agent[None, str] | None = None

    def _get_agent(self) -> Agent[None, str]:
        if self._agent is None:
            self._agent = Agent(self._model_factory(), output_type=str)
        return self._agent

    async def generate(
        self, prompt: str, settings: ModelSettings | None = None
    ) -> str:
        with tracer.start_as_current_span("llm.generate") as span:
            span.set_attribute("llm.generator", self._name)
            span.set_attribute("llm.prompt_chars", len(prompt))
            try:
                result = await self._get_agent().run(prompt, model_settings=settings)
            except Exception as exc:
                logger.warning(
                    "Generative call failed for %s generator: %s", self._name, exc
                )
                span.set_attribute("llm.failed", True)
                raise UpstreamError(f"{self._name} model call failed: {exc}") from exc

            output = result.output or ""
            span.set_attribute("llm.response_chars", len(output))
            return output


@lru_cache
def get_summary_generator() -> TextGenerator:
    """Process-wide generator for summarization prompts."""
    return AgentTextGenerator(get_summary_model, "summary")


@lru_cache
def get_translation_generator() -> TextGenerator:
    """Process-wide generator for translation prompts."""
    return AgentTextGenerator(get_translation_model, "translation")
