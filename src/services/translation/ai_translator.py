"""Convergence-seeking English to Hindi translation.

`AITranslator.translate` drives a model towards Devanagari-only output with a
bounded state machine:

    FIRST_PASS -> REFINING (up to 5 passes) -> TARGETED_FALLBACK -> DONE

Each phase is entered only while residual Latin tokens remain. The targeted
fallback asks for per-term translations, then for an in-context substitution,
and finally applies the term mapping deterministically if that strictly lowers
the residue. At most eight generative calls are issued per invocation and the
caller always gets a string back.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import StrEnum
from functools import lru_cache

from pydantic_ai.settings import ModelSettings

from core.config import get_settings
from core.observability import get_tracer
from services.ai.exceptions import UpstreamError
from services.ai.generation import TextGenerator, get_translation_generator
from services.translation.prompts import (
    FIRST_PASS_SETTINGS,
    REFINEMENT_SETTINGS,
    TARGETED_SETTINGS,
    build_context_substitution_prompt,
    build_refinement_prompt,
    build_terms_prompt,
    build_translation_prompt,
)
from services.translation.residue import (
    clean_model_output,
    has_residue,
    residual_tokens,
    residue_count,
)
from services.translation.term_dictionary import (
    TermDictionary,
    get_term_dictionary,
    word_pattern,
)


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

MAX_REFINEMENT_PASSES = 5
TARGETED_CALLS = 2
MAX_GENERATIVE_CALLS = 1 + MAX_REFINEMENT_PASSES + TARGETED_CALLS

_TERM_BULLET_RE = re.compile(r"^[-•*]\s+")


class TranslationPhase(StrEnum):
    FIRST_PASS = "first_pass"
    REFINING = "refining"
    TARGETED_FALLBACK = "targeted_fallback"
    DONE = "done"


class TerminationReason(StrEnum):
    CONVERGED = "converged"
    EXHAUSTED = "exhausted"
    UPSTREAM_FAILURE = "upstream_failure"


@dataclass(slots=True)
class TranslationAttemptState:
    """Mutable bookkeeping for one `translate` invocation."""

    source: str
    candidate: str
    phase: TranslationPhase = TranslationPhase.FIRST_PASS
    attempts: int = 0
    calls: int = 0
    residual_tokens: list[str] = field(default_factory=list)
    upstream_failed: bool = False
    termination: TerminationReason | None = None

    @property
    def converged(self) -> bool:
        return not self.residual_tokens

    def accept(self, candidate: str) -> None:
        """Adopt a completed, cleaned response as the current candidate."""
        self.candidate = candidate
        self.residual_tokens = residual_tokens(candidate)

    def finish(self) -> None:
        self.phase = TranslationPhase.DONE
        if self.converged:
            self.termination = TerminationReason.CONVERGED
        elif self.upstream_failed:
            self.termination = TerminationReason.UPSTREAM_FAILURE
        else:
            self.termination = TerminationReason.EXHAUSTED


def parse_term_lines(response: str) -> list[str]:
    """Split a one-term-per-line response, dropping blanks and bullets."""
    return [
        _TERM_BULLET_RE.sub("", line).strip()
        for line in response.split("\n")
        if line.strip()
    ]


def apply_direct_replacements(
    text: str, tokens: list[str], translations: list[str]
) -> str:
    """Replace each token with its positional translation, whole words only.

    Pairs beyond the shorter list are ignored, as are translations that are
    blank or themselves contain residue.
    """
    result = text
    for token, translation in zip(tokens, translations):
        if translation.strip() and not has_residue(translation):
            pattern = word_pattern(token, ignore_case=False)
            result = pattern.sub(lambda _match: translation, result)
    return result


class AITranslator:
    """Translate legal text to Hindi using a TextGenerator.

    Args:
        generator: Opaque text completion boundary.
        dictionary: Term table used when the first model call fails.
        max_refinement_passes: Refinement budget, at most five.
    """

    def __init__(
        self,
        generator: TextGenerator,
        dictionary: TermDictionary,
        max_refinement_passes: int = MAX_REFINEMENT_PASSES,
    ) -> None:
        if not 0 <= max_refinement_passes <= MAX_REFINEMENT_PASSES:
            raise ValueError(
                f"max_refinement_passes must be between 0 and {MAX_REFINEMENT_PASSES}"
            )
        self._generator = generator
        self._dictionary = dictionary
        self._max_refinement_passes = max_refinement_passes

    @property
    def dictionary(self) -> TermDictionary:
        return self._dictionary

    async def translate(self, text: str, enforce_complete: bool = True) -> str:
        """Return the best Hindi rendering of `text`. Never raises UpstreamError."""
        state = await self.run(text, enforce_complete)
        return state.candidate

    async def run(
        self, text: str, enforce_complete: bool = True
    ) -> TranslationAttemptState:
        """Run the state machine and return its final state."""
        state = TranslationAttemptState(source=text, candidate=text)
        if not text or not text.strip():
            state.phase = TranslationPhase.DONE
            state.termination = TerminationReason.CONVERGED
            return state

        with tracer.start_as_current_span("translation.translate") as span:
            span.set_attribute("translation.enforce_complete", enforce_complete)
            span.set_attribute("translation.input_chars", len(text))

            if not await self._first_pass(state):
                state.finish()
                state.termination = TerminationReason.UPSTREAM_FAILURE
            elif not enforce_complete:
                state.phase = TranslationPhase.DONE
                state.termination = (
                    TerminationReason.CONVERGED
                    if state.converged
                    else TerminationReason.EXHAUSTED
                )
            else:
                if not state.converged:
                    logger.info(
                        "Initial translation contains %d English word(s)",
                        len(state.residual_tokens),
                    )
                    await self._refine(state)
                if not state.converged:
                    await self._targeted_fallback(state)
                state.finish()

            span.set_attribute("translation.calls", state.calls)
            span.set_attribute("translation.attempts", state.attempts)
            span.set_attribute("translation.termination", str(state.termination))

        if state.termination is not TerminationReason.CONVERGED and enforce_complete:
            logger.warning(
                "Translation ended %s with %d residual token(s) after %d call(s)",
                state.termination,
                len(state.residual_tokens),
                state.calls,
            )
        return state

    async def _generate(
        self, state: TranslationAttemptState, prompt: str, settings: ModelSettings
    ) -> str:
        state.calls += 1
        response = await self._generator.generate(prompt, settings)
        return clean_model_output(response)

    async def _first_pass(self, state: TranslationAttemptState) -> bool:
        """Issue the initial translation; False means the dictionary was used."""
        try:
            response = await self._generate(
                state, build_translation_prompt(state.source), FIRST_PASS_SETTINGS
            )
        except UpstreamError as exc:
            logger.warning(
                "Translation model unavailable, using dictionary substitution: %s",
                exc.message,
            )
            state.upstream_failed = True
            state.accept(self._dictionary.substitute(state.source))
            return False

        state.accept(response or state.candidate)
        return True

    async def _refine(self, state: TranslationAttemptState) -> None:
        state.phase = TranslationPhase.REFINING
        while not state.converged and state.attempts < self._max_refinement_passes:
            state.attempts += 1
            prompt = build_refinement_prompt(state.candidate, state.residual_tokens)
            try:
                response = await self._generate(state, prompt, REFINEMENT_SETTINGS)
            except UpstreamError as exc:
                logger.warning(
                    "Refinement pass %d failed: %s", state.attempts, exc.message
                )
                state.upstream_failed = True
                break

            if response:
                state.accept(response)
            logger.debug(
                "After refinement pass %d, %d English word(s) remain",
                state.attempts,
                len(state.residual_tokens),
            )

    async def _targeted_fallback(self, state: TranslationAttemptState) -> None:
        state.phase = TranslationPhase.TARGETED_FALLBACK
        tokens = residual_tokens(state.candidate)
        if not tokens:
            return

        try:
            terms_response = await self._generate(
                state, build_terms_prompt(tokens), TARGETED_SETTINGS
            )
            translations = parse_term_lines(terms_response)
            if not translations:
                return

            logger.info(
                "Got %d translation(s) for %d word(s)", len(translations), len(tokens)
            )
            # Positional pairing; extra tokens or translations are dropped
            mapping = dict(zip(tokens, translations))
            final_text = await self._generate(
                state,
                build_context_substitution_prompt(state.candidate, mapping),
                TARGETED_SETTINGS,
            )
        except UpstreamError as exc:
            logger.warning("Targeted translation pass failed: %s", exc.message)
            state.upstream_failed = True
            return

        if final_text and not has_residue(final_text):
            state.accept(final_text)
            return

        direct = apply_direct_replacements(state.candidate, tokens, translations)
        before, after = residue_count(state.candidate), residue_count(direct)
        if after < before:
            logger.info(
                "Direct replacement reduced English words from %d to %d", before, after
            )
            state.accept(direct)


@lru_cache
def get_ai_translator() -> AITranslator:
    """Process-wide translator wired to the configured model and term table."""
    return AITranslator(
        get_translation_generator(),
        get_term_dictionary(),
        get_settings().TRANSLATION_MAX_REFINEMENT_PASSES,
    )


async def translate_with_ai(text: str, enforce_complete: bool = True) -> str:
    """Translate `text` with the process-wide translator."""
    return await get_ai_translator().translate(text, enforce_complete)
