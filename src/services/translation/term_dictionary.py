"""Deterministic legal-term lookup and substitution.

The dictionary is the offline fallback of the translation pipeline: when the
generative model is unavailable, `substitute` still turns known legal
vocabulary into Hindi. One instance is built per process and shared
read-only.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache

from services.translation.legal_terms import LEGAL_TERMS


def word_pattern(word: str, *, ignore_case: bool = True) -> re.Pattern[str]:
    """Compile a whole-word matcher for `word`.

    Boundaries are ASCII so that a Latin word directly adjacent to Devanagari
    text (e.g. inside a half-translated sentence) is still matched.
    """
    flags = re.ASCII | (re.IGNORECASE if ignore_case else 0)
    return re.compile(rf"\b{re.escape(word)}\b", flags)


class TermDictionary:
    """Case-insensitive English to Hindi term table."""

    def __init__(self, terms: Mapping[str, str]) -> None:
        self._terms: dict[str, str] = {k.lower(): v for k, v in terms.items()}

        # Phrases before single words, each group longest first, so "legal
        # heir" is replaced before "heir" can fragment it.
        multi_word = sorted((k for k in self._terms if " " in k), key=len, reverse=True)
        single_word = sorted(
            (k for k in self._terms if " " not in k), key=len, reverse=True
        )
        self._replacements: tuple[tuple[re.Pattern[str], str], ...] = tuple(
            (word_pattern(key), self._terms[key]) for key in (*multi_word, *single_word)
        )

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and term.lower() in self._terms

    def lookup(self, term: str) -> str:
        """Translate a single term or short phrase.

        Exact (case-insensitive) matches win. Otherwise each whitespace
        separated token is looked up on its own and unknown tokens are kept
        as written. If no token is known the input is returned unchanged.
        """
        if not term:
            return ""

        exact = self._terms.get(term.lower())
        if exact is not None:
            return exact

        tokens = term.split()
        translated = [self._terms.get(token.lower(), token) for token in tokens]
        if translated == tokens:
            return term
        return " ".join(translated)

    def substitute(self, text: str) -> str:
        """Replace every known term in `text` with its Hindi equivalent."""
        if not text:
            return ""

        result = text
        for pattern, replacement in self._replacements:
            result = pattern.sub(lambda _match: replacement, result)
        return result


@lru_cache
def get_term_dictionary() -> TermDictionary:
    """Process-wide dictionary built from the bundled legal term table."""
    return TermDictionary(LEGAL_TERMS)
