"""Script checks and artifact cleanup for Hindi output.

A "residual token" is a run of three or more Latin letters left in text that
should be Devanagari only. Its absence is the convergence signal of the
translation loop.
"""

from __future__ import annotations

import re


RESIDUE_RE = re.compile(r"[a-zA-Z]{3,}")
DEVANAGARI_RE = re.compile(r"[\u0900-\u097F]")

FORMATTING_MARKERS_RE = re.compile(r"[*#_~`]")
LEADING_LABEL_RE = re.compile(
    r"^\s*(?:hindi translation|translated text|translation|hindi|अनुवाद)\s*:\s*",
    re.IGNORECASE,
)


def _distinct(tokens: list[str]) -> list[str]:
    return list(dict.fromkeys(tokens))


def has_residue(text: str) -> bool:
    return RESIDUE_RE.search(text) is not None


def residual_tokens(text: str) -> list[str]:
    """Distinct residual tokens in order of first appearance."""
    return _distinct(RESIDUE_RE.findall(text))


def residue_count(text: str) -> int:
    """Number of residual token occurrences, duplicates included."""
    return len(RESIDUE_RE.findall(text))


def contains_devanagari(text: str) -> bool:
    return DEVANAGARI_RE.search(text) is not None


def strip_formatting_markers(text: str) -> str:
    return FORMATTING_MARKERS_RE.sub("", text)


def clean_model_output(text: str) -> str:
    """Remove markdown markers and a leading "Translation:" style label."""
    return LEADING_LABEL_RE.sub("", strip_formatting_markers(text), count=1).strip()
