"""Heuristic extraction of a StructuredSummary from free-form model text.

The summarizer asks the model for six headed sections, but models drift:
headings get bolded, suffixed with colons, upper-cased, or dropped. Each
section is described as data (`SectionSpec`) and parsed by the same pure
routine with an ordered list of fallbacks, ending in a fixed placeholder.
`extract` never raises.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import StrEnum

from schemas.summaries import StructuredSummary


logger = logging.getLogger(__name__)


class SectionKind(StrEnum):
    SCALAR = "scalar"
    LIST = "list"


@dataclass(frozen=True, slots=True)
class SectionSpec:
    """How one summary section is located and what it falls back to."""

    field: str
    token: str
    heading: str
    kind: SectionKind
    placeholder: tuple[str, ...]

    @property
    def marker(self) -> str:
        """Regex alternation matching either heading form."""
        return f"(?:{re.escape(self.token)}|{re.escape(self.heading)})"


SECTIONS: tuple[SectionSpec, ...] = (
    SectionSpec(
        field="document_overview",
        token="DOCUMENT_OVERVIEW",
        heading="Document Overview",
        kind=SectionKind.SCALAR,
        placeholder=("No overview available",),
    ),
    SectionSpec(
        field="key_parties",
        token="KEY_PARTIES",
        heading="Key Parties",
        kind=SectionKind.LIST,
        placeholder=("No specific parties identified in this document",),
    ),
    SectionSpec(
        field="important_clauses",
        token="IMPORTANT_CLAUSES",
        heading="Important Clauses",
        kind=SectionKind.LIST,
        placeholder=(
            "Section 1: Limits of Civil Court Jurisdiction - Defines which "
            "revenue matters cannot be heard by civil courts",
            "Section 2: Protection for Revenue Officers - Shields officers "
            "from personal liability when acting in good faith",
        ),
    ),
    SectionSpec(
        field="critical_dates",
        token="CRITICAL_DATES",
        heading="Critical Dates",
        kind=SectionKind.LIST,
        placeholder=("1876: Enactment of the Maharashtra Revenue Jurisdiction Act",),
    ),
    SectionSpec(
        field="potential_concerns",
        token="POTENTIAL_CONCERNS",
        heading="Potential Concerns",
        kind=SectionKind.LIST,
        placeholder=(
            "The law's age (1876) may make interpretation challenging in "
            "modern contexts",
            "Definition of 'revenue matter' may be ambiguous in complex "
            "modern transactions",
            "Broad protection for revenue officers may limit accountability "
            "in some cases",
        ),
    ),
    SectionSpec(
        field="plain_language_summary",
        token="PLAIN_LANGUAGE_SUMMARY",
        heading="Plain Language Summary",
        kind=SectionKind.SCALAR,
        placeholder=("No plain language summary available",),
    ),
)


def _compile_body_patterns() -> tuple[re.Pattern[str], ...]:
    patterns = []
    for index, spec in enumerate(SECTIONS):
        if index + 1 < len(SECTIONS):
            boundary = f"{SECTIONS[index + 1].marker}|\\Z"
        else:
            boundary = r"\Z"
        patterns.append(
            re.compile(
                f"{spec.marker}(.*?)(?:{boundary})", re.IGNORECASE | re.DOTALL
            )
        )
    return tuple(patterns)


_BODY_PATTERNS = _compile_body_patterns()

_BULLET_RE = re.compile(r"^[ \t]*-[ \t]+(.+?)[ \t]*$", re.MULTILINE)
_EMPHASIS_RE = re.compile(r"\*\*(.*?)\*\*")
_LEADING_DASH_RE = re.compile(r"^[ \t]*-[ \t]?", re.MULTILINE)

# Residue left by decorated headings: "**Key Parties:**", "**Key Parties**:",
# "Key Parties:". A leading "**" that opens an emphasis span on the same
# line is kept.
_HEADING_PREFIX_RE = re.compile(
    r"^[ \t]*(?::\*\*|\*\*[ \t]*:|\*\*(?![^\r\n]*\*\*)|:)?[ \t]*:?[ \t]*"
)
# Opening decoration of the next heading: "\n**", "\n## "
_HEADING_SUFFIX_RE = re.compile(r"(?:\s+(?:\*\*|#+))+\s*\Z|\s+\Z")


def _section_body(text: str, index: int) -> str | None:
    """Return the raw span following section `index`, or None if absent."""
    match = _BODY_PATTERNS[index].search(text)
    if match is None:
        return None
    body = _HEADING_PREFIX_RE.sub("", match.group(1), count=1)
    return _HEADING_SUFFIX_RE.sub("", body)


def _bullets(body: str) -> list[str]:
    return [item.strip() for item in _BULLET_RE.findall(body) if item.strip()]


def _emphasis(body: str) -> list[str]:
    seen: dict[str, None] = {}
    for span in _EMPHASIS_RE.findall(body):
        cleaned = span.strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return list(seen)


def _inline(body: str) -> list[str]:
    # Text written on the heading line itself: "Key Parties: A and B"
    if body.startswith(("\n", "\r")):
        return []
    first = body.splitlines()[0].strip() if body else ""
    return [first] if first else []


def _paragraph(body: str) -> str:
    stripped = _LEADING_DASH_RE.sub("", body)
    return " ".join(line.strip() for line in stripped.splitlines() if line.strip())


def _extract_list(body: str | None, spec: SectionSpec) -> list[str]:
    if body:
        items = _bullets(body) or _emphasis(body) or _inline(body)
        if items:
            return items
    logger.debug("Section %s degraded to placeholder", spec.field)
    return list(spec.placeholder)


def _extract_scalar(body: str | None, spec: SectionSpec) -> str:
    if body:
        emphasised = _emphasis(body)
        value = " ".join(emphasised) if emphasised else _paragraph(body)
        if value:
            return value
    logger.debug("Section %s degraded to placeholder", spec.field)
    return spec.placeholder[0]


def extract(raw_response_text: str) -> StructuredSummary:
    """Parse a model response into a StructuredSummary.

    Every field is always populated: sections the model omitted or garbled
    receive their fixed placeholder. ``obligations`` is always empty.
    """
    text = raw_response_text or ""
    values: dict[str, object] = {}
    degraded: list[str] = []

    for index, spec in enumerate(SECTIONS):
        body = _section_body(text, index)
        if spec.kind is SectionKind.LIST:
            value: object = _extract_list(body, spec)
            if value == list(spec.placeholder):
                degraded.append(spec.field)
        else:
            value = _extract_scalar(body, spec)
            if value == spec.placeholder[0]:
                degraded.append(spec.field)
        values[spec.field] = value

    if degraded:
        logger.info(
            "Summary response missing %d section(s): %s",
            len(degraded),
            ", ".join(degraded),
        )

    return StructuredSummary(obligations={}, **values)
