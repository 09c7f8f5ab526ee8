"""Best-effort text extraction from uploaded documents.

`extract_text` never raises for malformed input. When text cannot be
recovered it returns a human readable sentinel; callers detect those with
`is_extraction_failure` and treat them as a soft failure, not as content.
"""

from __future__ import annotations

import logging
from pathlib import Path

import docx
from pypdf import PdfReader


logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
DOC_MEDIA_TYPE = "application/msword"
DOCX_MEDIA_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
TEXT_MEDIA_TYPE = "text/plain"
RTF_MEDIA_TYPE = "application/rtf"

ALLOWED_MEDIA_TYPES: frozenset[str] = frozenset(
    {PDF_MEDIA_TYPE, DOC_MEDIA_TYPE, DOCX_MEDIA_TYPE, TEXT_MEDIA_TYPE, RTF_MEDIA_TYPE}
)

EXTENSION_MEDIA_TYPES: dict[str, str] = {
    ".pdf": PDF_MEDIA_TYPE,
    ".doc": DOC_MEDIA_TYPE,
    ".docx": DOCX_MEDIA_TYPE,
    ".txt": TEXT_MEDIA_TYPE,
    ".rtf": RTF_MEDIA_TYPE,
}
ALLOWED_EXTENSIONS: frozenset[str] = frozenset(EXTENSION_MEDIA_TYPES)

PDF_FAILURE = (
    "This PDF document could not be processed. It may be corrupted, encrypted, "
    "or contain unsupported features."
)
PDF_EMPTY = (
    "This PDF document appears to be damaged or protected. The text could not "
    "be extracted automatically."
)
DOC_FAILURE = (
    "This DOC file could not be processed. It may be password-protected or damaged."
)
OFFICE_FAILURE = (
    "This Office document could not be processed. It may be password-protected "
    "or corrupted."
)
OFFICE_EMPTY = "Document content could not be extracted."
TEXT_EMPTY = "Text could not be extracted: the file appears to be empty."
TEXT_FAILURE = "This text file could not be processed. It may be unreadable."

FAILURE_MARKERS: tuple[str, ...] = (
    "could not be processed",
    "could not be extracted",
    "cannot be processed",
)


def is_extraction_failure(text: str) -> bool:
    """True when `text` is an extraction sentinel rather than document content."""
    lowered = text.lower()
    return any(marker in lowered for marker in FAILURE_MARKERS)


def media_type_for(file_name: str) -> str | None:
    """Media type for a whitelisted file extension, or None."""
    return EXTENSION_MEDIA_TYPES.get(Path(file_name).suffix.lower())


def _extract_pdf(path: Path) -> str:
    try:
        reader = PdfReader(path)
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:
        logger.warning("PDF parsing failed for %s: %s", path.name, e)
        return PDF_FAILURE
    text = "\n".join(pages).strip()
    return text or PDF_EMPTY


def _extract_word(path: Path, failure: str) -> str:
    try:
        document = docx.Document(str(path))
    except Exception as e:
        logger.warning("Word parsing failed for %s: %s", path.name, e)
        return failure
    text = "\n".join(p.text for p in document.paragraphs).strip()
    return text or OFFICE_EMPTY


def _extract_plain(path: Path) -> str:
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("Reading %s failed: %s", path.name, e)
        return TEXT_FAILURE
    return content if content.strip() else TEXT_EMPTY


def extract_text(file_path: str | Path, media_type: str) -> str:
    """Extract text from a stored upload according to its declared media type."""
    path = Path(file_path)
    kind = media_type.lower()

    if "pdf" in kind:
        return _extract_pdf(path)
    if "officedocument.wordprocessingml" in kind:
        return _extract_word(path, OFFICE_FAILURE)
    if "msword" in kind:
        return _extract_word(path, DOC_FAILURE)
    if "text" in kind or "rtf" in kind:
        return _extract_plain(path)

    try:
        size = path.stat().st_size
    except OSError:
        size = 0
    return (
        f"File: {path.name} ({size} bytes) - This file type ({media_type}) "
        "cannot be processed for text extraction."
    )


def read_raw_text(file_path: str | Path) -> str:
    """Read a file as UTF-8, replacing undecodable bytes. Empty on I/O error."""
    try:
        return Path(file_path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("Raw read of %s failed: %s", Path(file_path).name, e)
        return ""
