"""Prompt builders for the English to Hindi translation passes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import NamedTuple

from pydantic_ai.settings import ModelSettings


class ExamplePair(NamedTuple):
    english: str
    hindi: str


FEW_SHOT_EXAMPLES: tuple[ExamplePair, ...] = (
    ExamplePair(
        english=(
            "This document is a sample draft of a legal document based on "
            "India's Protection of Women from Domestic Violence Act, 2005."
        ),
        hindi=(
            "यह दस्तावेज़ भारत के महिलाओं का घरेलू हिंसा से संरक्षण अधिनियम, "
            "2005 पर आधारित एक कानूनी दस्तावेज़ का नमूना प्रारूप है।"
        ),
    ),
    ExamplePair(
        english=(
            "The complainant is the individual alleging domestic violence, "
            "seeking protection and relief under the Act."
        ),
        hindi=(
            "शिकायतकर्ता वह व्यक्ति है जो घरेलू हिंसा का आरोप लगा रहा है और "
            "अधिनियम के तहत संरक्षण और राहत की मांग कर रहा है।"
        ),
    ),
    ExamplePair(
        english=(
            "This section prohibits the respondent from committing any further "
            "acts of domestic violence against the complainant."
        ),
        hindi=(
            "यह खंड प्रतिवादी को शिकायतकर्ता के विरुद्ध घरेलू हिंसा के किसी भी "
            "अतिरिक्त कृत्य को करने से रोकता है।"
        ),
    ),
)

FIRST_PASS_SETTINGS = ModelSettings(temperature=0.3, top_p=0.95, max_tokens=8192)
REFINEMENT_SETTINGS = ModelSettings(temperature=0.2, top_p=0.95, max_tokens=8192)
TARGETED_SETTINGS = ModelSettings(temperature=0.1)

_TRANSLATION_REQUIREMENTS = """\
### ABSOLUTE MANDATORY REQUIREMENTS:
1. TRANSLATE EVERY SINGLE WORD into Hindi - NO EXCEPTIONS and NO ENGLISH WORDS should remain
2. ALL common English words (the, and, for, to, with, from, this, that, etc.) MUST be translated to Hindi
3. ALL legal terms MUST be translated to formal Hindi legal terminology
4. Legal terms like "Protection Order", "Residence Order", "Interim Orders", "Complainant" MUST be translated
5. ALL technical terms MUST have Hindi equivalents - do NOT keep any English technical terms
6. ALL names, dates, and numbers MUST also be properly transliterated to Hindi
7. NO special characters (*#_~`) or formatting should be included
8. Your output MUST contain ONLY Devanagari script (Hindi characters) with ABSOLUTELY NO Latin alphabet
9. Maintain paragraph and sentence structure in your translation
10. TRIPLE CHECK your output to ensure NO English words remain"""


def build_translation_prompt(text: str) -> str:
    examples = "\n\n".join(
        f'ENGLISH: "{pair.english}"\nHINDI: "{pair.hindi}"'
        for pair in FEW_SHOT_EXAMPLES
    )
    return (
        "TASK: Translate the following English legal text to Hindi with 100% "
        "accuracy and completeness.\n\n"
        f"{_TRANSLATION_REQUIREMENTS}\n\n"
        "### EXAMPLES OF COMPLETE HINDI TRANSLATIONS:\n\n"
        f"{examples}\n\n"
        "### TEXT TO TRANSLATE:\n"
        f'"{text}"\n\n'
        "### पूर्ण हिंदी अनुवाद (100% शब्द हिंदी में, बिना किसी अंग्रेजी शब्द के):\n"
    )


def build_refinement_prompt(candidate: str, tokens: Sequence[str]) -> str:
    listed = "\n".join(f'- "{token}"' for token in tokens)
    return (
        f"CRITICAL TASK: This Hindi text still contains {len(tokens)} English "
        "words that MUST be translated to Hindi:\n\n"
        "### Text with English words:\n"
        f'"{candidate}"\n\n'
        "### Specific English words to translate:\n"
        f"{listed}\n\n"
        "### ABSOLUTE REQUIREMENTS:\n"
        "1. REPLACE ALL ENGLISH WORDS with Hindi translations\n"
        "2. DO NOT change any existing Hindi text\n"
        "3. Your output MUST be 100% in Devanagari script only\n"
        "4. DO NOT explain or add any commentary\n"
        "5. Return ONLY the complete corrected Hindi text\n"
        "6. Make sure to translate ALL instances of the listed English words\n\n"
        "### पूर्ण हिंदी अनुवाद (बिना किसी अंग्रेजी शब्द के):\n"
    )


def build_terms_prompt(tokens: Sequence[str]) -> str:
    listed = "\n".join(f"- {token}" for token in tokens)
    return (
        "Translate ONLY these specific English terms to Hindi with highest "
        "accuracy:\n"
        f"{listed}\n\n"
        "Format your response as a simple list of Hindi translations only, one "
        "term per line.\n"
        "DO NOT include any English words, explanations, or bullet points in "
        "your response.\n"
    )


def build_context_substitution_prompt(
    candidate: str, mapping: Mapping[str, str]
) -> str:
    listed = "\n".join(f'"{eng}" => "{hin}"' for eng, hin in mapping.items())
    return (
        "TASK: Replace ALL instances of these English words with their Hindi "
        "translations in this text:\n\n"
        f'TEXT: "{candidate}"\n\n'
        "TRANSLATIONS TO APPLY:\n"
        f"{listed}\n\n"
        "REQUIREMENTS:\n"
        "1. Return the COMPLETE text with ALL English words replaced\n"
        "2. Preserve ALL existing Hindi text exactly as is\n"
        "3. Make substitutions in context to ensure proper grammar\n"
        "4. Output ONLY the final Hindi text with NO explanations\n"
    )
