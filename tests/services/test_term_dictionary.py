"""Tests for the deterministic legal term dictionary."""

from __future__ import annotations

import pytest

from services.translation.legal_terms import LEGAL_TERMS
from services.translation.residue import has_residue
from services.translation.term_dictionary import (
    TermDictionary,
    get_term_dictionary,
    word_pattern,
)


@pytest.fixture
def dictionary() -> TermDictionary:
    return TermDictionary(
        {
            "heir": "वारिस",
            "legal heir": "कानूनी वारिस",
            "court": "न्यायालय",
            "high court": "उच्च न्यायालय",
            "lease": "पट्टा",
            "Contract": "अनुबंध",
        }
    )


class TestLookup:
    def test_exact_match_is_case_insensitive(self, dictionary):
        assert dictionary.lookup("contract") == "अनुबंध"
        assert dictionary.lookup("HIGH COURT") == "उच्च न्यायालय"

    def test_token_fallback_keeps_unknown_tokens(self, dictionary):
        assert dictionary.lookup("lease deed") == "पट्टा deed"

    def test_unresolved_term_returned_unchanged(self, dictionary):
        assert dictionary.lookup("Notarised  affidavit") == "Notarised  affidavit"

    def test_empty_term(self, dictionary):
        assert dictionary.lookup("") == ""


class TestSubstitute:
    def test_multi_word_keys_win_over_single_words(self, dictionary):
        assert dictionary.substitute("The legal heir went to the High Court.") == (
            "The कानूनी वारिस went to the उच्च न्यायालय."
        )

    def test_whole_words_only(self, dictionary):
        assert dictionary.substitute("courtyard leases") == "courtyard leases"

    def test_matches_next_to_devanagari(self, dictionary):
        assert dictionary.substitute("यह lease है") == "यह पट्टा है"

    def test_is_idempotent_on_translated_text(self, dictionary):
        once = dictionary.substitute("The court granted the lease to the heir")
        assert dictionary.substitute(once) == once

    def test_empty_text(self, dictionary):
        assert dictionary.substitute("") == ""


def test_word_pattern_case_sensitivity():
    assert word_pattern("Lease").search("lease") is not None
    assert word_pattern("Lease", ignore_case=False).search("lease") is None


def test_bundled_table_is_well_formed():
    dictionary = get_term_dictionary()

    assert len(dictionary) == len(LEGAL_TERMS)
    assert len(dictionary) > 300
    assert "jurisdiction" in dictionary
    assert all(not has_residue(value) for value in LEGAL_TERMS.values())
    assert get_term_dictionary() is dictionary


def test_bundled_substitution_is_idempotent():
    dictionary = get_term_dictionary()
    text = "The tenant shall pay rent to the landlord under this lease agreement."
    once = dictionary.substitute(text)

    assert once != text
    assert dictionary.substitute(once) == once
