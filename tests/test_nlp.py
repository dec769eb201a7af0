"""Tests for text normalization and tokenization."""

import pytest

from thuis_seo.nlp import (
    count_words,
    normalize_text,
    split_sentences,
    strip_accents,
    tokenize,
    word_frequencies,
)
from thuis_seo.stopwords import NL_STOPWORDS, get_stopwords


class TestNormalizeText:
    """Lowercasing, accent removal and punctuation stripping."""

    def test_strips_accents_and_punctuation(self):
        assert normalize_text("Impresión 3D, ¡rápida!") == "impresion 3d rapida"

    def test_collapses_whitespace(self):
        assert normalize_text("  Snel \n\t printen  ") == "snel printen"

    def test_hyphens_become_separators(self):
        assert normalize_text("3D-printen") == "3d printen"

    def test_empty_input(self):
        assert normalize_text("") == ""
        assert normalize_text("   ") == ""
        assert normalize_text("!!!") == ""

    @pytest.mark.parametrize("text", [
        "Ofrecemos impresión 3D profesional en Bélgica.",
        "Snelle verzending naar Brussel & Antwerpen!",
        "PETG / PLA / ABS",
        "already normalized text",
    ])
    def test_idempotent(self, text):
        once = normalize_text(text)
        assert normalize_text(once) == once

    def test_strip_accents(self):
        assert strip_accents("bélgica envío") == "belgica envio"


class TestTokenize:
    """Token stream used by the n-gram generator."""

    def test_drops_short_tokens(self):
        assert tokenize("De 3D printer is snel") == ["printer", "snel"]

    def test_empty(self):
        assert tokenize("") == []

    def test_custom_min_length(self):
        assert tokenize("pla abs nylon", min_length=4) == ["nylon"]


class TestWordFrequencies:
    """Single word frequency counting."""

    def test_counts_significant_words(self):
        freqs = word_frequencies(["printen", "printen", "snel", "voor", "pla"], NL_STOPWORDS)
        assert freqs == {"printen": 2, "snel": 1}

    def test_most_common_keeps_first_seen_order_on_ties(self):
        freqs = word_frequencies(["gent", "brugge", "gent", "leuven", "brugge"], NL_STOPWORDS)
        assert [w for w, _ in freqs.most_common()] == ["gent", "brugge", "leuven"]


class TestHelpers:

    def test_split_sentences(self):
        parts = split_sentences("Eerste zin. Tweede zin!? Derde")
        assert [p.strip() for p in parts] == ["Eerste zin", "Tweede zin", "Derde"]

    def test_count_words_empty_counts_one(self):
        assert count_words("") == 1
        assert count_words("een twee drie") == 3


class TestStopwords:

    def test_language_lookup(self):
        assert "het" in get_stopwords("nl")
        assert "the" in get_stopwords("en")
        assert "los" in get_stopwords("es")

    def test_unknown_language_falls_back_to_dutch(self):
        assert get_stopwords("fr") is get_stopwords("nl")
        assert get_stopwords(None) is get_stopwords("nl")

    def test_stopwords_are_immutable(self):
        with pytest.raises(AttributeError):
            get_stopwords("nl").add("snel")
