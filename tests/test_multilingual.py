"""Tests for translation, vocabulary expansion and multilingual extraction."""

import pytest

from thuis_seo.multilingual import (
    concept_keywords,
    expand_language,
    translate_keyword,
    translate_siblings,
)
from thuis_seo.pipeline import extract_keywords, extract_multilingual_keywords
from thuis_seo.schema import KeywordAnalysis, KeywordType, Language, SearchVolume

SAMPLE_ES = "Prototipo rapido de calidad profesional"


class TestTranslateKeyword:
    """Exact and partial table lookups."""

    def test_exact_match(self):
        result = translate_keyword("3d printing", Language.EN)
        assert result[Language.ES] == "impresión 3d"
        assert result[Language.NL] == "3d-printen"

    def test_exact_match_is_case_insensitive(self):
        assert translate_keyword("  Filamento ")[Language.EN] == "filament"

    def test_partial_match(self):
        assert translate_keyword("custom parts", Language.EN)[Language.NL] == "op maat"

    def test_longest_partial_key_wins(self):
        # "calidad" comes first in the table but "servicio" is longer
        assert translate_keyword("servicio de calidad")[Language.EN] == "service"

    def test_keyword_contained_in_key(self):
        assert translate_keyword("prototip")[Language.EN] == "prototype"

    def test_no_match(self):
        assert translate_keyword("impresion") is None
        assert translate_keyword("xyz") is None

    def test_empty_keyword(self):
        assert translate_keyword("") is None
        assert translate_keyword("   ") is None

    def test_accepts_language_code(self):
        assert translate_keyword("kopen", "nl")[Language.ES] == "comprar"

    def test_invalid_language_code(self):
        with pytest.raises(ValueError):
            translate_keyword("kopen", "fr")


class TestExpandLanguage:
    """Vocabulary-driven synthetic keywords."""

    def test_counts_and_order(self):
        keywords = expand_language(Language.NL)
        assert len(keywords) == 15 + 16 + 6
        assert keywords[0].keyword == "3d-printen belgie"
        assert keywords[15].keyword == "beste 3d-printen"
        assert keywords[-1].keyword == "nylon"

    def test_scores(self):
        keywords = expand_language(Language.ES)
        assert {k.relevance_score for k in keywords[:15]} == {90}
        assert {k.relevance_score for k in keywords[15:31]} == {85}
        assert {k.relevance_score for k in keywords[31:]} == {80}
        assert all(k.keyword_type == KeywordType.PRIMARY for k in keywords[31:])

    def test_concept_keywords(self):
        keywords = concept_keywords("fast_delivery", Language.EN)
        assert [k.keyword for k in keywords] == ["fast shipping", "quick delivery belgium", "home delivery"]
        assert all(k.relevance_score == 88 and k.semantic_category == "fast_delivery" for k in keywords)


class TestTranslateSiblings:

    def test_phrase_and_word_siblings(self):
        source = extract_keywords("Prototipo para empresas", {"language": "es"})
        siblings = translate_siblings(source, Language.ES)
        assert siblings
        assert all(s.language in (Language.EN, Language.NL) for s in siblings)

    def test_word_siblings_are_secondary_with_penalty(self):
        source = extract_keywords(SAMPLE_ES, {"language": "es"})
        top = source[0]
        siblings = translate_siblings(source[:1], Language.ES)
        words = [s for s in siblings if s.keyword_type == KeywordType.SECONDARY]
        assert words
        assert all(s.relevance_score == top.relevance_score - 5 for s in words)

    def test_identical_translations_skipped(self):
        source = [KeywordAnalysis(
            keyword="filament",
            relevance_score=80,
            search_volume=SearchVolume.HIGH,
            keyword_type=KeywordType.PRIMARY,
            semantic_category="material",
            language=Language.EN,
        )]
        siblings = translate_siblings(source, Language.EN)
        assert {(s.keyword, s.language) for s in siblings} == {("filamento", Language.ES)}


class TestExtractMultilingual:
    """Merged nl/en/es keyword sets."""

    @pytest.fixture
    def result(self):
        return extract_multilingual_keywords(SAMPLE_ES)

    def test_per_language_bounds(self, result):
        for lang in Language:
            keywords = result.for_language(lang)
            scores = [k.relevance_score for k in keywords]
            assert 0 < len(keywords) <= 15
            assert scores == sorted(scores, reverse=True)
            assert all(k.language == lang for k in keywords)

    def test_combined_is_unique_per_language(self, result):
        pairs = [(k.keyword, k.language) for k in result.combined]
        assert len(pairs) == len(set(pairs))
        scores = [k.relevance_score for k in result.combined]
        assert scores == sorted(scores, reverse=True)

    def test_spanish_extraction_ranks_first(self, result):
        assert result.es[0].keyword == "rapido calidad profesional"
        assert result.es[0].relevance_score == 100

    def test_translations_use_last_written_score(self, result):
        en = {k.keyword: k for k in result.en}
        nl = {k.keyword: k for k in result.nl}
        for keyword in ("professional", "quality", "prototype", "best"):
            assert en[keyword].relevance_score == 93
            assert en[keyword].keyword_type == KeywordType.SECONDARY
        for keyword in ("professioneel", "kwaliteit", "prototype", "beste"):
            assert nl[keyword].relevance_score == 93

    def test_empty_text_still_has_vocabulary_keywords(self):
        result = extract_multilingual_keywords("")
        assert len(result.nl) == 15
        assert result.nl[0].keyword == "3d-printen belgie"
        assert result.es[0].keyword == "impresión 3d bélgica"
        assert all(k.relevance_score == 90 for k in result.nl)

    def test_context_language_is_ignored(self):
        result = extract_multilingual_keywords(SAMPLE_ES, {"language": "en", "category": "prototipo"})
        assert result.es and result.nl and result.en

    def test_to_dict_shape(self, result):
        data = result.to_dict()
        assert set(data) == {"es", "en", "nl", "combined"}
        assert "relevanceScore" in data["nl"][0]
