"""Tests for meta description and page title generation."""

import random

import pytest

from thuis_seo.content import generate_meta_description, generate_page_title
from thuis_seo.lexicon import CALLS_TO_ACTION

SCENARIO_CONTENT = "Ofrecemos impresión 3D profesional en Bélgica. Envío rápido a toda Europa."


class FirstChoice:
    """Deterministic random source that always picks the first option."""

    def choice(self, seq):
        return seq[0]


class TestMetaDescription:
    """Sentence selection, call-to-action and truncation."""

    def test_first_matching_sentence_without_cta(self):
        result = generate_meta_description(
            "T",
            SCENARIO_CONTENT,
            max_length=100,
            keywords=["impresión 3d"],
            include_call_to_action=False,
        )
        assert result.description == "Ofrecemos impresión 3D profesional en Bélgica"
        assert result.character_count == len(result.description) <= 100
        assert result.keyword_density == 1.0
        assert result.readability_score == pytest.approx(42.5)

    def test_prefers_sentence_with_keyword(self):
        result = generate_meta_description(
            "T",
            "Hola a todos los clientes. Ofrecemos filamento PLA de calidad.",
            keywords=["filamento"],
            include_call_to_action=False,
        )
        assert result.description == "Ofrecemos filamento PLA de calidad"

    def test_appends_call_to_action(self):
        result = generate_meta_description(
            "T",
            "Ofrecemos impresión 3D profesional en Bélgica.",
            rng=FirstChoice(),
        )
        assert result.description == (
            "Ofrecemos impresión 3D profesional en Bélgica. ¡Solicita tu cotización ahora!"
        )

    def test_seeded_call_to_action_is_reproducible(self):
        first = generate_meta_description("T", SCENARIO_CONTENT, rng=random.Random(42))
        second = generate_meta_description("T", SCENARIO_CONTENT, rng=random.Random(42))
        assert first == second
        assert any(first.description.endswith(cta) for cta in CALLS_TO_ACTION)

    def test_strips_html(self):
        result = generate_meta_description(
            "T",
            "<p>Hola <strong>mundo</strong> de la impresión 3D.</p>",
            include_call_to_action=False,
        )
        assert result.description == "Hola mundo de la impresión 3D"

    def test_truncates_at_word_boundary(self):
        result = generate_meta_description("T", "palabra " * 40, max_length=50)
        assert result.description == "palabra palabra palabra palabra palabra..."

    def test_truncation_without_spaces_keeps_full_budget(self):
        result = generate_meta_description("T", "a" * 50, max_length=20, include_call_to_action=False)
        assert result.description == "a" * 17 + "..."

    def test_empty_content(self):
        result = generate_meta_description("T", "", include_call_to_action=False)
        assert result.description == ""
        assert result.character_count == 0
        assert result.keyword_density == 0.0

    def test_zero_max_length_uses_default(self):
        result = generate_meta_description("T", "palabra " * 40, max_length=0)
        assert result.character_count <= 160

    @pytest.mark.parametrize("max_length", [1, 2, 3, 10, 40, 80, 100, 160])
    def test_never_exceeds_max_length(self, max_length):
        for seed in range(5):
            result = generate_meta_description(
                "T",
                SCENARIO_CONTENT * 4,
                max_length=max_length,
                keywords=["envío"],
                rng=random.Random(seed),
            )
            assert len(result.description) <= max_length

    def test_to_dict_uses_camel_case(self):
        data = generate_meta_description("T", SCENARIO_CONTENT, include_call_to_action=False).to_dict()
        assert set(data) == {"description", "characterCount", "keywordDensity", "readabilityScore"}


class TestPageTitle:
    """Brand suffix, keyword prefix and truncation paths."""

    def test_fits_with_suffix(self):
        title = generate_page_title("Impresión 3D a medida", suffix=" - Thuis 3D", max_length=40)
        assert title == "Impresión 3D a medida - Thuis 3D"
        assert len(title) <= 40

    def test_default_suffix(self):
        assert generate_page_title("Lámparas") == "Lámparas - Thuis 3D"

    def test_empty_suffix_is_respected(self):
        assert generate_page_title("Lámparas", suffix="") == "Lámparas"

    def test_keyword_prefixed_when_missing(self):
        assert generate_page_title("Lámparas", include_keyword="litofanía") == "litofanía - Lámparas - Thuis 3D"

    def test_keyword_not_repeated(self):
        title = generate_page_title("Lámparas de litofanía", include_keyword="Litofanía")
        assert title == "Lámparas de litofanía - Thuis 3D"

    def test_keyword_skipped_when_too_long(self):
        base = "A" * 45
        assert generate_page_title(base, include_keyword="keyword") == base + " - Thuis 3D"

    def test_truncated_title_keeps_suffix(self):
        title = generate_page_title("A" * 80)
        assert title == "A" * 46 + "..." + " - Thuis 3D"
        assert len(title) == 60

    def test_small_budget_drops_suffix(self):
        assert generate_page_title("A" * 80, max_length=30) == "A" * 30

    @pytest.mark.parametrize("max_length", [5, 20, 25, 35, 40, 60, 80])
    def test_never_exceeds_max_length(self, max_length):
        title = generate_page_title(
            "Impresión 3D profesional para empresas en Bélgica y Europa",
            max_length=max_length,
            include_keyword="filamento",
        )
        assert len(title) <= max_length
