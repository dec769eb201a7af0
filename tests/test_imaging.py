"""Tests for image SEO metadata."""

import random

from thuis_seo.imaging import (
    ALT_MODIFIERS,
    TITLE_PREFIXES,
    apply_persuasive_keywords,
    detect_product_type,
    generate_image_seo_metadata,
    generate_seo_alt_text,
    generate_seo_filename,
    generate_seo_title,
)
from thuis_seo.schema import Language


class FirstChoice:

    def choice(self, seq):
        return seq[0]


class TestSeoTitle:

    def test_detect_product_type(self):
        assert detect_product_type("Figura Dragón") == "figura"
        assert detect_product_type("Modelo 3D Dragón") == "3d"
        assert detect_product_type("Lámpara") is None

    def test_adds_product_type(self):
        assert generate_seo_title("Figura Dragón", Language.ES) == "Figura Dragón - figura decorativa"

    def test_no_product_type_for_language(self):
        assert generate_seo_title("Figura Dragón", Language.EN) == "Figura Dragón"

    def test_enhanced_title(self):
        title = generate_seo_title("Figura Dragón", Language.ES, enhanced=True, rng=FirstChoice())
        assert title == "Comprar Figura Dragón - figura decorativa - Envío Rápido"


class TestAltText:

    def test_first_image(self):
        assert generate_seo_alt_text("Figura Dragón", Language.EN) == "Image of Figura Dragón - Main view"

    def test_later_images_reuse_last_template(self):
        alt = generate_seo_alt_text("Figura", Language.NL, image_index=10, rng=FirstChoice())
        assert alt == "Aanzicht van Figura - exclusief"

    def test_markup_removed(self):
        assert "<" not in generate_seo_alt_text("<b>Figura</b>", Language.ES)


class TestImageMetadata:

    def test_all_languages(self):
        metadata = generate_image_seo_metadata("Figura Dragón", rng=random.Random(1))
        assert set(metadata) == {"es", "en", "nl"}
        for lang, entry in metadata.items():
            assert set(entry) == {"title", "altText", "enhancedTitle"}
            assert entry["enhancedTitle"].split(" ")[0] in " ".join(TITLE_PREFIXES[Language(lang)])

    def test_camel_case_keys(self):
        entry = generate_image_seo_metadata("Figura", rng=random.Random(0))["nl"]
        assert "altText" in entry and "enhancedTitle" in entry
        assert "alt_text" not in entry

    def test_seeded_output_is_reproducible(self):
        first = generate_image_seo_metadata("Figura", 4, rng=random.Random(3))
        second = generate_image_seo_metadata("Figura", 4, rng=random.Random(3))
        assert first == second
        assert any(first["en"]["altText"].endswith(m) for m in ALT_MODIFIERS[Language.EN])


class TestFilename:

    def test_slug_index_and_timestamp(self):
        assert generate_seo_filename("Lámpara Luna", 0, "png", timestamp=1700000000000) == (
            "lampara-luna-1-1700000000000.png"
        )

    def test_no_double_hyphen_before_index(self):
        assert generate_seo_filename("Lámpara -", 0, timestamp=1) == "lampara-1-1.jpg"

    def test_default_timestamp(self):
        name = generate_seo_filename("Figura", 2)
        assert name.startswith("figura-3-")
        assert name.endswith(".jpg")


class TestPersuasiveKeywords:

    def test_dutch(self):
        assert apply_persuasive_keywords("Nieuw product", Language.NL) == "exclusief premiumproduct"

    def test_whole_words_only(self):
        assert apply_persuasive_keywords("Fast delivery", Language.EN) == "Fast express delivery"
        assert apply_persuasive_keywords("Products", Language.EN) == "Products"

    def test_case_insensitive(self):
        assert apply_persuasive_keywords("New PRODUCT", "en") == "exclusive premium product"
