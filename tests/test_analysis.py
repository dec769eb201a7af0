"""Tests for SEO configuration scoring."""

from thuis_seo.analysis import calculate_config_score, validate_seo_configuration
from thuis_seo.schema import SEOConfiguration

COMPLETE_CONFIG = {
    "title": "A" * 45,
    "description": "B" * 140,
    "keywords": ["3d printing", "custom parts", "fast shipping", "quality prints", "belgium printing"],
    "canonicalUrl": "https://x.test",
    "ogImage": "https://x.test/i.png",
}


class TestValidateSEOConfiguration:
    """Rubric scoring and recommendations."""

    def test_complete_configuration(self):
        result = validate_seo_configuration(COMPLETE_CONFIG)
        assert result.score == 100
        assert result.is_valid is True
        assert result.recommendations == []

    def test_empty_configuration(self):
        result = validate_seo_configuration({})
        assert result.score == 0
        assert result.is_valid is False
        assert len(result.recommendations) == 5

    def test_partial_configuration(self):
        result = validate_seo_configuration({
            "title": "x" * 25,
            "keywords": ["pla"],
            "canonicalUrl": "http://x.test",
        })
        # title 10 + keywords 10 + insecure canonical 5
        assert result.score == 25
        assert result.is_valid is False
        assert len(result.recommendations) == 6
        assert "La URL canónica debe usar HTTPS" in result.recommendations

    def test_partial_description_points(self):
        score, recs = calculate_config_score(SEOConfiguration(description="d" * 60))
        assert score == 15
        assert any("actual: 60" in r for r in recs)

    def test_short_keyword_list_without_long_tail(self):
        score, recs = calculate_config_score(SEOConfiguration(keywords=["pla", "abs"]))
        assert score == 10
        assert "Incluye más palabras clave long-tail (2-4 palabras)" in recs

    def test_pass_threshold(self):
        config = dict(COMPLETE_CONFIG, ogImage=None, canonicalUrl="http://x.test")
        result = validate_seo_configuration(config)
        assert result.score == 80
        assert result.is_valid is True

    def test_accepts_snake_case_and_model(self):
        config = SEOConfiguration(
            title="A" * 45,
            canonical_url="https://x.test",
            og_image="https://x.test/i.png",
        )
        assert validate_seo_configuration(config).score == 45

    def test_score_always_in_range(self):
        for config in ({}, COMPLETE_CONFIG, {"title": "t"}, {"keywords": ["a b"] * 20}):
            result = validate_seo_configuration(config)
            assert 0 <= result.score <= 100
            assert result.is_valid == (result.score >= 70)

    def test_to_dict(self):
        data = validate_seo_configuration(COMPLETE_CONFIG).to_dict()
        assert data == {"isValid": True, "score": 100, "recommendations": []}
