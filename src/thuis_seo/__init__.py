"""Thuis 3D SEO - multilingual keyword and content optimization engine."""

from thuis_seo.schema import (
    Language,
    SearchVolume,
    KeywordType,
    KeywordAnalysis,
    KeywordContext,
    MultilingualKeywordResult,
    MetaDescriptionResult,
    SEOConfiguration,
    SEOValidationResult,
    ProductData,
    ArticleData,
)
from thuis_seo.pipeline import extract_keywords, extract_multilingual_keywords
from thuis_seo.content import generate_meta_description, generate_page_title
from thuis_seo.analysis import validate_seo_configuration
from thuis_seo.structured_data import (
    generate_product_structured_data,
    generate_article_structured_data,
    render_json_ld,
)
from thuis_seo.imaging import (
    generate_image_seo_metadata,
    generate_seo_filename,
    apply_persuasive_keywords,
)
from thuis_seo.text import strip_html, calculate_reading_time, truncate_text, slugify
from thuis_seo.config import load_config, ConfigValidationError

__all__ = [
    # Modules
    "nlp",
    "metrics",
    "generators",
    "multilingual",
    "pipeline",
    "content",
    "analysis",
    "structured_data",
    "imaging",
    "text",
    "config",
    # Entry points
    "extract_keywords",
    "extract_multilingual_keywords",
    "generate_meta_description",
    "generate_page_title",
    "validate_seo_configuration",
    "generate_product_structured_data",
    "generate_article_structured_data",
    "render_json_ld",
    "generate_image_seo_metadata",
    "generate_seo_filename",
    "apply_persuasive_keywords",
    "strip_html",
    "calculate_reading_time",
    "truncate_text",
    "slugify",
    # Types
    "Language",
    "SearchVolume",
    "KeywordType",
    "KeywordAnalysis",
    "KeywordContext",
    "MultilingualKeywordResult",
    "MetaDescriptionResult",
    "SEOConfiguration",
    "SEOValidationResult",
    "ProductData",
    "ArticleData",
    "load_config",
    "ConfigValidationError",
]

__version__ = "1.0.0"
