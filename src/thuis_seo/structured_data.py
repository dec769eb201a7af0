"""
Structured data (JSON-LD) generation for product and blog pages.
"""

import json
from typing import Any, Dict, Mapping, Union

from .schema import ArticleData, ProductData

SCHEMA_CONTEXT = "https://schema.org"
DEFAULT_CURRENCY = "EUR"
DEFAULT_AVAILABILITY = "InStock"


def generate_product_structured_data(
    product: Union[ProductData, Mapping[str, Any]],
) -> Dict[str, Any]:
    """
    Generate Product schema markup.

    An Offer is only included when the product has a (non-zero) price.

    Args:
        product: ProductData or dict with name, description and optional
            price, currency, image, sku, availability

    Returns:
        JSON-LD dictionary
    """
    if not isinstance(product, ProductData):
        product = ProductData.model_validate(dict(product))

    schema: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Product",
        "name": product.name,
        "description": product.description,
    }

    if product.image:
        schema["image"] = product.image
    if product.sku:
        schema["sku"] = product.sku
    if product.price:
        schema["offers"] = {
            "@type": "Offer",
            "price": product.price,
            "priceCurrency": product.currency or DEFAULT_CURRENCY,
            "availability": f"{SCHEMA_CONTEXT}/{product.availability or DEFAULT_AVAILABILITY}",
        }

    return schema


def generate_article_structured_data(
    article: Union[ArticleData, Mapping[str, Any]],
) -> Dict[str, Any]:
    """
    Generate Article schema markup for a blog post.

    Args:
        article: ArticleData or dict with title, description and optional
            author, datePublished, dateModified, image

    Returns:
        JSON-LD dictionary
    """
    if not isinstance(article, ArticleData):
        article = ArticleData.model_validate(dict(article))

    schema: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Article",
        "headline": article.title,
        "description": article.description,
    }

    if article.author:
        schema["author"] = {"@type": "Person", "name": article.author}
    if article.date_published:
        schema["datePublished"] = article.date_published
    if article.date_modified:
        schema["dateModified"] = article.date_modified
    if article.image:
        schema["image"] = article.image

    return schema


def render_json_ld(schema: Mapping[str, Any]) -> str:
    """Wrap a JSON-LD dictionary in an HTML script tag."""
    return f'<script type="application/ld+json">\n{json.dumps(schema, indent=2, ensure_ascii=False)}\n</script>'
