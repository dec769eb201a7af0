"""SEO configuration audit.

Scores a page's title, description, keywords, canonical URL and Open Graph
image against a fixed rubric and lists what to fix. Recommendations are
in Spanish, the language of the admin screens.
"""

import logging
from typing import Any, List, Mapping, Tuple, Union

from .schema import SEOConfiguration, SEOValidationResult

PASS_SCORE = 70

TITLE_RANGE = (30, 60)
TITLE_MIN_PARTIAL = 20
DESCRIPTION_RANGE = (120, 160)
DESCRIPTION_MIN_PARTIAL = 50
KEYWORD_COUNT_RANGE = (5, 15)
LONG_TAIL_SHARE = 0.5
SECURE_SCHEME = "https://"


def _score_title(title: str) -> Tuple[int, List[str]]:
    low, high = TITLE_RANGE
    if low <= len(title) <= high:
        return 20, []
    points = 10 if len(title) >= TITLE_MIN_PARTIAL else 0
    return points, [f"El título debe tener entre {low}-{high} caracteres (actual: {len(title)})"]


def _score_description(description: str) -> Tuple[int, List[str]]:
    low, high = DESCRIPTION_RANGE
    if low <= len(description) <= high:
        return 25, []
    points = 15 if len(description) >= DESCRIPTION_MIN_PARTIAL else 0
    return points, [
        f"La descripción debe tener entre {low}-{high} caracteres (actual: {len(description)})"
    ]


def _score_keywords(keywords: List[str]) -> Tuple[int, List[str]]:
    low, high = KEYWORD_COUNT_RANGE
    points, recommendations = 0, []

    if low <= len(keywords) <= high:
        points += 20
    else:
        points += 10
        recommendations.append(
            f"Se recomiendan entre {low}-{high} palabras clave (actual: {len(keywords)})"
        )

    long_tail = [k for k in keywords if len(k.split(" ")) >= 2]
    if len(long_tail) < len(keywords) * LONG_TAIL_SHARE:
        recommendations.append("Incluye más palabras clave long-tail (2-4 palabras)")
    else:
        points += 10

    return points, recommendations


def calculate_config_score(config: SEOConfiguration) -> Tuple[int, List[str]]:
    """
    Accumulate rubric points for every field independently.

    Rubric:
    - title: 20 (30-60 chars) / 10 (>= 20 chars)
    - description: 25 (120-160 chars) / 15 (>= 50 chars)
    - keywords: 20 (5-15 keywords) / 10, plus 10 if at least half are long-tail
    - canonical URL: 10 (https) / 5 (other scheme)
    - Open Graph image: 15

    Returns:
        Tuple of (raw score, recommendations)
    """
    score = 0
    recommendations: List[str] = []

    if config.title:
        points, recs = _score_title(config.title)
        score += points
        recommendations.extend(recs)
    else:
        recommendations.append("Falta el título de la página")

    if config.description:
        points, recs = _score_description(config.description)
        score += points
        recommendations.extend(recs)
    else:
        recommendations.append("Falta la meta descripción")

    if config.keywords:
        points, recs = _score_keywords(list(config.keywords))
        score += points
        recommendations.extend(recs)
    else:
        recommendations.append("Agrega palabras clave SEO")

    if config.canonical_url:
        if config.canonical_url.startswith(SECURE_SCHEME):
            score += 10
        else:
            score += 5
            recommendations.append("La URL canónica debe usar HTTPS")
    else:
        recommendations.append("Configura una URL canónica")

    if config.og_image:
        score += 15
    else:
        recommendations.append("Agrega una imagen Open Graph para redes sociales")

    return score, recommendations


def validate_seo_configuration(
    config: Union[SEOConfiguration, Mapping[str, Any]],
) -> SEOValidationResult:
    """
    Validate an SEO configuration and return recommendations.

    Args:
        config: SEOConfiguration or dict with title, description, keywords,
            canonicalUrl/canonical_url and ogImage/og_image

    Returns:
        SEOValidationResult; ``is_valid`` is True when score >= 70
    """
    if not isinstance(config, SEOConfiguration):
        config = SEOConfiguration.model_validate(dict(config or {}))

    raw_score, recommendations = calculate_config_score(config)
    score = min(raw_score, 100)

    logging.debug(f"SEO configuration score {score} with {len(recommendations)} recommendations")
    return SEOValidationResult(
        is_valid=score >= PASS_SCORE,
        score=score,
        recommendations=recommendations,
    )
