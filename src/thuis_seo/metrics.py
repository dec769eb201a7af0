"""
Heuristic keyword metrics.

Relevance, search volume tier and semantic category are estimated from
the reference vocabulary only; there is no live ranking or volume data.
"""

from typing import Optional

from .lexicon import (
    DEFAULT_CATEGORY,
    INDUSTRY_TERMS,
    LOCATION_TERMS,
    SEMANTIC_CATEGORIES,
    TRENDING_MODIFIERS,
)
from .nlp import contains_any, count_matches, count_words, split_sentences
from .schema import Language, SearchVolume

BASE_RELEVANCE = 50
INDUSTRY_TERM_BOOST = 15
CATEGORY_BOOST = 20
IDEAL_LENGTH_BOOST = 10
MODIFIER_BOOST = 8
LOCATION_BOOST = 12


def clamp_score(score: float, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, score)))


def calculate_relevance(
    keyword: str,
    language: Language = Language.NL,
    category: Optional[str] = None,
) -> int:
    """
    Score a keyword candidate for topical relevance (0-100).

    Starts from 50 and adds, independently:
    - +15 per industry term contained in the keyword
    - +20 if the page category is contained in the keyword
    - +10 for 2-4 word phrases
    - +8 per trending modifier contained in the keyword
    - +12 once if a Belgian location is mentioned

    Args:
        keyword: Candidate phrase (already normalized)
        language: Language whose vocabulary is used
        category: Optional page/product category

    Returns:
        Relevance score clamped to 0-100
    """
    score = BASE_RELEVANCE

    score += INDUSTRY_TERM_BOOST * count_matches(keyword, INDUSTRY_TERMS[language])

    if category and category.lower() in keyword:
        score += CATEGORY_BOOST

    if 2 <= len(keyword.split(" ")) <= 4:
        score += IDEAL_LENGTH_BOOST

    score += MODIFIER_BOOST * count_matches(keyword, TRENDING_MODIFIERS[language])

    if contains_any(keyword, LOCATION_TERMS[language]):
        score += LOCATION_BOOST

    return clamp_score(score)


def estimate_search_volume(keyword: str, language: Language = Language.NL) -> SearchVolume:
    """
    Classify a keyword into a coarse search volume tier.

    Local searches and short industry terms are treated as high volume,
    short phrases or any industry match as medium, everything else low.
    """
    word_count = len(keyword.split(" "))
    has_industry_term = contains_any(keyword, INDUSTRY_TERMS[language])

    if contains_any(keyword, LOCATION_TERMS[language]):
        return SearchVolume.HIGH
    if word_count <= 2 and has_industry_term:
        return SearchVolume.HIGH
    if word_count <= 3 or has_industry_term:
        return SearchVolume.MEDIUM
    return SearchVolume.LOW


def categorize_keyword(keyword: str) -> str:
    """Return the first semantic category whose terms occur in the keyword."""
    for category, terms in SEMANTIC_CATEGORIES:
        if contains_any(keyword, terms):
            return category
    return DEFAULT_CATEGORY


def calculate_readability(text: str) -> float:
    """
    Simplified readability score (0-100) based on sentence length.

    15-20 words per sentence scores 100; every word of deviation from
    17.5 costs 5 points.
    """
    words = count_words(text)
    sentences = len([s for s in split_sentences(text) if s.strip()]) or 1
    avg_words_per_sentence = words / sentences

    if 15 <= avg_words_per_sentence <= 20:
        return 100.0

    deviation = abs(17.5 - avg_words_per_sentence)
    return max(0.0, 100.0 - deviation * 5)
