"""
Multilingual keyword expansion for the Belgian market.

Provides cross-language translation of keywords (es/en/nl) and the
synthetic high-confidence keyword sets generated per language from the
reference vocabulary: industry x location, modifier x industry, pure
industry terms and product concept phrases.
"""

import logging
from typing import List, Mapping, Optional, Sequence

from .lexicon import (
    INDUSTRY_TERMS,
    KEYWORD_TRANSLATIONS,
    LOCATION_TERMS,
    PRODUCT_CONCEPTS,
    TRENDING_MODIFIERS,
)
from .metrics import clamp_score
from .schema import KeywordAnalysis, KeywordType, Language, SearchVolume

LOCATION_SCORE = 90
TRENDING_SCORE = 85
INDUSTRY_SCORE = 80
CONCEPT_SCORE = 88
WORD_TRANSLATION_PENALTY = 5

# How many entries of each vocabulary list feed the combinations
LOCATIONS_USED = 3
INDUSTRY_TERMS_WITH_LOCATION = 5
MODIFIERS_USED = 4
INDUSTRY_TERMS_WITH_MODIFIER = 4
PRIMARY_INDUSTRY_TERMS = 6


def translate_keyword(
    keyword: str,
    source_language: Language = Language.ES,
) -> Optional[Mapping[Language, str]]:
    """
    Translate a keyword to all supported languages.

    Checks for an exact match first, then for partial matches where the
    table key is contained in the keyword or the keyword in the key. When
    several keys match partially the longest key wins; equally long keys
    are resolved by table order.

    Args:
        keyword: Keyword or single word to translate
        source_language: Language of the keyword (the table is shared, so
            this only documents the direction of the lookup)

    Returns:
        Mapping of language -> translation, or None if nothing matches
    """
    source_language = Language(source_language)
    keyword_lower = keyword.lower().strip()
    if not keyword_lower:
        return None

    exact = KEYWORD_TRANSLATIONS.get(keyword_lower)
    if exact is not None:
        return exact

    best_key = None
    for key in KEYWORD_TRANSLATIONS:
        if key in keyword_lower or keyword_lower in key:
            if best_key is None or len(key) > len(best_key):
                best_key = key

    if best_key is None:
        return None

    logging.debug(f"Partial translation match for '{keyword_lower}' ({source_language.value}): '{best_key}'")
    return KEYWORD_TRANSLATIONS[best_key]


def _synthetic(
    keyword: str,
    score: int,
    keyword_type: KeywordType,
    category: str,
    language: Language,
) -> KeywordAnalysis:
    return KeywordAnalysis(
        keyword=keyword,
        relevance_score=score,
        search_volume=SearchVolume.HIGH,
        keyword_type=keyword_type,
        semantic_category=category,
        language=language,
    )


def expand_language(language: Language) -> List[KeywordAnalysis]:
    """
    Generate vocabulary-driven keywords for one language.

    Produces, in order:
    - "{industry} {location}" for the first 3 locations x first 5 industry terms
    - "{modifier} {industry}" for the first 4 modifiers x first 4 industry terms
    - the first 6 industry terms as primary keywords

    Args:
        language: Target language

    Returns:
        List of high-confidence KeywordAnalysis records tagged with language
    """
    industry_terms = INDUSTRY_TERMS[language]
    results = []

    for location in LOCATION_TERMS[language][:LOCATIONS_USED]:
        for industry in industry_terms[:INDUSTRY_TERMS_WITH_LOCATION]:
            results.append(_synthetic(
                f"{industry} {location}", LOCATION_SCORE, KeywordType.LONG_TAIL, "location", language
            ))

    for modifier in TRENDING_MODIFIERS[language][:MODIFIERS_USED]:
        for industry in industry_terms[:INDUSTRY_TERMS_WITH_MODIFIER]:
            results.append(_synthetic(
                f"{modifier} {industry}", TRENDING_SCORE, KeywordType.LONG_TAIL, "trending", language
            ))

    for industry in industry_terms[:PRIMARY_INDUSTRY_TERMS]:
        results.append(_synthetic(industry, INDUSTRY_SCORE, KeywordType.PRIMARY, "service", language))

    return results


def concept_keywords(concept_key: str, language: Language) -> List[KeywordAnalysis]:
    """Keywords for every phrase of one product concept in one language."""
    return [
        _synthetic(phrase, CONCEPT_SCORE, KeywordType.LONG_TAIL, concept_key, language)
        for phrase in PRODUCT_CONCEPTS[concept_key][language]
    ]


def translate_siblings(
    keywords: Sequence[KeywordAnalysis],
    source_language: Language = Language.ES,
    limit: int = 5,
) -> List[KeywordAnalysis]:
    """
    Create sibling keywords in the other languages for the top keywords.

    For each of the first ``limit`` keywords:
    - the whole phrase is translated and added at the same score
    - each word is translated and added as a secondary keyword at score - 5

    Translations identical to the source phrase/word are skipped.

    Args:
        keywords: Ranked keywords extracted in the source language
        source_language: Language of the keywords
        limit: Number of top keywords to translate

    Returns:
        Translated KeywordAnalysis records, tagged with their language
    """
    source_language = Language(source_language)
    targets = [lang for lang in Language if lang != source_language]
    siblings = []

    for kw in list(keywords)[:limit]:
        translated = translate_keyword(kw.keyword, source_language)
        if translated:
            for lang in targets:
                if translated[lang] and translated[lang] != kw.keyword:
                    siblings.append(kw.model_copy(update={
                        "keyword": translated[lang],
                        "language": lang,
                    }))

        for word in kw.keyword.lower().split(" "):
            word_translation = translate_keyword(word, source_language)
            if not word_translation:
                continue
            for lang in targets:
                if word_translation[lang] and word_translation[lang] != word:
                    siblings.append(kw.model_copy(update={
                        "keyword": word_translation[lang],
                        "relevance_score": clamp_score(kw.relevance_score - WORD_TRANSLATION_PENALTY),
                        "keyword_type": KeywordType.SECONDARY,
                        "language": lang,
                    }))

    logging.debug(f"Generated {len(siblings)} translated sibling keywords from {source_language.value}")
    return siblings
