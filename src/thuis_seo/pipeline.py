"""
Keyword extraction pipeline.

Single-language extraction keeps the best-scoring instance of every
keyword. The multilingual pipeline merges extracted, synthetic and
translated keywords with last-write-wins, so later sources (vocabulary
and translations) override text-derived candidates on collision.
"""

import logging
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Union

from .generators import CandidateGenerator
from .lexicon import PRODUCT_CONCEPTS
from .multilingual import concept_keywords, expand_language, translate_siblings
from .schema import KeywordAnalysis, KeywordContext, Language, MultilingualKeywordResult

MAX_KEYWORDS = 10
MAX_KEYWORDS_PER_LANGUAGE = 15
TRANSLATED_TOP_KEYWORDS = 5
# Extracted keywords in this language feed the cross-language translations
TRANSLATION_SOURCE_LANGUAGE = Language.ES

ContextLike = Union[KeywordContext, Mapping[str, Any], None]


def _coerce_context(context: ContextLike, **overrides) -> KeywordContext:
    if context is None:
        data: Dict[str, Any] = {}
    elif isinstance(context, KeywordContext):
        data = context.model_dump()
    else:
        data = dict(context)
    data.update(overrides)
    return KeywordContext.model_validate(data)


def _sort_by_score(keywords: Iterable[KeywordAnalysis]) -> List[KeywordAnalysis]:
    # sorted() is stable: equal scores keep their insertion order
    return sorted(keywords, key=lambda k: k.relevance_score, reverse=True)


def dedupe_max_score(keywords: Iterable[KeywordAnalysis]) -> List[KeywordAnalysis]:
    """Deduplicate by keyword, keeping the highest-scoring instance."""
    best: Dict[str, KeywordAnalysis] = {}
    for kw in keywords:
        current = best.get(kw.keyword)
        if current is None or kw.relevance_score > current.relevance_score:
            best[kw.keyword] = kw
    return list(best.values())


def dedupe_last_wins(
    keywords: Iterable[KeywordAnalysis],
    key: Callable[[KeywordAnalysis], Hashable] = lambda k: k.keyword,
) -> List[KeywordAnalysis]:
    """Deduplicate by key; a later instance replaces an earlier one in place."""
    merged: Dict[Hashable, KeywordAnalysis] = {}
    for kw in keywords:
        merged[key(kw)] = kw
    return list(merged.values())


def extract_keywords(text: str, context: ContextLike = None) -> List[KeywordAnalysis]:
    """
    Extract and rank keywords from text for a single language.

    Args:
        text: Free text (product description, blog post, page content)
        context: Optional KeywordContext or dict with ``category``,
            ``product_type``/``productType`` and ``language`` (default nl)

    Returns:
        Up to 10 KeywordAnalysis records sorted by relevance, best first
    """
    ctx = _coerce_context(context)
    generator = CandidateGenerator(language=ctx.language, category=ctx.category)
    candidates = generator.generate(text or "")
    ranked = _sort_by_score(dedupe_max_score(candidates))
    logging.debug(f"Extracted {len(ranked)} unique {ctx.language.value} keywords")
    return ranked[:MAX_KEYWORDS]


def extract_multilingual_keywords(
    text: str,
    context: ContextLike = None,
) -> MultilingualKeywordResult:
    """
    Generate keywords in Dutch, English and Spanish for the Belgian market.

    Combines, per language (Dutch first, then English, then Spanish):
    1. keywords extracted from the text with that language's rules
    2. industry x location, modifier x industry and pure industry keywords
    3. product concept phrases
    4. translations of the top Spanish keywords into English and Dutch

    Args:
        text: Source text, typically a Spanish product description
        context: Optional category/product type; any language is ignored

    Returns:
        MultilingualKeywordResult with at most 15 keywords per language and
        a combined list deduplicated by (keyword, language)
    """
    languages = Language.priority_order()
    per_language: Dict[Language, List[KeywordAnalysis]] = {lang: [] for lang in languages}
    combined: List[KeywordAnalysis] = []

    def add(records: List[KeywordAnalysis]) -> None:
        for kw in records:
            per_language[kw.language].append(kw)
        combined.extend(records)

    extracted: Dict[Language, List[KeywordAnalysis]] = {}
    for lang in languages:
        extracted[lang] = extract_keywords(text, _coerce_context(context, language=lang))
        add(extracted[lang])

    for lang in languages:
        add(expand_language(lang))

    for concept_key in PRODUCT_CONCEPTS:
        for lang in languages:
            add(concept_keywords(concept_key, lang))

    add(translate_siblings(
        extracted[TRANSLATION_SOURCE_LANGUAGE],
        TRANSLATION_SOURCE_LANGUAGE,
        limit=TRANSLATED_TOP_KEYWORDS,
    ))

    ranked = {
        lang: _sort_by_score(dedupe_last_wins(per_language[lang]))[:MAX_KEYWORDS_PER_LANGUAGE]
        for lang in languages
    }
    merged = _sort_by_score(dedupe_last_wins(combined, key=lambda k: (k.keyword, k.language)))

    logging.info(
        f"Multilingual keywords: nl={len(ranked[Language.NL])}, en={len(ranked[Language.EN])}, "
        f"es={len(ranked[Language.ES])}, combined={len(merged)}"
    )
    return MultilingualKeywordResult(
        es=ranked[Language.ES],
        en=ranked[Language.EN],
        nl=ranked[Language.NL],
        combined=merged,
    )
