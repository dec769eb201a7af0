"""
Multilingual Stopwords Module for the Thuis 3D SEO engine.

Provides stopword lists for the three storefront languages. These are
deliberately short lists of function words so that product vocabulary
("printen", "model", "service") is never filtered out.

Supported languages:
- Spanish (es) - source language of most product descriptions
- English (en) - international reach
- Dutch (nl) - primary Belgian market
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Union

from .schema import Language


# =============================================================================
# Spanish Stopwords
# =============================================================================
ES_STOPWORDS: FrozenSet[str] = frozenset({
    "de", "el", "la", "los", "las", "un", "una", "unos", "unas",
    "y", "o", "en", "con", "por", "para", "este", "esta", "estos",
    "estas", "del", "al", "que", "su", "sus", "se", "es", "son",
    "muy", "más", "pero", "como", "sin", "sobre", "desde", "hasta",
    "puede", "pueden", "tiene", "tienen", "hacer", "hace", "hacen",
    "siempre", "también", "solo", "sólo", "cada", "todo", "toda",
    "todos", "todas", "uno", "dos", "tres", "ser", "estar", "hay",
    "sido", "siendo", "era", "fue", "fueron", "han", "has", "he",
})


# =============================================================================
# English Stopwords
# =============================================================================
EN_STOPWORDS: FrozenSet[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to",
    "for", "of", "with", "by", "from", "is", "are", "was", "were",
    "be", "been", "being", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "must",
    "this", "that", "these", "those", "it", "its",
})


# =============================================================================
# Dutch Stopwords (Belgium/Netherlands)
# =============================================================================
NL_STOPWORDS: FrozenSet[str] = frozenset({
    "de", "het", "een", "en", "van", "in", "is", "op", "te", "aan",
    "dat", "die", "met", "voor", "zijn", "er", "maar", "om", "ook",
    "als", "kan", "naar", "bij", "of", "uit", "tot", "wat", "dan",
    "nog", "wel", "door", "over", "zou", "zo", "hebben", "worden",
    "niet", "deze", "dit", "hun", "zij", "wij", "jij", "ik", "je",
    "mijn", "we", "hij", "haar", "hem", "ons", "onze", "jullie",
})


STOPWORDS: Mapping[Language, FrozenSet[str]] = MappingProxyType({
    Language.ES: ES_STOPWORDS,
    Language.EN: EN_STOPWORDS,
    Language.NL: NL_STOPWORDS,
})


def get_stopwords(language: Optional[Union[Language, str]] = None) -> FrozenSet[str]:
    """
    Get stopwords for a specific language.

    Args:
        language: Language enum or code ('es', 'en', 'nl'). Unknown or
            missing codes fall back to Dutch, the primary market language.

    Returns:
        Frozen set of stopwords
    """
    if language is None:
        return STOPWORDS[Language.primary()]
    try:
        return STOPWORDS[Language(str(getattr(language, "value", language)).lower().strip())]
    except ValueError:
        return STOPWORDS[Language.primary()]
