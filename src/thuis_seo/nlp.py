import re
import unicodedata
from collections import Counter
from typing import Iterable, List

# Minimum token length kept by the tokenizer
MIN_TOKEN_LENGTH = 3
# Minimum length for a single word to count as a keyword on its own
MIN_WORD_LENGTH = 4

# ASCII word characters only; anything else becomes a separator
_NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


def strip_accents(text: str) -> str:
    """Remove combining diacritical marks ("impresión" -> "impresion")."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_text(text: str) -> str:
    """
    Normalize text for keyword matching.

    Lowercases, removes accents, replaces punctuation with spaces and
    collapses whitespace. Applying it twice gives the same result.

    Args:
        text: Raw text (product description, blog post, ...)

    Returns:
        Normalized text, empty string for empty input
    """
    if not text:
        return ""
    text = strip_accents(text.lower())
    text = _NON_WORD.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()


def tokenize(text: str, min_length: int = MIN_TOKEN_LENGTH) -> List[str]:
    """Normalize and split text into tokens of at least ``min_length`` characters."""
    normalized = normalize_text(text)
    if not normalized:
        return []
    return [w for w in normalized.split(" ") if len(w) >= min_length]


def word_frequencies(
    tokens: Iterable[str],
    stopwords: Iterable[str],
    min_length: int = MIN_WORD_LENGTH,
) -> Counter:
    """Count significant single words (no stopwords, at least ``min_length`` chars)."""
    stop = set(stopwords)
    return Counter(w for w in tokens if w not in stop and len(w) >= min_length)


def split_sentences(text: str) -> List[str]:
    """
    Split text on sentence-ending punctuation.

    Returns the raw (untrimmed) pieces so callers can apply their own
    length filter; empty pieces are kept.
    """
    return _SENTENCE_BOUNDARY.split(text)


def count_words(text: str) -> int:
    """Whitespace word count; an empty string counts as one word."""
    return len(_WHITESPACE.split(text))


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def contains_any(text: str, terms: Iterable[str]) -> bool:
    """True if any of the terms is a substring of text."""
    return any(term in text for term in terms)


def count_matches(text: str, terms: Iterable[str]) -> int:
    """Number of terms that appear as substrings of text."""
    return sum(1 for term in terms if term in text)
