"""Text utilities for content processing (HTML stripping, reading time, slugs)."""

import math
import re
from typing import Optional

from bs4 import BeautifulSoup

from .nlp import collapse_whitespace, strip_accents

DEFAULT_WORDS_PER_MINUTE = 200


def strip_html(html: Optional[str]) -> str:
    """
    Strip HTML tags from a string to get plain text.

    Args:
        html: HTML or plain text (None is treated as empty)

    Returns:
        Text content without tags, trimmed
    """
    if not html:
        return ""
    if "<" not in html:
        return html.strip()
    return BeautifulSoup(html, "html.parser").get_text().strip()


def calculate_reading_time(
    content: Optional[str],
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> int:
    """Estimated reading time in whole minutes (minimum 1)."""
    if not content:
        return 1
    text = collapse_whitespace(strip_html(content))
    word_count = len([w for w in text.split(" ") if w])
    return max(1, math.ceil(word_count / max(1, words_per_minute)))


def truncate_text(text: Optional[str], max_length: int) -> str:
    """Cut text to ``max_length`` characters and add an ellipsis when cut."""
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length].strip() + "..."


def slugify(text: str) -> str:
    """
    Build a URL/filename slug: lowercase ASCII, hyphen separated.

    Example:
        >>> slugify("Lámpara Litofanía 3D")
        'lampara-litofania-3d'
    """
    slug = strip_accents(text.lower())
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug.strip())
    return re.sub(r"-+", "-", slug).strip("-")
