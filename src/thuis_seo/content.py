"""
Meta description and page title generation.

Both generators work on plain strings and always respect their
character budget, so their output can be stored directly in page
metadata.
"""

import logging
import random
from typing import Optional, Sequence

from .lexicon import CALLS_TO_ACTION
from .metrics import calculate_readability
from .nlp import collapse_whitespace, split_sentences
from .schema import MetaDescriptionResult
from .text import strip_html

DEFAULT_META_LENGTH = 160
DEFAULT_TITLE_LENGTH = 60
DEFAULT_TITLE_SUFFIX = " - Thuis 3D"
MIN_SENTENCE_LENGTH = 10
# Room that must remain before a call-to-action is considered
CTA_HEADROOM = 30
# A word boundary further back than this from the cut point is ignored
WORD_BOUNDARY_WINDOW = 30
ELLIPSIS = "..."
MIN_TRUNCATED_TITLE = 20


def _pick_sentence(content: str, keywords: Sequence[str]) -> str:
    sentences = [s for s in split_sentences(content) if len(s.strip()) > MIN_SENTENCE_LENGTH]
    lowered = [k.lower() for k in keywords]

    for sentence in sentences:
        if any(k in sentence.lower() for k in lowered):
            return sentence.strip()
    if sentences:
        return sentences[0].strip()
    return content


def _truncate_at_word(text: str, max_length: int) -> str:
    if max_length < len(ELLIPSIS):
        return text[:max_length]
    cut = text[: max_length - len(ELLIPSIS)].strip()
    last_space = cut.rfind(" ")
    if last_space != -1 and last_space > max_length - WORD_BOUNDARY_WINDOW:
        cut = cut[:last_space]
    return cut + ELLIPSIS


def generate_meta_description(
    title: str,
    content: str,
    max_length: int = DEFAULT_META_LENGTH,
    keywords: Optional[Sequence[str]] = None,
    include_call_to_action: bool = True,
    rng: Optional[random.Random] = None,
) -> MetaDescriptionResult:
    """
    Generate an SEO meta description from page content.

    Picks the first sentence mentioning one of the keywords (or the first
    sentence), optionally appends a call-to-action and truncates at a word
    boundary so the result never exceeds ``max_length``.

    Args:
        title: Page title (kept for API symmetry; not used in the text)
        content: Page content, HTML allowed
        max_length: Maximum description length (0 or None -> 160)
        keywords: Target keywords to prefer and measure
        include_call_to_action: Append a random call-to-action if it fits
        rng: Random source for the call-to-action choice (seed it in tests)

    Returns:
        MetaDescriptionResult with description and quality metrics
    """
    max_length = max_length or DEFAULT_META_LENGTH
    keywords = list(keywords or [])
    rng = rng or random.Random()

    clean_content = collapse_whitespace(strip_html(content or ""))
    description = _pick_sentence(clean_content, keywords)

    if include_call_to_action and len(description) < max_length - CTA_HEADROOM:
        cta = rng.choice(CALLS_TO_ACTION)
        if len(description) + len(cta) + 2 <= max_length:
            description = f"{description}. {cta}"

    if len(description) > max_length:
        description = _truncate_at_word(description, max_length)

    lowered = description.lower()
    keyword_density = (
        sum(1 for k in keywords if k.lower() in lowered) / len(keywords) if keywords else 0.0
    )

    logging.debug(f"Meta description for '{title}': {len(description)}/{max_length} chars")
    return MetaDescriptionResult(
        description=description,
        character_count=len(description),
        keyword_density=keyword_density,
        readability_score=calculate_readability(description),
    )


def generate_page_title(
    base_title: str,
    suffix: Optional[str] = None,
    max_length: int = DEFAULT_TITLE_LENGTH,
    include_keyword: Optional[str] = None,
) -> str:
    """
    Generate an SEO page title with brand suffix.

    Truncation path when ``title + suffix`` does not fit:
    - if ``max_length - len(suffix) - 3 > 20``: the title is cut to that
      budget and ``"..." + suffix`` is appended (still ends with suffix)
    - otherwise the title alone is cut to ``max_length`` without suffix

    Args:
        base_title: Page title before optimization
        suffix: Brand suffix (default " - Thuis 3D")
        max_length: Maximum title length (0 or None -> 60)
        include_keyword: Keyword to prefix as "{keyword} - {title}" if absent

    Returns:
        Title of at most ``max_length`` characters
    """
    max_length = max_length or DEFAULT_TITLE_LENGTH
    suffix = DEFAULT_TITLE_SUFFIX if suffix is None else suffix
    title = (base_title or "").strip()

    if include_keyword and include_keyword.lower() not in title.lower():
        keyword_title = f"{include_keyword} - {title}"
        if len(keyword_title) + len(suffix) <= max_length:
            title = keyword_title

    if len(title) + len(suffix) <= max_length:
        return title + suffix

    max_title_length = max_length - len(suffix) - len(ELLIPSIS)
    if max_title_length > MIN_TRUNCATED_TITLE:
        return title[:max_title_length].strip() + ELLIPSIS + suffix

    return title[:max_length]
