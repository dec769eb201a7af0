"""
Candidate Generator module for the Thuis 3D SEO engine.

Builds scored keyword candidates for a single language from free text:
- N-grams (bigrams and trigrams) from the normalized token stream
- Category-enhanced phrases ("{category} {frequent word}")
- Trending modifier phrases ("{modifier} {most frequent word}")
"""

import logging
from typing import List, Optional

from .lexicon import TRENDING_MODIFIERS
from .metrics import calculate_relevance, categorize_keyword, clamp_score, estimate_search_volume
from .nlp import MIN_TOKEN_LENGTH, MIN_WORD_LENGTH, tokenize, word_frequencies
from .schema import KeywordAnalysis, KeywordType, Language, SearchVolume
from .stopwords import get_stopwords

MIN_BIGRAM_LENGTH = 8
MIN_TRIGRAM_LENGTH = 12
MAX_TRIGRAM_LENGTH = 50
TRIGRAM_BONUS = 5
CATEGORY_BONUS = 10
TRENDING_BONUS = 15


class CandidateGenerator:
    """
    Generates keyword candidates for one language.

    Usage:
        generator = CandidateGenerator(language=Language.NL, category="figuren")
        candidates = generator.generate("Professioneel 3D-printen in Gent ...")
    """

    def __init__(
        self,
        language: Language = Language.NL,
        category: Optional[str] = None,
        top_words: int = 3,
        trending_modifiers: int = 3,
    ):
        """
        Initialize the candidate generator.

        Args:
            language: Language whose stopwords and vocabulary apply
            category: Optional page category used for scoring and expansion
            top_words: Number of frequent words combined with the category
            trending_modifiers: Number of trending modifiers combined with
                the most frequent word
        """
        self.language = Language(language)
        self.category = category
        self.top_words = top_words
        self.trending_modifiers = trending_modifiers
        self.stopwords = get_stopwords(self.language)

    def generate(self, text: str) -> List[KeywordAnalysis]:
        """
        Generate keyword candidates from text.

        Args:
            text: Raw input text

        Returns:
            Candidates in generation order (may contain duplicates)
        """
        tokens = tokenize(text, MIN_TOKEN_LENGTH)
        if not tokens:
            return []

        frequencies = word_frequencies(tokens, self.stopwords, MIN_WORD_LENGTH)
        ranked_words = [word for word, _ in frequencies.most_common()]

        candidates: List[KeywordAnalysis] = []
        candidates.extend(self._bigrams(tokens))
        candidates.extend(self._trigrams(tokens))
        if self.category:
            candidates.extend(self._category_phrases(ranked_words[: self.top_words]))
        if ranked_words:
            candidates.extend(self._trending_phrases(ranked_words[0]))

        logging.debug(
            f"Generated {len(candidates)} {self.language.value} candidates from {len(tokens)} tokens"
        )
        return candidates

    def _bigrams(self, tokens: List[str]) -> List[KeywordAnalysis]:
        results = []
        for w1, w2 in zip(tokens, tokens[1:]):
            if w1 in self.stopwords or w2 in self.stopwords:
                continue
            bigram = f"{w1} {w2}"
            if len(bigram) >= MIN_BIGRAM_LENGTH:
                results.append(self._ngram_candidate(bigram))
        return results

    def _trigrams(self, tokens: List[str]) -> List[KeywordAnalysis]:
        # Only the first token is checked against the stopword list
        results = []
        for w1, w2, w3 in zip(tokens, tokens[1:], tokens[2:]):
            if w1 in self.stopwords:
                continue
            trigram = f"{w1} {w2} {w3}"
            if MIN_TRIGRAM_LENGTH <= len(trigram) <= MAX_TRIGRAM_LENGTH:
                results.append(self._ngram_candidate(trigram, bonus=TRIGRAM_BONUS))
        return results

    def _ngram_candidate(self, phrase: str, bonus: int = 0) -> KeywordAnalysis:
        return KeywordAnalysis(
            keyword=phrase,
            relevance_score=clamp_score(self._relevance(phrase) + bonus),
            search_volume=estimate_search_volume(phrase, self.language),
            keyword_type=KeywordType.LONG_TAIL,
            semantic_category=categorize_keyword(phrase),
            language=self.language,
        )

    def _category_phrases(self, words: List[str]) -> List[KeywordAnalysis]:
        category = self.category.lower()
        results = []
        for word in words:
            phrase = f"{category} {word}"
            results.append(KeywordAnalysis(
                keyword=phrase,
                relevance_score=clamp_score(self._relevance(phrase) + CATEGORY_BONUS),
                search_volume=SearchVolume.MEDIUM,
                keyword_type=KeywordType.SECONDARY,
                semantic_category="category-enhanced",
                language=self.language,
            ))
        return results

    def _trending_phrases(self, primary_word: str) -> List[KeywordAnalysis]:
        results = []
        for modifier in TRENDING_MODIFIERS[self.language][: self.trending_modifiers]:
            if modifier.split(" ")[0] == primary_word:
                continue
            phrase = f"{modifier} {primary_word}"
            results.append(KeywordAnalysis(
                keyword=phrase,
                relevance_score=clamp_score(self._relevance(phrase) + TRENDING_BONUS),
                search_volume=SearchVolume.HIGH,
                keyword_type=KeywordType.SECONDARY,
                semantic_category="trending",
                language=self.language,
            ))
        return results

    def _relevance(self, phrase: str) -> int:
        return calculate_relevance(phrase, self.language, self.category)
