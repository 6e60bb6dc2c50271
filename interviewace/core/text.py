"""
Text preprocessing for InterviewAce

Tokenization helpers shared by the dimension scorers. Everything here is
pure and total: empty or whitespace-only input yields empty results.
"""

import math
import re


STOPWORDS: frozenset[str] = frozenset({
    "a", "an", "the", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "must", "can", "of", "at", "by", "for", "with",
    "about", "against", "between", "into", "through", "during", "before",
    "after", "above", "below", "to", "from", "up", "down", "in", "out", "on",
    "off", "over", "under", "again", "further", "then", "once", "here",
    "there", "when", "where", "why", "how", "all", "both", "each", "few",
    "more", "most", "other", "some", "such", "no", "nor", "not", "only",
    "own", "same", "so", "than", "too", "very", "just", "but", "and", "or",
    "if", "because", "as", "until", "while", "what", "which", "who", "whom",
    "this", "that", "these", "those", "am", "it",
})

MIN_TOKEN_LENGTH = 3

_PUNCTUATION = re.compile(r"[^\w\s]")
_SENTENCE_END = re.compile(r"[.!?]+")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike round()."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def preprocess(text: str) -> list[str]:
    """
    Lowercase, strip punctuation and drop short tokens and stopwords.

    Args:
        text: Raw text

    Returns:
        Content tokens in original order (duplicates kept)
    """
    cleaned = _PUNCTUATION.sub(" ", text.lower())
    return [
        token for token in cleaned.split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOPWORDS
    ]


def extract_sentences(text: str) -> list[str]:
    """Split on runs of terminal punctuation; empty fragments are dropped."""
    return [part.strip() for part in _SENTENCE_END.split(text) if part.strip()]


def word_count(text: str) -> int:
    return len(text.split())


def avg_sentence_length(text: str) -> float:
    """Mean number of words per sentence, 0 when there are no sentences."""
    sentences = extract_sentences(text)
    if not sentences:
        return 0.0
    total_words = sum(word_count(sentence) for sentence in sentences)
    return total_words / len(sentences)
