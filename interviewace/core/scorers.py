"""
Dimension scorers for InterviewAce

Five independent heuristics, each returning a raw integer score in
[0, 100]. Scorers never raise on degenerate input.
"""

import math
import re

from interviewace.core.text import (
    avg_sentence_length,
    clamp,
    extract_sentences,
    preprocess,
    round_half_up,
    word_count,
)


# ============================================================================
# PHRASE AND MARKER TABLES
# ============================================================================

STRONG_PHRASES: tuple[str, ...] = (
    "I implemented", "I designed", "I built", "I created", "I developed",
    "I solved", "I optimized", "I improved", "I achieved", "I delivered",
    "successfully", "effectively", "efficiently", "accomplished",
    "demonstrated", "proven", "resulted in", "led to", "ensured",
)

WEAK_PHRASES: tuple[str, ...] = (
    "maybe", "perhaps", "possibly", "might", "not sure", "I think",
    "I guess", "probably", "kind of", "sort of", "somewhat", "hopefully",
    "try to", "attempted", "didn't really", "not very",
)

OWNERSHIP_PATTERN = re.compile(
    r"\bI\s+(implemented|designed|built|created|developed|solved)", re.IGNORECASE
)

SEQUENTIAL_MARKERS: tuple[str, ...] = (
    "first", "second", "third", "next", "then", "after", "finally",
    "initially", "subsequently", "lastly", "step 1", "step 2",
)

STAR_MARKERS: tuple[str, ...] = (
    "situation", "task", "action", "result", "outcome", "impact",
    "challenge", "approach", "solution", "achieved",
)

LOGICAL_CONNECTORS: tuple[str, ...] = (
    "because", "therefore", "however", "consequently", "thus",
    "as a result", "due to", "leads to", "which means",
)


def _count_present(text: str, markers: tuple[str, ...]) -> int:
    """Number of markers that occur (as substrings) in already-lowercased text."""
    return sum(1 for marker in markers if marker.lower() in text)


def _tiered(count: int, two_or_more: int, one: int) -> int:
    if count >= 2:
        return two_or_more
    if count == 1:
        return one
    return 0


# ============================================================================
# SCORERS
# ============================================================================

def score_relevance(question: str, answer: str) -> int:
    """
    Blend of question-token coverage and Jaccard similarity.

    Returns 0 when the question has no content tokens.
    """
    question_tokens = set(preprocess(question))
    if not question_tokens:
        return 0

    answer_tokens = set(preprocess(answer))
    intersection = len(question_tokens & answer_tokens)
    union = len(question_tokens | answer_tokens)

    coverage = intersection / len(question_tokens)
    similarity = intersection / union if union else 0.0

    return min(round_half_up((coverage * 0.7 + similarity * 0.3) * 100), 100)


def score_clarity(answer: str) -> int:
    """Reward moderate sentence length and a moderate overall length."""
    if not extract_sentences(answer):
        return 0

    avg_length = avg_sentence_length(answer)
    total_words = word_count(answer)

    score = 50

    if 10 <= avg_length <= 20:
        score += 30
    elif 6 <= avg_length <= 25:
        score += 20
    elif avg_length < 6:
        score += 10
    else:
        score += 5

    if 30 <= total_words <= 150:
        score += 20
    elif 20 <= total_words <= 200:
        score += 10

    if total_words < 10:
        score -= 30

    return int(clamp(score, 0, 100))


def score_technical(answer: str, keywords: list[str]) -> int:
    """
    Distinct domain keyword matches, scaled by the size of the keyword list.

    A keyword matches when it occurs in the lowercased answer or in the
    joined preprocessed tokens. Returns a neutral 50 with no keywords.
    """
    if not keywords:
        return 50

    answer_lower = answer.lower()
    tokens_joined = " ".join(preprocess(answer))

    matched = {
        keyword.lower()
        for keyword in keywords
        if keyword.lower() in answer_lower or keyword.lower() in tokens_joined
    }
    matches = len(matched)

    score = min(matches / math.sqrt(len(keywords)) * 50, 100)
    if matches >= 3:
        score += 10
    if matches >= 5:
        score += 10

    return round_half_up(min(score, 100))


def score_confidence(answer: str) -> int:
    """Assertive phrasing raises the score, hedging lowers it."""
    text = answer.lower()
    score = 50
    score += 8 * _count_present(text, STRONG_PHRASES)
    score -= 12 * _count_present(text, WEAK_PHRASES)

    if OWNERSHIP_PATTERN.search(answer):
        score += 10

    return int(clamp(score, 0, 100))


def score_structure(answer: str) -> int:
    """Sequencing words, STAR markers, logical connectors and sentence count."""
    text = answer.lower()
    score = 40
    score += _tiered(_count_present(text, SEQUENTIAL_MARKERS), 20, 10)
    score += _tiered(_count_present(text, STAR_MARKERS), 20, 10)
    score += _tiered(_count_present(text, LOGICAL_CONNECTORS), 15, 8)

    if 3 <= len(extract_sentences(answer)) <= 8:
        score += 10

    return int(clamp(score, 0, 100))
