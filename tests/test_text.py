"""
Tests for interviewace.core.text

Covers:
- Tokenization with stopword and short-token removal
- Sentence splitting
- Word count and average sentence length
- Rounding helper
"""

from interviewace.core.text import (
    avg_sentence_length,
    extract_sentences,
    preprocess,
    round_half_up,
    word_count,
)


class TestPreprocess:
    def test_lowercases_and_strips_punctuation(self):
        assert preprocess("The quick, brown FOX!") == ["quick", "brown", "fox"]

    def test_drops_stopwords_and_short_tokens(self):
        assert preprocess("it is an API to do so") == ["api"]

    def test_keeps_duplicates_in_order(self):
        assert preprocess("cache cache redis") == ["cache", "cache", "redis"]

    def test_punctuation_splits_words(self):
        assert preprocess("React's useEffect") == ["react", "useeffect"]

    def test_empty_and_whitespace(self):
        assert preprocess("") == []
        assert preprocess("   \n\t ") == []


class TestSentences:
    def test_splits_on_terminal_punctuation_runs(self):
        assert extract_sentences("Hello world. How are you?!  Fine") == [
            "Hello world",
            "How are you",
            "Fine",
        ]

    def test_no_sentences(self):
        assert extract_sentences("") == []
        assert extract_sentences("...!?") == []

    def test_word_count(self):
        assert word_count("one  two\nthree") == 3
        assert word_count("") == 0

    def test_avg_sentence_length(self):
        assert avg_sentence_length("One two three. Four five.") == 2.5
        assert avg_sentence_length("") == 0.0


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(4.49) == 4
    assert round_half_up(0) == 0
