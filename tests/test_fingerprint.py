"""Tests for content-word fingerprints."""

from __future__ import annotations

from headline_ticker.config import DEFAULT_STOPWORDS
from headline_ticker.core.fingerprint import fingerprint, tokenize


def test_drops_stopwords_short_tokens_and_punctuation():
    assert fingerprint("The U.S. economy grew 3% in Q2") == {"economy", "grew"}


def test_stopwords_longer_than_minimum_are_dropped():
    result = fingerprint("Protests over the new law spread to their capital")
    assert result == {"protests", "new", "law", "spread", "capital"}


def test_duplicates_collapse_case_insensitively():
    assert fingerprint("Rain rain RAIN everywhere") == {"rain", "everywhere"}


def test_unicode_letters_are_kept():
    assert fingerprint("Zürich café reopens") == {"zürich", "café", "reopens"}


def test_entities_are_decoded_before_tokenizing():
    assert fingerprint("Fish &amp; chips prices soar") == {"fish", "chips", "prices", "soar"}


def test_underscore_is_a_separator():
    assert fingerprint("snake_case naming") == {"snake", "case", "naming"}


def test_empty_and_contentless_input_yield_empty_set():
    assert fingerprint("") == frozenset()
    assert fingerprint(None) == frozenset()
    assert fingerprint("!!! ... ???") == frozenset()
    assert fingerprint("It is what it is") == {"what"}
    assert fingerprint("of the and") == frozenset()


def test_custom_stopwords_and_min_length():
    assert fingerprint("Big cat eats fish", stopwords={"fish"}, min_token_length=4) == {"eats"}
    assert fingerprint("Big cat eats fish", stopwords=[], min_token_length=1) == {
        "big",
        "cat",
        "eats",
        "fish",
    }


def test_returns_frozenset():
    assert isinstance(fingerprint("Markets rally strongly"), frozenset)


def test_default_stopword_list_has_expected_words():
    assert len(DEFAULT_STOPWORDS) == 42
    assert {"the", "their", "being", "not"} <= set(DEFAULT_STOPWORDS)


def test_tokenize_splits_on_non_alphanumerics():
    assert tokenize("Hello, World! 2026-10-19") == ["hello", "world", "2026", "10", "19"]
    assert tokenize("   ") == []


def test_numeric_symbols_that_are_not_digits_split_tokens():
    assert tokenize("Area grew 10km² across region") == ["area", "grew", "10km", "across", "region"]
    assert fingerprint("Rates cut by ½ point") == {"rates", "cut", "point"}
    assert fingerprint("Louis Ⅻ portrait sold") == {"louis", "portrait", "sold"}
