"""Mention extraction tests — pure tests for extract_mentions.

Tests cover:
    - Whitespace tokenization (spaces, tabs, newlines)
    - "@" anywhere in a token qualifies; no address validation
    - Tokens kept verbatim (trailing punctuation, case)
    - Dedup with first-occurrence order
"""

from friendgraph.core.extract_mentions import extract_mentions


def test_extracts_single_mention():
    assert extract_mentions("hi there bob@example.com") == ["bob@example.com"]


def test_text_without_at_sign_yields_nothing():
    assert extract_mentions("hello world, no mentions here") == []


def test_empty_text_yields_nothing():
    assert extract_mentions("") == []


def test_splits_on_any_whitespace():
    text = "a@x.com\tb@y.com\nc@z.com   d@w.com"
    assert extract_mentions(text) == ["a@x.com", "b@y.com", "c@z.com", "d@w.com"]


def test_at_sign_anywhere_counts():
    assert extract_mentions("@handle mid@dle trailing@") == [
        "@handle", "mid@dle", "trailing@",
    ]


def test_trailing_punctuation_is_kept():
    assert extract_mentions("ping bob@example.com, please") == ["bob@example.com,"]


def test_case_is_preserved():
    assert extract_mentions("Bob@Example.com") == ["Bob@Example.com"]


def test_duplicates_collapse_in_first_seen_order():
    text = "b@x.com a@x.com b@x.com a@x.com"
    assert extract_mentions(text) == ["b@x.com", "a@x.com"]
