"""Tests for the word-level matcher (matcher.py)."""

import pytest
from tamilwriter.matcher import KeyTrie, WordMatcher, transliterate_word
from tamilwriter.symbols import DEFAULT_TABLES


# ── KeyTrie ───────────────────────────────────────────────────────────────────

def test_trie_prefers_longest_key():
    trie = KeyTrie(["t", "th"])
    assert trie.longest_match("tha", 0) == "th"


def test_trie_falls_back_to_shorter_key():
    trie = KeyTrie(["t", "th"])
    assert trie.longest_match("ta", 0) == "t"


def test_trie_matches_from_offset():
    trie = KeyTrie(["a", "aa"])
    assert trie.longest_match("kaai", 1) == "aa"


def test_trie_no_match():
    trie = KeyTrie(["a", "aa"])
    assert trie.longest_match("xyz", 0) is None


def test_trie_at_end_of_text():
    trie = KeyTrie(["a"])
    assert trie.longest_match("a", 1) is None


def test_trie_prefix_without_key_is_not_a_match():
    """'n2' is a key but a lone 'n' only matches if 'n' is a key too."""
    trie = KeyTrie(["n2"])
    assert trie.longest_match("n", 0) is None
    assert trie.longest_match("n2", 0) == "n2"


def test_trie_contains():
    trie = KeyTrie(["zh", "z"])
    assert "zh" in trie
    assert "z" in trie
    assert "h" not in trie


# ── match_at ─────────────────────────────────────────────────────────────────

@pytest.fixture
def matcher() -> WordMatcher:
    return WordMatcher(DEFAULT_TABLES)


def test_match_at_consonant_with_sign(matcher):
    assert matcher.match_at("thaa", 0) == ("தா", 4)


def test_match_at_consonant_alone(matcher):
    assert matcher.match_at("km", 0) == ("க்", 1)


def test_match_at_vowel(matcher):
    assert matcher.match_at("aim", 0) == ("ஐ", 2)


def test_match_at_passthrough(matcher):
    assert matcher.match_at("x", 0) == ("x", 1)


def test_match_at_always_advances(matcher):
    word = "thamizh2024qwx"
    i = 0
    while i < len(word):
        _, nxt = matcher.match_at(word, i)
        assert nxt > i
        i = nxt


# ── Digraph precedence ───────────────────────────────────────────────────────

def test_digraph_alone_is_consonant_with_pulli():
    assert transliterate_word("th") == "த்"


def test_digraph_with_inherent_vowel():
    assert transliterate_word("tha") == "த"


def test_digraph_never_decomposes():
    # "t" + "h" would be retroflex ta + ha
    assert transliterate_word("th") != "ட்ஹ்"


@pytest.mark.parametrize("word, expected", [
    ("ng", "ங்"),
    ("ch", "ச்"),
    ("zh", "ழ்"),
    ("sh", "ஷ்"),
    ("nj", "ஞ்"),
])
def test_each_digraph_binds(word, expected):
    assert transliterate_word(word) == expected


def test_digit_marked_consonant():
    assert transliterate_word("n2a") == "ன"
    assert transliterate_word("naan2") == "நான்"


# ── Vowel signs ──────────────────────────────────────────────────────────────

def test_inherent_a_leaves_no_mark():
    assert transliterate_word("ka") == "க"


def test_two_char_sign_beats_one_char():
    # "kai" is ka + ai-sign, not ka + i-sign
    assert transliterate_word("kai") == "கை"


def test_capital_sign_alias():
    assert transliterate_word("kI") == transliterate_word("kii") == "கீ"


def test_vowel_after_consonant_attaches_as_sign():
    assert transliterate_word("hello") == "ஹெல்லொ"


def test_word_initial_vowel_is_independent():
    assert transliterate_word("amma") == "அம்ம"


def test_common_words():
    # lowercase n is the dental na
    assert transliterate_word("vanakkam") == "வநக்கம்"
    assert transliterate_word("thamizh") == "தமிழ்"
    assert transliterate_word("vaNakkam") == "வணக்கம்"


# ── Totality and fallback ────────────────────────────────────────────────────

def test_empty_word():
    assert transliterate_word("") == ""


def test_digits_pass_through():
    assert transliterate_word("123") == "123"


def test_unknown_letters_pass_through():
    assert transliterate_word("qx") == "qx"


def test_mixed_known_and_unknown():
    # w and d are not in the tables
    assert transliterate_word("world") == "wஒர்ல்d"


def test_consonant_before_digit():
    assert transliterate_word("k2") == "க்2"


def test_no_ascii_characters_lost():
    """Every unrecognized input character survives in order."""
    word = "bqwxzfg"
    out = transliterate_word(word)
    assert [c for c in out if c.isascii()] == list(word)


def test_greedy_sign_takes_following_vowel():
    """Known limitation: 'ai' after a consonant always reads as the ai-sign,
    even where a writer meant a-sign followed by standalone i."""
    assert transliterate_word("pai") == "பை"


# ── tokenize ─────────────────────────────────────────────────────────────────

def test_tokenize_chunks_cover_input(matcher):
    pieces = matcher.tokenize("thamizh")
    assert "".join(lat for lat, _ in pieces) == "thamizh"
    assert [lat for lat, _ in pieces] == ["tha", "mi", "zh"]


def test_tokenize_output_matches_transliteration(matcher):
    pieces = matcher.tokenize("vanakkam")
    assert "".join(out for _, out in pieces) == matcher.transliterate_word("vanakkam")


# ── Custom tables ────────────────────────────────────────────────────────────

def test_matcher_uses_given_tables():
    tables = DEFAULT_TABLES.with_overrides(consonants={"f": "ஃப்"})
    m = WordMatcher(tables)
    assert m.transliterate_word("fa") == "ஃப"
    assert transliterate_word("fa") == "fஅ"


# ── Consonant h ──────────────────────────────────────────────────────────────

def test_bare_h_has_no_pulli():
    assert transliterate_word("h") == "ஹ"
    assert transliterate_word("brahm") == "bரஹம்"


def test_h_takes_vowel_signs():
    assert transliterate_word("ha") == "ஹ"
    assert transliterate_word("hi") == "ஹி"
