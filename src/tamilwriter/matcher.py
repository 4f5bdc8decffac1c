"""
Word-level phonetic matcher.

Converts one run of ASCII letters/digits into Tamil script by greedy
longest-match against the symbol tables, scanning left to right with no
backtracking:

1. longest consonant key at the cursor; if found, try to attach the
   longest vowel sign that follows it (consonant base + sign), otherwise
   emit the consonant with its pulli
2. else the longest standalone vowel key
3. else the raw character, unchanged

The matcher is total: it never raises and every input character ends up in
the output, transformed or passed through.

Known limitation: a consonant+sign match can take letters a writer meant as
the start of the next syllable. Greedy choices are never revisited.

Usage:
    from tamilwriter.matcher import WordMatcher

    WordMatcher().transliterate_word("amma")   # 'அம்ம'
"""

from __future__ import annotations

from typing import Iterable

from tamilwriter.symbols import DEFAULT_TABLES, SymbolClass, SymbolTables, base_form

# Marks a node where a complete key ends.
_END = ""


class KeyTrie:
    """Prefix trie over the keys of one table, for maximal-munch scans."""

    def __init__(self, keys: Iterable[str]):
        self._root: dict = {}
        for key in keys:
            node = self._root
            for ch in key:
                node = node.setdefault(ch, {})
            node[_END] = key

    def longest_match(self, text: str, start: int) -> str | None:
        """Return the longest key that begins at text[start], or None."""
        node = self._root
        best = None
        i = start
        while i < len(text):
            node = node.get(text[i])
            if node is None:
                break
            best = node.get(_END, best)
            i += 1
        return best

    def __contains__(self, key: str) -> bool:
        node = self._root
        for ch in key:
            node = node.get(ch)
            if node is None:
                return False
        return _END in node


class WordMatcher:
    """Greedy transliterator for a single alphanumeric run."""

    def __init__(self, tables: SymbolTables = DEFAULT_TABLES):
        self.tables = tables
        self._consonants = KeyTrie(tables.keys(SymbolClass.CONSONANT))
        self._vowels = KeyTrie(tables.keys(SymbolClass.VOWEL))
        self._signs = KeyTrie(tables.keys(SymbolClass.VOWEL_SIGN))

    def match_at(self, word: str, i: int) -> tuple[str, int]:
        """Decide the output for position *i*.

        Returns (output, next_i) with next_i > i.
        """
        tables = self.tables

        c_key = self._consonants.longest_match(word, i)
        if c_key is not None:
            consonant = tables.consonants[c_key]
            j = i + len(c_key)
            s_key = self._signs.longest_match(word, j)
            if s_key is not None:
                return base_form(consonant) + tables.vowel_signs[s_key], j + len(s_key)
            return consonant, j

        v_key = self._vowels.longest_match(word, i)
        if v_key is not None:
            return tables.vowels[v_key], i + len(v_key)

        # Unrecognized: pass through verbatim
        return word[i], i + 1

    def tokenize(self, word: str) -> list[tuple[str, str]]:
        """Split *word* into (latin_chunk, output) pairs in scan order."""
        pieces = []
        i = 0
        while i < len(word):
            out, nxt = self.match_at(word, i)
            pieces.append((word[i:nxt], out))
            i = nxt
        return pieces

    def transliterate_word(self, word: str) -> str:
        return "".join(out for _, out in self.tokenize(word))


DEFAULT_MATCHER = WordMatcher()


def transliterate_word(word: str) -> str:
    """Transliterate one alphanumeric run with the default tables."""
    return DEFAULT_MATCHER.transliterate_word(word)
