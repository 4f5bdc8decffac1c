"""
Text-level splitter and composer.

Partitions the whole buffer into alternating maximal runs of ASCII
letters/digits (words) and everything else (delimiters: whitespace,
punctuation, text already in Tamil script). Words go through the word
matcher; delimiters are copied through untouched, in order.

The host calls transliterate() with the complete buffer on every edit, so
this must stay deterministic and linear in the input length.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from tamilwriter.matcher import DEFAULT_MATCHER, WordMatcher

_RUN_RE = re.compile(r"[A-Za-z0-9]+|[^A-Za-z0-9]+")


@dataclass(frozen=True, slots=True)
class Run:
    """One maximal segment of the buffer."""

    text: str
    is_word: bool


def split_runs(text: str) -> list[Run]:
    """Partition *text* into alternating word and delimiter runs."""
    return [
        Run(text=m.group(), is_word=_is_ascii_alnum(m.group()[0]))
        for m in _RUN_RE.finditer(text)
    ]


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def compose(runs: list[Run], matcher: WordMatcher = DEFAULT_MATCHER) -> list[str]:
    """Convert each run, returning the output segments in input order."""
    return [
        matcher.transliterate_word(run.text) if run.is_word else run.text
        for run in runs
    ]


def transliterate(text: str, matcher: WordMatcher = DEFAULT_MATCHER) -> str:
    """Transliterate a whole buffer.

    Total over all strings: empty input, pure Tamil, digits and punctuation
    are all fine. Text with no ASCII letters or digits comes back unchanged.
    """
    if not text:
        return text
    return "".join(compose(split_runs(text), matcher))
