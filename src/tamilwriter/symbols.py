"""
Tamil phonetic symbol tables for tamilwriter.

Principles:
- Made for natural Latin keyboard input by Tamil speakers (ITRANS / Azhagi style)
- Three tables keyed by phonetic spelling: standalone vowels, consonants,
  and dependent vowel signs
- Capital letters are aliases, not normalization: "I" is "ii", but "N" is a
  different consonant from "n"
- Tables are frozen at construction and shared freely between callers

Usage:
    from tamilwriter.symbols import DEFAULT_TABLES, SymbolClass, lookup

    lookup(SymbolClass.CONSONANT, "th")   # 'த்'
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from tamilwriter.errors import SymbolTableError

# Pulli (virama): suppresses a consonant's inherent vowel.
PULLI = "்"


class SymbolClass(enum.Enum):
    VOWEL = "vowel"
    CONSONANT = "consonant"
    VOWEL_SIGN = "vowel_sign"


# ── Core tables ─────────────────────────────────────────────────────
# Each entry: (latin_key, tamil_symbol, notes)

VOWELS = [
    ("a",   "அ",  "a    - short a"),
    ("aa",  "ஆ",  "aa   - long a"),
    ("A",   "ஆ",  "aa   - long a (capital alias)"),
    ("i",   "இ",  "i    - short i"),
    ("ii",  "ஈ",  "ii   - long i"),
    ("I",   "ஈ",  "ii   - long i (capital alias)"),
    ("u",   "உ",  "u    - short u"),
    ("uu",  "ஊ",  "uu   - long u"),
    ("U",   "ஊ",  "uu   - long u (capital alias)"),
    ("e",   "எ",  "e    - short e"),
    ("ee",  "ஏ",  "ee   - long e"),
    ("E",   "ஏ",  "ee   - long e (capital alias)"),
    ("ai",  "ஐ",  "ai   - diphthong"),
    ("o",   "ஒ",  "o    - short o"),
    ("oo",  "ஓ",  "oo   - long o"),
    ("O",   "ஓ",  "oo   - long o (capital alias)"),
    ("au",  "ஔ",  "au   - diphthong"),
]

# "a" carries no visible mark: the consonant's inherent vowel.
VOWEL_SIGNS = [
    ("a",   "",   "inherent vowel, no sign"),
    ("aa",  "ா",  "aa   - kaal"),
    ("A",   "ா",  "aa   - kaal (capital alias)"),
    ("i",   "ி",  "i"),
    ("ii",  "ீ",  "ii"),
    ("I",   "ீ",  "ii   (capital alias)"),
    ("u",   "ு",  "u"),
    ("uu",  "ூ",  "uu"),
    ("U",   "ூ",  "uu   (capital alias)"),
    ("e",   "ெ",  "e    - kombu"),
    ("ee",  "ே",  "ee   - long kombu"),
    ("E",   "ே",  "ee   - long kombu (capital alias)"),
    ("ai",  "ை",  "ai   - double kombu"),
    ("o",   "ொ",  "o    - kombu + kaal"),
    ("oo",  "ோ",  "oo   - long kombu + kaal"),
    ("O",   "ோ",  "oo   (capital alias)"),
    ("au",  "ௌ",  "au   - kombu + au length mark"),
]

CONSONANTS = [
    # Digraphs bind before their first letter (maximal munch)
    ("ng",  "ங்",  "nga  - velar nasal"),
    ("ch",  "ச்",  "ca   - palatal"),
    ("nj",  "ஞ்",  "nya  - palatal nasal"),
    ("th",  "த்",  "tha  - dental"),
    ("zh",  "ழ்",  "zha  - retroflex approximant"),
    ("sh",  "ஷ்",  "sha  - grantha"),
    ("n2",  "ன்",  "na   - alveolar nasal (digit-marked)"),

    # Single letters
    ("k",   "க்",  "ka"),
    ("t",   "ட்",  "ta   - retroflex"),
    ("N",   "ண்",  "na   - retroflex nasal"),
    ("n",   "ந்",  "na   - dental nasal"),
    ("p",   "ப்",  "pa"),
    ("m",   "ம்",  "ma"),
    ("y",   "ய்",  "ya"),
    ("r",   "ர்",  "ra"),
    ("l",   "ல்",  "la"),
    ("v",   "வ்",  "va"),
    ("L",   "ள்",  "la   - retroflex lateral"),
    ("R",   "ற்",  "ra   - alveolar trill"),
    ("j",   "ஜ்",  "ja   - grantha"),
    ("s",   "ஸ்",  "sa   - grantha"),
    # Stored without pulli: a bare "h" comes out as ஹ
    ("h",   "ஹ",   "ha   - grantha"),
]


# ── Frozen table set ────────────────────────────────────────────────

def _is_phonetic_key(key: str, max_len: int = 2) -> bool:
    return 0 < len(key) <= max_len and key.isascii() and key.isalnum()


def _freeze(entries) -> Mapping[str, str]:
    return MappingProxyType({key: symbol for key, symbol, *_ in entries})


@dataclass(frozen=True)
class SymbolTables:
    """One immutable set of vowel, consonant and vowel-sign tables.

    Built once (at import for the defaults, at engine construction for a
    configured overlay) and never mutated afterwards.
    """

    vowels: Mapping[str, str]
    consonants: Mapping[str, str]
    vowel_signs: Mapping[str, str]

    def __post_init__(self) -> None:
        for name in ("vowels", "consonants", "vowel_signs"):
            table = getattr(self, name)
            if not isinstance(table, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(table)))
        self._validate()

    @classmethod
    def from_entries(cls, vowels, consonants, vowel_signs) -> SymbolTables:
        """Build from (key, symbol, notes) entry lists like VOWELS."""
        return cls(
            vowels=_freeze(vowels),
            consonants=_freeze(consonants),
            vowel_signs=_freeze(vowel_signs),
        )

    def _validate(self) -> None:
        for symbol_class in SymbolClass:
            for key, symbol in self.table(symbol_class).items():
                if not _is_phonetic_key(key):
                    raise SymbolTableError(
                        f"{symbol_class.value} key {key!r}: "
                        "keys must be 1-2 ASCII letters or digits"
                    )
                if not isinstance(symbol, str):
                    raise SymbolTableError(
                        f"{symbol_class.value} {key!r}: symbol must be a string"
                    )
                if not symbol and not (symbol_class is SymbolClass.VOWEL_SIGN and key == "a"):
                    raise SymbolTableError(
                        f"{symbol_class.value} {key!r}: empty symbol"
                    )

        vowel_keys = set(self.vowels)
        sign_keys = set(self.vowel_signs)
        if vowel_keys != sign_keys:
            missing_signs = sorted(vowel_keys - sign_keys)
            missing_vowels = sorted(sign_keys - vowel_keys)
            raise SymbolTableError(
                "vowel and vowel-sign keys must match "
                f"(no sign for {missing_signs}, no vowel for {missing_vowels})"
            )
        if self.vowel_signs.get("a", "") != "":
            raise SymbolTableError("the sign for inherent vowel 'a' must be empty")

    # ── Lookup ───────────────────────────────────────────────────────

    def table(self, symbol_class: SymbolClass) -> Mapping[str, str]:
        if symbol_class is SymbolClass.VOWEL:
            return self.vowels
        if symbol_class is SymbolClass.CONSONANT:
            return self.consonants
        if symbol_class is SymbolClass.VOWEL_SIGN:
            return self.vowel_signs
        raise ValueError(f"Unknown symbol class: {symbol_class!r}")

    def lookup(self, symbol_class: SymbolClass, key: str) -> str | None:
        """Return the symbol for *key* in one table, or None if absent.

        Case-sensitive: callers never lowercase before lookup.
        """
        return self.table(symbol_class).get(key)

    def keys(self, symbol_class: SymbolClass) -> list[str]:
        return list(self.table(symbol_class))

    @property
    def max_key_length(self) -> int:
        return max(
            (len(k) for c in SymbolClass for k in self.table(c)),
            default=0,
        )

    def with_overrides(
        self,
        vowels: Mapping[str, str] | None = None,
        consonants: Mapping[str, str] | None = None,
        vowel_signs: Mapping[str, str] | None = None,
    ) -> SymbolTables:
        """Return a new table set with entries added or replaced.

        The receiver is left untouched.
        """
        return SymbolTables(
            vowels={**self.vowels, **(vowels or {})},
            consonants={**self.consonants, **(consonants or {})},
            vowel_signs={**self.vowel_signs, **(vowel_signs or {})},
        )

    def summary(self) -> str:
        lines = ["Symbol tables"]
        lines.append(f"  Vowels:       {len(self.vowels)} keys")
        lines.append(f"  Consonants:   {len(self.consonants)} keys")
        lines.append(f"  Vowel signs:  {len(self.vowel_signs)} keys")
        lines.append(f"  Longest key:  {self.max_key_length}")
        return "\n".join(lines)


def base_form(consonant: str) -> str:
    """Strip the pulli so a vowel sign can attach."""
    if consonant.endswith(PULLI):
        return consonant[:-len(PULLI)]
    return consonant


DEFAULT_TABLES = SymbolTables.from_entries(VOWELS, CONSONANTS, VOWEL_SIGNS)


# ── Convenience accessors ───────────────────────────────────────────

def lookup(symbol_class: SymbolClass, key: str) -> str | None:
    """Look up *key* in the default tables."""
    return DEFAULT_TABLES.lookup(symbol_class, key)


def format_tables(tables: SymbolTables = DEFAULT_TABLES) -> str:
    """Render every table, longest keys first, for display."""
    lines = []
    for symbol_class in SymbolClass:
        table = tables.table(symbol_class)
        lines.append(f"=== {symbol_class.value} ({len(table)}) ===")
        for key in sorted(table, key=lambda k: (-len(k), k)):
            symbol = table[key] or "(inherent)"
            lines.append(f"  {key:>4s} → {symbol}")
    return "\n".join(lines)


# ── Quick sanity check ──────────────────────────────────────────────

if __name__ == "__main__":
    print("=== Tamil Phonetic Symbol Tables ===\n")
    print(format_tables())
    print()
    print(DEFAULT_TABLES.summary())
