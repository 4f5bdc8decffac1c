"""tamilwriter: phonetic Latin-to-Tamil transliteration engine."""

from tamilwriter.symbols import SymbolClass, SymbolTables, DEFAULT_TABLES, lookup
from tamilwriter.matcher import WordMatcher, KeyTrie, transliterate_word
from tamilwriter.composer import Run, split_runs, transliterate
from tamilwriter.engine import Transliterator
from tamilwriter.suggestions import (
    Suggestion, SuggestionType, GrammarResponse,
    parse_grammar_response, locate_suggestions, apply_suggestion,
)
from tamilwriter.errors import (
    TamilwriterError, SymbolTableError, ConfigError, SuggestionError,
)

__all__ = [
    "SymbolClass", "SymbolTables", "DEFAULT_TABLES", "lookup",
    "WordMatcher", "KeyTrie", "transliterate_word",
    "Run", "split_runs", "transliterate",
    "Transliterator",
    "Suggestion", "SuggestionType", "GrammarResponse",
    "parse_grammar_response", "locate_suggestions", "apply_suggestion",
    "TamilwriterError", "SymbolTableError", "ConfigError", "SuggestionError",
]
