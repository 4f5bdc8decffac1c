"""Exception types for tamilwriter.

Transliteration itself never raises: these cover startup configuration and
the grammar-suggestion boundary only.
"""


class TamilwriterError(Exception):
    """Base class for tamilwriter errors."""


class SymbolTableError(TamilwriterError, ValueError):
    """A symbol table entry is malformed or the tables are inconsistent."""


class ConfigError(TamilwriterError):
    """The TOML configuration could not be read."""


class SuggestionError(TamilwriterError, ValueError):
    """A grammar-suggestion payload is malformed."""
