"""
Transliteration engine with TOML-based configuration.

Holds one frozen symbol-table set and the matcher built over it, behind a
single interface the hosting editor calls on every edit.

Usage:
    from tamilwriter.engine import Transliterator

    engine = Transliterator()                          # default tables
    engine = Transliterator.from_config()              # loads tamilwriter.toml
    engine.transliterate("vanakkam ulagam!")

Config layout (all sections optional):

    [engine]
    enabled = true

    [tables.consonants]
    f = "ஃப்"

    [tables.vowels]            # every vowel key needs a matching sign
    [tables.vowel_signs]
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from tamilwriter.composer import transliterate as _transliterate_text
from tamilwriter.errors import ConfigError, SymbolTableError
from tamilwriter.matcher import WordMatcher
from tamilwriter.symbols import DEFAULT_TABLES, SymbolTables

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "tamilwriter.toml"


class Transliterator:
    """Latin phonetic spelling to Tamil script, over whole buffers.

    When ``enabled`` is False the buffer passes through untouched, so a
    host can wire its transliteration toggle straight to this flag.
    """

    def __init__(self, tables: SymbolTables = DEFAULT_TABLES, enabled: bool = True):
        self.tables = tables
        self.enabled = enabled
        self.matcher = WordMatcher(tables)

    @classmethod
    def from_config(cls, config_path: str | Path = DEFAULT_CONFIG_NAME) -> Transliterator:
        """Build a Transliterator from a TOML config file.

        Table entries in the config are layered over the default tables.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        try:
            with config_path.open("rb") as f:
                cfg = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

        engine_cfg = cfg.get("engine", {})
        if not isinstance(engine_cfg, dict):
            raise ConfigError(f"[engine] must be a table in {config_path}")
        enabled = engine_cfg.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ConfigError(f"[engine] enabled must be true or false in {config_path}")

        tables_cfg = cfg.get("tables", {})
        if not isinstance(tables_cfg, dict):
            raise ConfigError(f"[tables] must be a table in {config_path}")
        tables = DEFAULT_TABLES
        if tables_cfg:
            unknown = set(tables_cfg) - {"vowels", "consonants", "vowel_signs"}
            if unknown:
                raise SymbolTableError(
                    f"Unknown table section(s) in {config_path}: {', '.join(sorted(map(str, unknown)))}"
                )
            for name, section in tables_cfg.items():
                if not isinstance(section, dict):
                    raise SymbolTableError(
                        f"[tables.{name}] must be a table of key = symbol in {config_path}"
                    )
            tables = DEFAULT_TABLES.with_overrides(
                vowels=tables_cfg.get("vowels"),
                consonants=tables_cfg.get("consonants"),
                vowel_signs=tables_cfg.get("vowel_signs"),
            )
            logger.info(
                "Loaded %d table override(s) from %s",
                sum(len(v) for v in tables_cfg.values()),
                config_path,
            )

        return cls(tables=tables, enabled=enabled)

    # ── Conversion ───────────────────────────────────────────────────────

    def transliterate(self, text: str) -> str:
        """Convert the whole buffer (or return it unchanged when disabled)."""
        if not self.enabled:
            return text
        return _transliterate_text(text, self.matcher)

    def transliterate_word(self, word: str) -> str:
        return self.matcher.transliterate_word(word)

    # ── Introspection ────────────────────────────────────────────────────

    def summary(self) -> str:
        state = "enabled" if self.enabled else "disabled (pass-through)"
        lines = [f"Transliterator ({state})"]
        for sub_line in self.tables.summary().split("\n"):
            lines.append(f"  {sub_line}")
        return "\n".join(lines)


def find_default_config() -> Path | None:
    """Look for tamilwriter.toml in the current directory."""
    candidate = Path(DEFAULT_CONFIG_NAME)
    if candidate.exists():
        return candidate
    return None
