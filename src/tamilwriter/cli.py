#!/usr/bin/env python3
"""
Tamil phonetic transliteration CLI.

Loads tamilwriter.toml from the current directory when present, or override
with flags:

    python -m tamilwriter.cli "vanakkam ulagam"
    python -m tamilwriter.cli --file notes.txt
    echo "amma" | python -m tamilwriter.cli
    python -m tamilwriter.cli --tables
    python -m tamilwriter.cli --config custom.toml --tokens "thamizh"
"""

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert Latin phonetic spelling to Tamil script"
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to transliterate (default: read stdin)",
    )
    parser.add_argument(
        "--file",
        metavar="PATH",
        help="Read the text to transliterate from a UTF-8 file",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect tamilwriter.toml)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Disable transliteration and echo the input unchanged",
    )
    parser.add_argument(
        "--tables",
        action="store_true",
        help="Print the active symbol tables and exit",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Show how each word was split into phonetic units",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # ── Build engine ─────────────────────────────────────────────────────

    from tamilwriter.engine import Transliterator, find_default_config
    from tamilwriter.errors import TamilwriterError

    config_path = Path(args.config) if args.config else find_default_config()
    try:
        if config_path is not None:
            logger.debug("Using config %s", config_path)
            engine = Transliterator.from_config(config_path)
        else:
            engine = Transliterator()
    except (FileNotFoundError, TamilwriterError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.raw:
        engine.enabled = False

    # ── Tables ───────────────────────────────────────────────────────────

    if args.tables:
        from tamilwriter.symbols import format_tables

        print(format_tables(engine.tables))
        print()
        print(engine.summary())
        return 0

    # ── Input ────────────────────────────────────────────────────────────

    if args.file:
        try:
            text = Path(args.file).read_text(encoding="utf-8")
        except OSError as e:
            print(f"ERROR: cannot read {args.file}: {e}", file=sys.stderr)
            return 1
    elif args.text:
        text = " ".join(args.text)
    else:
        text = sys.stdin.read()

    # ── Tokens ───────────────────────────────────────────────────────────

    if args.tokens:
        from tamilwriter.composer import split_runs

        for run in split_runs(text):
            if not run.is_word:
                continue
            pieces = engine.matcher.tokenize(run.text)
            units = " + ".join(f"{lat}→{out}" for lat, out in pieces)
            print(f"  {run.text:20s}  {units}")
        return 0

    # ── Convert ──────────────────────────────────────────────────────────

    sys.stdout.write(engine.transliterate(text))
    if not text.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
