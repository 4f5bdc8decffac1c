"""
Grammar-suggestion spans over transliterated text.

The grammar checker receives the engine's output and answers with a JSON
object:

    {"correctedText": "...",
     "suggestions": [{"id": "1", "type": "Sandhi", "original": "...",
                      "suggestion": "...", "reason": "...",
                      "index": 4, "length": 3}]}

Offsets are only meaningful against the exact string they were computed
from. Never re-run the transliterator over text whose suggestions you still
intend to apply; relocate them instead.

Usage:
    from tamilwriter.suggestions import parse_grammar_response, apply_suggestion

    resp = parse_grammar_response(raw_json)
    located = locate_suggestions(text, resp.suggestions)
    text = apply_suggestion(text, located[0])
"""

from __future__ import annotations

import enum
import json
import re
from dataclasses import dataclass, field, replace
from typing import Any

from tamilwriter.errors import SuggestionError

# Models sometimes wrap the JSON in a Markdown code fence.
_FENCE_RE = re.compile(r"```(?:json)?")

_REQUIRED_FIELDS = ("id", "type", "original", "suggestion", "reason")


class SuggestionType(enum.Enum):
    SPELLING = "Spelling"
    GRAMMAR = "Grammar"
    SANDHI = "Sandhi"


@dataclass(frozen=True, slots=True)
class Suggestion:
    """One proposed correction for a span of text."""

    id: str
    type: SuggestionType
    original: str
    suggestion: str
    reason: str
    index: int | None = None   # start offset into the checked text
    length: int | None = None  # length of the original span

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Suggestion:
        if not isinstance(data, dict):
            raise SuggestionError(f"Suggestion must be an object, got {type(data).__name__}")
        missing = [k for k in _REQUIRED_FIELDS if k not in data]
        if missing:
            raise SuggestionError(f"Suggestion missing field(s): {', '.join(missing)}")
        try:
            kind = SuggestionType(data["type"])
        except ValueError:
            raise SuggestionError(f"Unknown suggestion type: {data['type']!r}") from None

        index = data.get("index")
        length = data.get("length")
        for name, value in (("index", index), ("length", length)):
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int) or value < 0
            ):
                raise SuggestionError(f"Suggestion {name} must be a non-negative integer")

        return cls(
            id=str(data["id"]),
            type=kind,
            original=str(data["original"]),
            suggestion=str(data["suggestion"]),
            reason=str(data["reason"]),
            index=index,
            length=length,
        )

    def to_dict(self) -> dict[str, Any]:
        d = {
            "id": self.id,
            "type": self.type.value,
            "original": self.original,
            "suggestion": self.suggestion,
            "reason": self.reason,
        }
        if self.index is not None:
            d["index"] = self.index
        if self.length is not None:
            d["length"] = self.length
        return d


@dataclass(slots=True)
class GrammarResponse:
    corrected_text: str
    suggestions: list[Suggestion] = field(default_factory=list)


def parse_grammar_response(payload: str | dict[str, Any]) -> GrammarResponse:
    """Parse a grammar checker response from a JSON string or decoded dict."""
    if isinstance(payload, str):
        cleaned = _FENCE_RE.sub("", payload).strip()
        try:
            payload = json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise SuggestionError(f"Grammar response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise SuggestionError("Grammar response must be a JSON object")
    if "correctedText" not in payload or "suggestions" not in payload:
        raise SuggestionError("Grammar response needs correctedText and suggestions")
    if not isinstance(payload["suggestions"], list):
        raise SuggestionError("suggestions must be a list")

    return GrammarResponse(
        corrected_text=str(payload["correctedText"]),
        suggestions=[Suggestion.from_dict(s) for s in payload["suggestions"]],
    )


# ── Offsets ─────────────────────────────────────────────────────────────────

def span_is_valid(text: str, suggestion: Suggestion) -> bool:
    """True if the suggestion's offsets still point at its original text."""
    if not suggestion.original:
        return False
    if suggestion.index is None or suggestion.length is None:
        return False
    end = suggestion.index + suggestion.length
    return end <= len(text) and text[suggestion.index:end] == suggestion.original


def locate_suggestions(text: str, suggestions: list[Suggestion]) -> list[Suggestion]:
    """Return copies with index/length set against *text*.

    Valid offsets are kept; otherwise the first occurrence of ``original`` is
    used. Spans not found in the text get index=None.
    """
    located = []
    for s in suggestions:
        if span_is_valid(text, s):
            located.append(s)
            continue
        pos = text.find(s.original) if s.original else -1
        if pos < 0:
            located.append(replace(s, index=None, length=None))
        else:
            located.append(replace(s, index=pos, length=len(s.original)))
    return located


def apply_suggestion(text: str, suggestion: Suggestion) -> str:
    """Replace the suggestion's span in *text* with the correction.

    Uses the stored offsets when they are valid for this exact text, else the
    first occurrence of the original. Text is returned unchanged when the
    original cannot be found.
    """
    if span_is_valid(text, suggestion):
        start = suggestion.index
        end = start + suggestion.length
        return text[:start] + suggestion.suggestion + text[end:]
    if not suggestion.original or suggestion.original not in text:
        return text
    return text.replace(suggestion.original, suggestion.suggestion, 1)
