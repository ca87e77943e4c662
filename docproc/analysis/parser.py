"""Tolerant parsing of analyzer completions.

The model is asked for JSON but may wrap it in a code fence, emit trailing
prose or break the syntax. Parsing runs an ordered chain of strategies; each
returns an ``AnalysisResult`` or ``None`` for "no match", and the last one
always matches, so ``parse_analysis`` never raises.
"""

import json
import re
from collections.abc import Callable
from typing import Any

from docproc.analysis.models import RAW_RESPONSE_KEY, RAW_TEXT_KEY, AnalysisResult

_FENCE = "```"
# A language tag is only recognised when it ends the fence line, except for
# the common "```json{" shape.
_OPENING_FENCE = re.compile(r"^```(?:[\w+-]+[ \t]*(?=\r?\n)|json)?", re.IGNORECASE)

ParseStrategy = Callable[[str], AnalysisResult | None]


def parse_analysis(raw: str) -> AnalysisResult:
    """Parse a raw completion into an AnalysisResult, degrading gracefully."""
    cleaned = strip_code_fence(raw)
    for strategy in _STRATEGIES:
        result = strategy(cleaned)
        if result is not None:
            return result
    return raw_passthrough(raw)


def strip_code_fence(raw: str) -> str:
    """Trim whitespace and remove a leading and trailing fenced-code marker."""
    text = raw.strip()
    if text.startswith(_FENCE):
        text = _OPENING_FENCE.sub("", text, count=1)
    if text.endswith(_FENCE):
        text = text[: -len(_FENCE)]
    return text.strip()


def strict_decode(text: str) -> AnalysisResult | None:
    """Decode a well-formed JSON object with ``summary``/``metadata`` fields."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None
    if "summary" not in data and "metadata" not in data:
        return None

    metadata = _coerce_mapping(data.get("metadata"))
    top_level_text = _coerce_value(data.get(RAW_TEXT_KEY))
    if top_level_text and RAW_TEXT_KEY not in metadata:
        metadata[RAW_TEXT_KEY] = top_level_text
    return _build(_coerce_value(data.get("summary")), metadata)


def field_scan(text: str) -> AnalysisResult | None:
    """Recover fields from malformed JSON by scanning for ``"<name>":`` markers."""
    summary = _unescape(extract_field(text, "summary"))
    if not summary:
        return None

    metadata: dict[str, str] = {}
    metadata_span = extract_field(text, "metadata")
    if metadata_span.startswith("{"):
        try:
            metadata = _coerce_mapping(json.loads(metadata_span))
        except json.JSONDecodeError:
            metadata = {}
    raw_text = _unescape(extract_field(text, RAW_TEXT_KEY))
    if raw_text:
        metadata[RAW_TEXT_KEY] = raw_text
    return _build(summary, metadata)


def raw_passthrough(raw: str) -> AnalysisResult:
    """Keep the whole response as the summary so nothing is dropped."""
    return AnalysisResult(summary=raw, metadata={RAW_RESPONSE_KEY: raw})


def extract_field(text: str, field_name: str) -> str:
    """Extract the value following the first ``"<field_name>":`` in ``text``.

    A quoted value runs to the next quote not preceded by a backslash; an
    object value is the balanced-brace span including its braces. Any other
    value, or an unterminated one, yields an empty string.
    """
    marker = f'"{field_name}":'
    start = text.find(marker)
    if start == -1:
        return ""

    pos = start + len(marker)
    while pos < len(text) and text[pos].isspace():
        pos += 1
    if pos >= len(text):
        return ""

    if text[pos] == '"':
        value_start = pos + 1
        end = value_start
        while end < len(text):
            if text[end] == '"' and text[end - 1] != "\\":
                return text[value_start:end]
            end += 1
        return ""

    if text[pos] == "{":
        depth = 0
        for end in range(pos, len(text)):
            if text[end] == "{":
                depth += 1
            elif text[end] == "}":
                depth -= 1
                if depth == 0:
                    return text[pos : end + 1]
        return ""

    return ""


def _build(summary: str, metadata: dict[str, str]) -> AnalysisResult:
    return AnalysisResult(
        summary=summary,
        extracted_text=metadata.get(RAW_TEXT_KEY, ""),
        metadata=metadata,
    )


def _coerce_mapping(raw: Any) -> dict[str, str]:
    if not isinstance(raw, dict):
        return {}
    return {str(key): _coerce_value(value) for key, value in raw.items()}


def _coerce_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ", ".join(_coerce_value(item) for item in value)
    return json.dumps(value, ensure_ascii=False)


def _unescape(value: str) -> str:
    try:
        decoded = json.loads(f'"{value}"')
    except json.JSONDecodeError:
        return value
    return decoded if isinstance(decoded, str) else value


_STRATEGIES: tuple[ParseStrategy, ...] = (strict_decode, field_scan)
