"""Defensive JSON extraction from language-model output.

Model output is free text that is *usually* JSON. Malformed output is an
expected condition, so parsing never raises: it returns a
:class:`JsonParseResult` tagged ``ok`` or malformed.

Stages:

1. strip Markdown code fences and parse the whole text strictly
2. on failure, parse the first ``[...]`` span, then the first ``{...}`` span
"""

import json
import re
from dataclasses import dataclass
from typing import Any

_ARRAY_RE = re.compile(r"\[[\s\S]*\]")
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


@dataclass(frozen=True)
class JsonParseResult:
    ok: bool
    value: Any = None

    @classmethod
    def malformed(cls) -> "JsonParseResult":
        return cls(ok=False)


def strip_code_fences(text: str) -> str:
    return text.replace("```json", "").replace("```", "").strip()


def parse_model_json(text: str | None) -> JsonParseResult:
    """Parse model output into JSON, tolerating fences and chatter."""
    if not text:
        return JsonParseResult.malformed()
    cleaned = strip_code_fences(text)
    try:
        return JsonParseResult(ok=True, value=json.loads(cleaned))
    except json.JSONDecodeError:
        pass

    for pattern in (_ARRAY_RE, _OBJECT_RE):
        match = pattern.search(cleaned)
        if not match:
            continue
        try:
            return JsonParseResult(ok=True, value=json.loads(match.group(0)))
        except json.JSONDecodeError:
            continue
    return JsonParseResult.malformed()


def question_candidates(result: JsonParseResult) -> list[Any]:
    """The list of raw question dicts in a parse result.

    Accepts a bare array or an object wrapping it as ``{"questions": [...]}``;
    anything else gives ``[]``.
    """
    if not result.ok:
        return []
    if isinstance(result.value, list):
        return result.value
    if isinstance(result.value, dict):
        questions = result.value.get("questions")
        if isinstance(questions, list):
            return questions
    return []
