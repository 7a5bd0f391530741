"""
core/json_cleanup.py
────────────────────────────────────────────────────────────────────────
Text → JSON sanitation for LLM output.

Models like to wrap JSON in markdown fences (```json … ```), add a line of
prose before or after, or get cut off mid-fence. These helpers undo that
without knowing anything about the meal-plan schema.
"""

from __future__ import annotations

import json
import re
from typing import Any

# optional language tag only counts when whitespace follows it
_TAG = r"(?:[A-Za-z][\w+-]*(?=\s))?"
_FENCED_BLOCK = re.compile(r"```" + _TAG + r"\s*(.*?)\s*```", re.DOTALL)
_LEADING_FENCE = re.compile(r"^```" + _TAG)
_TRAILING_FENCE = re.compile(r"```$")


def strip_code_fences(text: str) -> str:
    """
    Return the body of the first fenced block, or – if the fence is not
    closed – the text with any leading/trailing fence marker removed.
    """
    s = text.strip()
    match = _FENCED_BLOCK.search(s)
    if match:
        return match.group(1).strip()
    s = _LEADING_FENCE.sub("", s).strip()
    s = _TRAILING_FENCE.sub("", s)
    return s.strip()


def extract_json_object(text: str) -> str | None:
    """Slice from the first '{' to the last '}' (prose around an object)."""
    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end <= start:
        return None
    return text[start : end + 1]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def loads_strict(text: str) -> Any:
    """`json.loads` minus the NaN / Infinity extensions."""
    return json.loads(text, parse_constant=_reject_constant)
