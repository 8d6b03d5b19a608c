"""
Best-effort recovery of a JSON array from free-form model output.

Models are asked to answer with a bare array but sometimes wrap it in a
markdown fence or add prose around it. Each strategy below proposes one
candidate string; the first candidate that parses to a JSON list wins.
"""

from __future__ import annotations

import json
import re
from typing import Any, Callable

ExtractionStrategy = Callable[[str], str | None]

_FENCED_ARRAY_RE = re.compile(r"```(?:json)?\s*(\[[\s\S]*?\])\s*```")
_BRACKET_SPAN_RE = re.compile(r"\[[\s\S]*\]")


def fenced_block(text: str) -> str | None:
    if "```" not in text:
        return None
    match = _FENCED_ARRAY_RE.search(text)
    return match.group(1) if match else None


def bracket_span(text: str) -> str | None:
    # Greedy: first "[" to last "]".
    match = _BRACKET_SPAN_RE.search(text)
    return match.group(0) if match else None


STRATEGIES: tuple[tuple[str, ExtractionStrategy], ...] = (
    ("fenced_block", fenced_block),
    ("bracket_span", bracket_span),
)


def recover_json_array(text: str | None) -> tuple[list[Any] | None, str | None]:
    """
    Return `(items, strategy_name)` for the first candidate that parses to a list.

    `(None, None)` means nothing usable was found.
    """
    cleaned = (text or "").strip()
    if not cleaned:
        return None, None

    for name, strategy in STRATEGIES:
        candidate = strategy(cleaned)
        if candidate is None:
            continue
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, list):
            return parsed, name
    return None, None
