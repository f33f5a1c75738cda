"""Helper utilities for Resume Insight."""

import json
import re
from typing import Any, Iterable, List, Optional

SENTENCE_DELIMITERS = re.compile(r"[.!?]+")


def split_sentences(text: str) -> List[str]:
    """Split text on runs of '.', '!' or '?'. Sentences are trimmed; empty ones dropped."""
    if not text:
        return []
    return [s.strip() for s in SENTENCE_DELIMITERS.split(text) if s.strip()]


def dedupe_preserving_order(items: Iterable[str]) -> List[str]:
    """Drop repeated and blank strings, keeping the first occurrence of each."""
    return list(dict.fromkeys(s.strip() for s in items if s and str(s).strip()))


def strip_code_fence(text: str) -> str:
    """Remove an optional ```json ... ``` wrapper around an LLM response."""
    raw = (text or "").strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```(?:json)?\s*", "", raw)
        raw = re.sub(r"\s*```$", "", raw)
    return raw


def parse_llm_json(text: str) -> Optional[Any]:
    """Parse JSON from LLM response, stripping markdown code blocks if present."""
    try:
        return json.loads(strip_code_fence(text))
    except json.JSONDecodeError:
        return None
