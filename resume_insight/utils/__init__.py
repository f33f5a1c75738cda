"""Utility exports."""

from .helpers import dedupe_preserving_order, parse_llm_json, split_sentences, strip_code_fence
from .logger import get_logger

__all__ = [
    "get_logger",
    "split_sentences",
    "dedupe_preserving_order",
    "strip_code_fence",
    "parse_llm_json",
]
