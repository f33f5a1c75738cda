"""Generation layer: external text completion behind a small interface."""

from resume_insight.generation.generation_service import OpenAITextGenerator, TextGenerator, get_text_generator

__all__ = ["TextGenerator", "OpenAITextGenerator", "get_text_generator"]
