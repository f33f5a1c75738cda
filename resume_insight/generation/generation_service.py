"""Text generation service: one prompt in, one completion out. OpenAI-backed (config-based)."""

from abc import ABC, abstractmethod
from typing import Optional

import httpx
from openai import AsyncOpenAI, OpenAIError

from resume_insight.config import (
    GENERATIVE_TEMPERATURE,
    GENERATIVE_TIMEOUT_SECONDS,
    MODEL_NAME,
    OPENAI_API_KEY,
    OPENAI_BASE_URL,
)
from resume_insight.errors import GenerativeServiceError
from resume_insight.utils.logger import get_logger

logger = get_logger(__name__)


class TextGenerator(ABC):
    """Abstract completion provider. Implementations raise GenerativeServiceError on failure."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Send a single prompt and return the response text."""
        ...


class OpenAITextGenerator(TextGenerator):
    """Chat completions via the OpenAI SDK (e.g. gpt-4o-mini). No retries: callers fall back instead."""

    def __init__(
        self,
        api_key: str = OPENAI_API_KEY,
        model: str = MODEL_NAME,
        base_url: Optional[str] = OPENAI_BASE_URL or None,
        timeout_s: float = GENERATIVE_TIMEOUT_SECONDS,
        temperature: float = GENERATIVE_TEMPERATURE,
    ) -> None:
        if not (api_key or "").strip():
            raise GenerativeServiceError("OPENAI_API_KEY is missing")
        self._model = model
        self._temperature = temperature
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=httpx.Timeout(timeout_s, connect=min(10.0, timeout_s)),
            max_retries=0,
        )

    async def generate(self, prompt: str) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self._temperature,
            )
        except OpenAIError as e:
            raise GenerativeServiceError(f"OpenAI request failed: {e}") from e
        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message or not choice.message.content:
            raise GenerativeServiceError("OpenAI returned an empty completion")
        return choice.message.content


def get_text_generator(api_key: Optional[str] = None) -> Optional[TextGenerator]:
    """
    Return the configured text generator (dependency injection).
    None when no API key is configured: callers run heuristic-only.
    """
    key = (OPENAI_API_KEY if api_key is None else api_key).strip()
    if not key:
        logger.warning("OPENAI_API_KEY not set; generative analysis disabled, using heuristics only")
        return None
    return OpenAITextGenerator(api_key=key)
