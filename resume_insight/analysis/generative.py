"""LLM-based resume analysis, improvement suggestions, and job description comparison."""

import asyncio
from typing import Any, Optional

from pydantic import ValidationError

from resume_insight.analysis.prompts import (
    JOB_COMPARISON_PROMPT,
    RESUME_ANALYSIS_PROMPT,
    RESUME_SUGGESTIONS_PROMPT,
)
from resume_insight.analysis.scoring import coerce_score
from resume_insight.config import GENERATIVE_TIMEOUT_SECONDS, PROMPT_MAX_CHARS
from resume_insight.errors import GenerativeServiceError
from resume_insight.generation.generation_service import TextGenerator
from resume_insight.schemas.generative import GenerativeAnalysis, JobComparison
from resume_insight.utils.helpers import parse_llm_json
from resume_insight.utils.logger import get_logger

logger = get_logger(__name__)

SUGGESTIONS_UNAVAILABLE = "Unable to generate AI suggestions at this time."


def _prompt_text(text: str, max_chars: int = PROMPT_MAX_CHARS) -> str:
    return (text or "")[:max_chars].strip()


class GenerativeAnalyzer:
    """
    Wraps a TextGenerator with the three prompt contracts.
    Every call is bounded by `timeout`; timeouts surface as GenerativeServiceError.
    Responses are untrusted: anything that is not valid JSON of the expected shape is a failure.
    """

    def __init__(
        self,
        generator: TextGenerator,
        timeout: float = GENERATIVE_TIMEOUT_SECONDS,
        max_chars: int = PROMPT_MAX_CHARS,
    ) -> None:
        self._generator = generator
        self._timeout = timeout
        self._max_chars = max_chars

    async def _complete(self, prompt: str) -> str:
        try:
            return await asyncio.wait_for(self._generator.generate(prompt), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise GenerativeServiceError(f"Generative service timed out after {self._timeout}s") from e
        except GenerativeServiceError:
            raise
        except Exception as e:
            raise GenerativeServiceError(f"Generative service call failed: {e}") from e

    async def _complete_json(self, prompt: str) -> dict:
        raw = await self._complete(prompt)
        parsed: Optional[Any] = parse_llm_json(raw)
        if not isinstance(parsed, dict):
            raise GenerativeServiceError("Generative response is not a JSON object")
        return parsed

    async def analyze(self, text: str) -> GenerativeAnalysis:
        """Structured analysis of the resume text. Raises GenerativeServiceError on any failure."""
        prompt = RESUME_ANALYSIS_PROMPT.format(resume_text=_prompt_text(text, self._max_chars))
        parsed = await self._complete_json(prompt)
        try:
            result = GenerativeAnalysis.model_validate(parsed)
        except ValidationError as e:
            raise GenerativeServiceError(f"Generative analysis failed validation: {e}") from e
        logger.info(
            "Generative analysis parsed: technical=%s highlights=%s score=%r",
            len(result.skills.technical or []),
            len(result.experience.highlights),
            result.score,
        )
        return result

    async def suggest_improvements(self, text: str) -> str:
        """Free-text improvement suggestions; a fixed apology message when the service fails."""
        prompt = RESUME_SUGGESTIONS_PROMPT.format(resume_text=_prompt_text(text, self._max_chars))
        try:
            return (await self._complete(prompt)).strip()
        except GenerativeServiceError as e:
            logger.warning("Generative suggestions failed: %s", e)
            return SUGGESTIONS_UNAVAILABLE

    async def compare_to_job(self, text: str, job_description: str) -> JobComparison:
        """Match the resume against a job description. Raises GenerativeServiceError on any failure."""
        if not (job_description or "").strip():
            raise ValueError("Job description is required")
        prompt = JOB_COMPARISON_PROMPT.format(
            resume_text=_prompt_text(text, self._max_chars),
            job_description=_prompt_text(job_description, self._max_chars),
        )
        parsed = await self._complete_json(prompt)
        parsed["match_score"] = coerce_score(parsed.get("match_score"), fallback=0)
        try:
            return JobComparison.model_validate(parsed)
        except ValidationError as e:
            raise GenerativeServiceError(f"Job comparison failed validation: {e}") from e
