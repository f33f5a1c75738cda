"""Resume analysis pipeline: extract text, analyze (generative first, heuristic fallback), normalize."""

import asyncio
from enum import Enum
from typing import Optional

from resume_insight.analysis.generative import GenerativeAnalyzer
from resume_insight.analysis.heuristic import HeuristicAnalyzer
from resume_insight.analysis.normalize import AnalyzerResult, GenerativeResult, HeuristicResult, normalize_result
from resume_insight.cv_pipeline.text_extractor import extract_text, resolve_media_type
from resume_insight.errors import ExtractionError, GenerativeServiceError
from resume_insight.generation.generation_service import get_text_generator
from resume_insight.schemas.analysis import AnalysisOutcome, Completed, Failed
from resume_insight.schemas.resume import RawDocument
from resume_insight.utils.logger import get_logger

logger = get_logger(__name__)


class PipelineStage(str, Enum):
    EXTRACTING = "extracting"
    ANALYZING = "analyzing"
    NORMALIZING = "normalizing"
    DONE = "done"
    FAILED = "failed"


class AnalysisPipeline:
    """
    One run per uploaded document. Holds no per-run state.
    The generative analyzer is optional: without it every run is heuristic.
    """

    def __init__(
        self,
        generative: Optional[GenerativeAnalyzer] = None,
        heuristic: Optional[HeuristicAnalyzer] = None,
    ) -> None:
        self._generative = generative
        self._heuristic = heuristic or HeuristicAnalyzer()

    @property
    def generative(self) -> Optional[GenerativeAnalyzer]:
        return self._generative

    def _log_stage(self, document: RawDocument, stage: PipelineStage) -> None:
        logger.info("Pipeline %s: %s", stage.value, document.filename or "upload")

    async def _analyze(self, text: str) -> AnalyzerResult:
        if self._generative is not None:
            try:
                return GenerativeResult(await self._generative.analyze(text))
            except GenerativeServiceError as e:
                logger.warning("Generative analysis failed, falling back to heuristic analysis: %s", e)
        return HeuristicResult(self._heuristic.analyze(text))

    async def run(self, document: RawDocument) -> AnalysisOutcome:
        """Extracting -> Analyzing -> Normalizing -> Done; extraction failure ends in Failed."""
        self._log_stage(document, PipelineStage.EXTRACTING)
        try:
            text = extract_text(document.content, document.media_type, document.filename)
        except ExtractionError as e:
            self._log_stage(document, PipelineStage.FAILED)
            logger.warning("Extraction failed for %s: %s", document.filename or "upload", e)
            return Failed(reason=str(e))

        self._log_stage(document, PipelineStage.ANALYZING)
        result = await self._analyze(text)

        self._log_stage(document, PipelineStage.NORMALIZING)
        analysis = normalize_result(result, text, self._heuristic)

        self._log_stage(document, PipelineStage.DONE)
        logger.info(
            "Analysis finished: source=%s skills=%s score=%s",
            analysis.source,
            len(analysis.skills),
            analysis.score,
        )
        return Completed(analysis=analysis, text=text)


def build_pipeline(use_generative: bool = True) -> AnalysisPipeline:
    """Pipeline wired from config; generative analysis only when an API key is set."""
    generator = get_text_generator() if use_generative else None
    generative = GenerativeAnalyzer(generator) if generator is not None else None
    return AnalysisPipeline(generative=generative)


def run_analysis_pipeline(
    file_bytes: bytes,
    filename: str,
    media_type: Optional[str] = None,
    pipeline: Optional[AnalysisPipeline] = None,
) -> AnalysisOutcome:
    """
    Run the full pipeline on an uploaded file.
    Uses asyncio to drive the async pipeline; safe to call from sync context (e.g. CLI).
    """
    document = RawDocument(
        content=file_bytes,
        media_type=resolve_media_type(media_type or "", filename),
        filename=filename,
    )
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete((pipeline or build_pipeline()).run(document))
    finally:
        loop.close()
