"""Resume service: upload, background analysis, retrieval, suggestions and job comparison."""

import asyncio
from typing import List, Optional, Set, Tuple

from resume_insight.analysis.generative import GenerativeAnalyzer
from resume_insight.cv_pipeline.pipeline import AnalysisPipeline
from resume_insight.errors import (
    GenerativeServiceError,
    ResumeNotFoundError,
    ResumeNotReadyError,
)
from resume_insight.schemas.analysis import AnalysisOutcome, Completed, Failed
from resume_insight.schemas.generative import JobComparison
from resume_insight.schemas.resume import RawDocument, ResumeRecord, ResumeStatus
from resume_insight.services.resume_store import ResumeStore
from resume_insight.services.upload_validator import validate_upload
from resume_insight.utils.logger import get_logger

logger = get_logger(__name__)


class ResumeService:
    """
    Owns the processing -> completed/failed status lifecycle around AnalysisPipeline.
    Every lookup is scoped to the requesting user; another user's id reads as not found.
    """

    def __init__(
        self,
        store: ResumeStore,
        pipeline: AnalysisPipeline,
        generative: Optional[GenerativeAnalyzer] = None,
    ) -> None:
        self._store = store
        self._pipeline = pipeline
        self._generative = generative if generative is not None else pipeline.generative
        self._pending: Set[asyncio.Task] = set()

    async def _get_owned(self, user_id: str, resume_id: str) -> ResumeRecord:
        record = await self._store.get(resume_id)
        if record is None or record.user_id != user_id:
            raise ResumeNotFoundError(f"Resume not found: {resume_id}")
        return record

    def _schedule(self, resume_id: str) -> asyncio.Task:
        task = asyncio.create_task(self._process_in_background(resume_id))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _process_in_background(self, resume_id: str) -> None:
        try:
            await self.process(resume_id)
        except ResumeNotFoundError:
            logger.warning("Resume %s deleted before analysis started", resume_id)

    async def upload(
        self,
        user_id: str,
        filename: str,
        data: bytes,
        content_type: Optional[str] = None,
    ) -> ResumeRecord:
        """Validate and store the file as `processing`, then analyze it in the background."""
        document = validate_upload(filename, data, content_type)
        record = await self._store.save(
            ResumeRecord(
                user_id=user_id,
                original_filename=document.filename,
                file_data=document.content,
                file_type=document.media_type,
                status=ResumeStatus.PROCESSING,
            )
        )
        logger.info("Resume uploaded: id=%s user=%s file=%s", record.id, user_id, document.filename)
        self._schedule(record.id)
        return record

    async def _record_outcome(self, record: ResumeRecord, outcome: AnalysisOutcome) -> Optional[ResumeRecord]:
        if await self._store.get(record.id) is None:
            logger.warning("Resume %s deleted during analysis; result discarded", record.id)
            return None
        if isinstance(outcome, Completed):
            update = {
                "status": ResumeStatus.COMPLETED,
                "extracted_text": outcome.text,
                "analysis": outcome.analysis,
                "failure_reason": None,
            }
        else:
            update = {
                "status": ResumeStatus.FAILED,
                "extracted_text": "",
                "analysis": None,
                "failure_reason": outcome.reason,
            }
        saved = await self._store.save(record.model_copy(update=update))
        logger.info("Resume %s analysis %s", saved.id, saved.status.value)
        return saved

    async def process(self, resume_id: str) -> Optional[ResumeRecord]:
        """
        Run the pipeline for a stored resume and persist the terminal status.
        A cancelled run is recorded as failed before the cancellation propagates.
        """
        record = await self._store.get(resume_id)
        if record is None:
            raise ResumeNotFoundError(f"Resume not found: {resume_id}")
        document = RawDocument(
            content=record.file_data,
            media_type=record.file_type,
            filename=record.original_filename,
        )
        try:
            outcome = await self._pipeline.run(document)
        except asyncio.CancelledError:
            logger.warning("Analysis of resume %s cancelled", resume_id)
            await self._record_outcome(record, Failed(reason="Analysis cancelled"))
            raise
        except Exception as e:
            logger.exception("Analysis error for resume %s: %s", resume_id, e)
            outcome = Failed(reason=f"Analysis error: {e}")
        return await self._record_outcome(record, outcome)

    async def wait_for_pending(self) -> None:
        """Block until every scheduled background analysis has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def reanalyze(self, user_id: str, resume_id: str) -> Optional[ResumeRecord]:
        """Replace the stored analysis wholesale with a fresh run."""
        record = await self._get_owned(user_id, resume_id)
        await self._store.save(record.model_copy(update={"status": ResumeStatus.PROCESSING, "failure_reason": None}))
        return await self.process(resume_id)

    async def list_resumes(self, user_id: str) -> List[ResumeRecord]:
        return await self._store.list_for_user(user_id)

    async def get_resume(self, user_id: str, resume_id: str) -> ResumeRecord:
        return await self._get_owned(user_id, resume_id)

    async def download(self, user_id: str, resume_id: str) -> Tuple[bytes, str, str]:
        """(file bytes, content type, original filename)."""
        record = await self._get_owned(user_id, resume_id)
        return record.file_data, record.file_type, record.original_filename

    async def delete_resume(self, user_id: str, resume_id: str) -> None:
        await self._get_owned(user_id, resume_id)
        await self._store.delete(resume_id)
        logger.info("Resume deleted: id=%s user=%s", resume_id, user_id)

    async def _text_for_generation(self, user_id: str, resume_id: str) -> str:
        record = await self._get_owned(user_id, resume_id)
        if not record.extracted_text:
            raise ResumeNotReadyError("Resume text not available for analysis")
        if self._generative is None:
            raise GenerativeServiceError("Generative analysis is not configured (OPENAI_API_KEY missing)")
        return record.extracted_text

    async def suggestions(self, user_id: str, resume_id: str) -> str:
        text = await self._text_for_generation(user_id, resume_id)
        return await self._generative.suggest_improvements(text)

    async def compare_with_job(self, user_id: str, resume_id: str, job_description: str) -> JobComparison:
        if not (job_description or "").strip():
            raise ValueError("Job description is required")
        text = await self._text_for_generation(user_id, resume_id)
        return await self._generative.compare_to_job(text, job_description)
