import asyncio
import json
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
TESTS_DIR = Path(__file__).resolve().parent
for _path in (PROJECT_ROOT, TESTS_DIR):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

from resume_insight.analysis.generative import GenerativeAnalyzer  # noqa: E402
from resume_insight.config import DOCX_MEDIA_TYPE, PDF_MEDIA_TYPE  # noqa: E402
from resume_insight.cv_pipeline.pipeline import AnalysisPipeline  # noqa: E402
from resume_insight.errors import (  # noqa: E402
    GenerativeServiceError,
    ResumeNotFoundError,
    ResumeNotReadyError,
    UploadValidationError,
)
from resume_insight.generation.generation_service import TextGenerator  # noqa: E402
from resume_insight.schemas.resume import ResumeRecord, ResumeStatus  # noqa: E402
from resume_insight.services.resume_service import ResumeService  # noqa: E402
from resume_insight.services.resume_store import InMemoryResumeStore  # noqa: E402
from resume_insight.services.upload_validator import validate_upload  # noqa: E402
from sample_documents import make_docx  # noqa: E402


class ScriptedGenerator(TextGenerator):
    """Answers each of the three prompt kinds with a canned response."""

    def __init__(self, delay=0.0):
        self.delay = delay

    async def generate(self, prompt):
        if self.delay:
            await asyncio.sleep(self.delay)
        if "Job Description:" in prompt:
            return json.dumps({"match_score": 72, "matching_skills": ["Python"], "missing_skills": ["Kafka"]})
        if "actionable suggestions" in prompt:
            return "1. Quantify achievements."
        return json.dumps({"summary": "Backend developer.", "skills": {"technical": ["Python"]}, "score": 70})


class UploadValidatorTests(unittest.TestCase):
    def test_accepts_resume_extensions_and_resolves_media_type(self):
        document = validate_upload("CV.docx", b"data", "application/octet-stream")
        self.assertEqual(document.media_type, DOCX_MEDIA_TYPE)
        self.assertEqual(validate_upload("cv.pdf", b"data").media_type, PDF_MEDIA_TYPE)

    def test_rejects_bad_uploads(self):
        with self.assertRaises(UploadValidationError):
            validate_upload("notes.txt", b"data")
        with self.assertRaises(UploadValidationError):
            validate_upload("cv.pdf", b"")
        with self.assertRaises(UploadValidationError):
            validate_upload("cv.pdf", b"x" * 11, max_size=10)


class ResumeServiceTests(unittest.IsolatedAsyncioTestCase):
    def make_service(self, generator=None):
        generative = GenerativeAnalyzer(generator) if generator is not None else None
        self.store = InMemoryResumeStore()
        return ResumeService(self.store, AnalysisPipeline(generative=generative))

    async def test_upload_is_processing_then_completed(self):
        service = self.make_service()
        record = await service.upload("user-1", "resume.docx", make_docx())

        self.assertEqual(record.status, ResumeStatus.PROCESSING)
        await service.wait_for_pending()

        stored = await service.get_resume("user-1", record.id)
        self.assertEqual(stored.status, ResumeStatus.COMPLETED)
        self.assertIn("Jane Doe", stored.extracted_text)
        self.assertEqual(stored.analysis.source, "heuristic")
        self.assertEqual(stored.analysis.contact.email, "jane@example.com")

    async def test_unreadable_file_is_marked_failed(self):
        service = self.make_service()
        record = await service.upload("user-1", "resume.pdf", b"definitely not a pdf")
        await service.wait_for_pending()

        stored = await service.get_resume("user-1", record.id)
        self.assertEqual(stored.status, ResumeStatus.FAILED)
        self.assertIsNone(stored.analysis)
        self.assertTrue(stored.failure_reason)
        with self.assertRaises(ResumeNotReadyError):
            await service.suggestions("user-1", record.id)

    async def test_generative_analysis_and_follow_up_prompts(self):
        service = self.make_service(ScriptedGenerator())
        record = await service.upload("user-1", "resume.docx", make_docx())
        await service.wait_for_pending()

        stored = await service.get_resume("user-1", record.id)
        self.assertEqual(stored.analysis.source, "generative")
        self.assertEqual(stored.analysis.skills, ["Python"])
        self.assertEqual(stored.analysis.score, 70)

        self.assertEqual(await service.suggestions("user-1", record.id), "1. Quantify achievements.")
        comparison = await service.compare_with_job("user-1", record.id, "Python and Kafka engineer")
        self.assertEqual(comparison.match_score, 72)
        self.assertEqual(comparison.missing_skills, ["Kafka"])
        with self.assertRaises(ValueError):
            await service.compare_with_job("user-1", record.id, "")

    async def test_follow_up_prompts_need_generative_service(self):
        service = self.make_service()
        record = await service.upload("user-1", "resume.docx", make_docx())
        await service.wait_for_pending()
        with self.assertRaises(GenerativeServiceError):
            await service.suggestions("user-1", record.id)

    async def test_records_are_scoped_to_their_owner(self):
        service = self.make_service()
        data = make_docx()
        first = await service.upload("user-1", "first.docx", data)
        await service.upload("user-2", "other.docx", data)
        await service.wait_for_pending()

        with self.assertRaises(ResumeNotFoundError):
            await service.get_resume("user-2", first.id)
        with self.assertRaises(ResumeNotFoundError):
            await service.delete_resume("user-2", first.id)

        listed = await service.list_resumes("user-1")
        self.assertEqual([r.id for r in listed], [first.id])

        content, content_type, filename = await service.download("user-1", first.id)
        self.assertEqual(content, data)
        self.assertEqual(content_type, DOCX_MEDIA_TYPE)
        self.assertEqual(filename, "first.docx")

        await service.delete_resume("user-1", first.id)
        self.assertEqual(await service.list_resumes("user-1"), [])

    async def test_reanalyze_replaces_analysis(self):
        service = self.make_service()
        record = await service.upload("user-1", "resume.docx", make_docx())
        await service.wait_for_pending()

        refreshed = await service.reanalyze("user-1", record.id)
        self.assertEqual(refreshed.status, ResumeStatus.COMPLETED)
        self.assertEqual(refreshed.analysis, (await service.get_resume("user-1", record.id)).analysis)

    async def test_failed_reanalysis_clears_previous_analysis(self):
        service = self.make_service(ScriptedGenerator())
        record = await service.upload("user-1", "resume.docx", make_docx())
        await service.wait_for_pending()
        self.assertIsNotNone((await service.get_resume("user-1", record.id)).analysis)

        class BrokenPipeline(AnalysisPipeline):
            async def run(self, document):
                raise RuntimeError("pipeline crashed")

        service._pipeline = BrokenPipeline()
        refreshed = await service.reanalyze("user-1", record.id)

        self.assertEqual(refreshed.status, ResumeStatus.FAILED)
        self.assertIn("pipeline crashed", refreshed.failure_reason)
        self.assertIsNone(refreshed.analysis)
        self.assertEqual(refreshed.extracted_text, "")
        with self.assertRaises(ResumeNotReadyError):
            await service.suggestions("user-1", record.id)

    async def test_cancelled_analysis_is_recorded_as_failed(self):
        service = self.make_service(ScriptedGenerator(delay=10.0))
        record = await self.store.save(
            ResumeRecord(
                user_id="user-1",
                original_filename="resume.docx",
                file_data=make_docx(),
                file_type=DOCX_MEDIA_TYPE,
            )
        )

        task = asyncio.create_task(service.process(record.id))
        await asyncio.sleep(0.05)
        task.cancel()
        with self.assertRaises(asyncio.CancelledError):
            await task

        stored = await service.get_resume("user-1", record.id)
        self.assertEqual(stored.status, ResumeStatus.FAILED)
        self.assertEqual(stored.failure_reason, "Analysis cancelled")
        self.assertIsNone(stored.analysis)


if __name__ == "__main__":
    unittest.main()
