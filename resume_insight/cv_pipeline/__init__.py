"""Resume pipeline: text extraction (PDF/DOCX), analysis, normalization."""

from resume_insight.cv_pipeline.pipeline import AnalysisPipeline, PipelineStage, build_pipeline, run_analysis_pipeline
from resume_insight.cv_pipeline.text_extractor import extract_text, resolve_media_type

__all__ = [
    "AnalysisPipeline",
    "PipelineStage",
    "build_pipeline",
    "run_analysis_pipeline",
    "extract_text",
    "resolve_media_type",
]
