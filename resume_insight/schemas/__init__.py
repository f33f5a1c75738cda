"""Schema exports."""

from .analysis import Analysis, AnalysisOutcome, Completed, ContactInfo, Failed
from .generative import (
    GenerativeAnalysis,
    GenerativeEducation,
    GenerativeExperience,
    GenerativeSkills,
    JobComparison,
)
from .resume import RawDocument, ResumeRecord, ResumeStatus

__all__ = [
    "Analysis",
    "AnalysisOutcome",
    "Completed",
    "Failed",
    "ContactInfo",
    "GenerativeAnalysis",
    "GenerativeSkills",
    "GenerativeExperience",
    "GenerativeEducation",
    "JobComparison",
    "RawDocument",
    "ResumeRecord",
    "ResumeStatus",
]
