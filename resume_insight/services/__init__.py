"""Service exports."""

from .resume_service import ResumeService
from .resume_store import InMemoryResumeStore, ResumeStore
from .upload_validator import validate_upload

__all__ = [
    "ResumeService",
    "ResumeStore",
    "InMemoryResumeStore",
    "validate_upload",
]
