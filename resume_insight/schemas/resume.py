"""Uploaded document and stored resume record schemas."""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from resume_insight.schemas.analysis import Analysis


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RawDocument(BaseModel):
    """Uploaded file as received: bytes, declared media type, original filename."""

    model_config = ConfigDict(frozen=True)

    content: bytes = Field(..., description="Raw file bytes")
    media_type: str = Field(..., description="Declared media type (pdf, msword, docx)")
    filename: str = Field(default="", description="Original filename")


class ResumeStatus(str, Enum):
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ResumeRecord(BaseModel):
    """Stored resume: original bytes plus the latest analysis and its status."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    user_id: str = Field(..., description="Owner of the resume")
    original_filename: str = Field(..., description="Filename as uploaded")
    file_data: bytes = Field(..., description="Original file bytes")
    file_type: str = Field(..., description="Media type of file_data")
    extracted_text: str = Field(default="")
    analysis: Optional[Analysis] = Field(default=None)
    status: ResumeStatus = Field(default=ResumeStatus.PROCESSING)
    failure_reason: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
