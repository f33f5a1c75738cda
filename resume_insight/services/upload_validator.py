"""Validate an uploaded resume file before it enters the pipeline. No I/O."""

import os
from typing import Optional

from resume_insight.config import ALLOWED_EXTENSIONS, MAX_FILE_SIZE, SUPPORTED_MEDIA_TYPES
from resume_insight.cv_pipeline.text_extractor import resolve_media_type
from resume_insight.errors import UploadValidationError
from resume_insight.schemas.resume import RawDocument


def validate_upload(
    filename: str,
    data: bytes,
    content_type: Optional[str] = None,
    max_size: int = MAX_FILE_SIZE,
) -> RawDocument:
    """
    Check extension (PDF, DOC, DOCX only), emptiness and size.
    The declared content type is trusted when specific; otherwise it is derived from the extension.
    """
    name = (filename or "").strip()
    ext = os.path.splitext(name.lower())[1]
    if ext not in ALLOWED_EXTENSIONS:
        raise UploadValidationError("Only PDF, DOC, and DOCX files are allowed")
    if not data:
        raise UploadValidationError("No file uploaded")
    if len(data) > max_size:
        raise UploadValidationError(f"File too large: {len(data)} bytes (limit {max_size})")

    media_type = resolve_media_type(content_type or "", name) or SUPPORTED_MEDIA_TYPES[ext]
    return RawDocument(content=data, media_type=media_type, filename=name)
