"""Extract raw text from uploaded resume files (PDF, DOCX). In-memory only."""

import os
import re
import unicodedata
from io import BytesIO

from resume_insight.config import (
    DOC_MEDIA_TYPE,
    DOCX_MEDIA_TYPE,
    GENERIC_MEDIA_TYPES,
    PDF_MEDIA_TYPE,
    SUPPORTED_MEDIA_TYPES,
)
from resume_insight.errors import ExtractionError
from resume_insight.utils.logger import get_logger

logger = get_logger(__name__)


def _clean_resume_text(text: str) -> str:
    """Normalize unicode (NFC) and collapse excessive whitespace; never truncates."""
    if not text or not text.strip():
        return ""
    t = unicodedata.normalize("NFC", text)
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    return t.strip()


def _extract_pdf(bytes_io: BytesIO) -> str:
    """Extract text from PDF using pdfplumber."""
    try:
        import pdfplumber
    except ImportError as e:
        raise ExtractionError("pdfplumber not installed; install with: pip install pdfplumber") from e
    try:
        with pdfplumber.open(bytes_io) as pdf:
            parts = []
            for page in pdf.pages:
                ptext = page.extract_text()
                if ptext:
                    parts.append(ptext)
            return "\n\n".join(parts)
    except Exception as e:
        logger.warning("PDF extraction failed: %s", e)
        raise ExtractionError(f"Not a readable PDF document: {e}") from e


def _extract_docx(bytes_io: BytesIO) -> str:
    """Extract text from DOCX using python-docx."""
    try:
        from docx import Document
    except ImportError as e:
        raise ExtractionError("python-docx not installed; install with: pip install python-docx") from e
    try:
        doc = Document(bytes_io)
        parts = [p.text for p in doc.paragraphs if p.text.strip()]
        return "\n\n".join(parts)
    except Exception as e:
        logger.warning("DOCX extraction failed: %s", e)
        raise ExtractionError(f"Not a readable DOCX document: {e}") from e


def resolve_media_type(media_type: str, filename: str = "") -> str:
    """Return the effective media type; generic types fall back to the filename extension."""
    mt = (media_type or "").split(";")[0].strip().lower()
    if mt in GENERIC_MEDIA_TYPES:
        ext = os.path.splitext((filename or "").strip().lower())[1]
        return SUPPORTED_MEDIA_TYPES.get(ext, mt)
    return mt


def extract_text(file_bytes: bytes, media_type: str, filename: str = "") -> str:
    """
    Extract and clean text from an uploaded resume.
    Returns the (possibly empty) text of a well-formed document.
    Raises ExtractionError for empty payloads, unsupported types, and corrupt files.
    """
    if not file_bytes:
        raise ExtractionError("Empty payload: nothing to extract")

    mt = resolve_media_type(media_type, filename)
    bio = BytesIO(file_bytes)
    if mt == PDF_MEDIA_TYPE:
        raw = _extract_pdf(bio)
    elif mt == DOCX_MEDIA_TYPE:
        raw = _extract_docx(bio)
    elif mt == DOC_MEDIA_TYPE:
        # Legacy binary Word format is accepted at upload but has no extractor
        raise ExtractionError("Legacy .doc files are not supported; save the resume as PDF or DOCX")
    else:
        raise ExtractionError(f"Unsupported media type: {media_type or '(none)'}")

    text = _clean_resume_text(raw)
    logger.info("Extracted %s chars from %s (%s)", len(text), filename or "upload", mt)
    return text
