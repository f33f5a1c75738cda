"""Exception and warning types raised across the resume pipeline."""


class ResumeInsightError(Exception):
    """Base class for all Resume Insight errors."""


class ExtractionError(ResumeInsightError):
    """Uploaded bytes are empty, unsupported, or not a well-formed document of the declared type."""


class GenerativeServiceError(ResumeInsightError):
    """External text generation failed: transport error, timeout, or unparseable response."""


class UploadValidationError(ResumeInsightError):
    """Upload rejected before analysis (extension, size, empty payload)."""


class ResumeNotFoundError(ResumeInsightError):
    """No resume with this id belongs to the requesting user."""


class ResumeNotReadyError(ResumeInsightError):
    """Resume has no extracted text yet (still processing or failed)."""


class ScoreCoercionWarning(UserWarning):
    """A generative score was non-numeric or out of range and has been coerced."""
