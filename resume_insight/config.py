"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# Generative service – never hardcode keys. Empty key means heuristic-only mode.
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")
GENERATIVE_TIMEOUT_SECONDS: float = _env_float("GENERATIVE_TIMEOUT_SECONDS", 30.0)
GENERATIVE_TEMPERATURE: float = _env_float("GENERATIVE_TEMPERATURE", 0.2)
PROMPT_MAX_CHARS: int = 12000

# Upload limits (4.5 MiB unless overridden)
MAX_FILE_SIZE: int = int(_env_float("MAX_FILE_SIZE", 4.5 * 1024 * 1024))

PDF_MEDIA_TYPE = "application/pdf"
DOC_MEDIA_TYPE = "application/msword"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Extension -> declared media type; the only uploads accepted
SUPPORTED_MEDIA_TYPES: dict = {
    ".pdf": PDF_MEDIA_TYPE,
    ".doc": DOC_MEDIA_TYPE,
    ".docx": DOCX_MEDIA_TYPE,
}
ALLOWED_EXTENSIONS: tuple = tuple(SUPPORTED_MEDIA_TYPES.keys())

# Media types that say nothing about the payload; the filename decides instead
GENERIC_MEDIA_TYPES: tuple = ("", "application/octet-stream", "binary/octet-stream")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
